import logging

from api.users.schemas import UserRegisterRequest
from passwords import hash_password
from user_store import EmailAlreadyRegistered, create_user, find_user_by_email
from utils import gravatar_url

logger = logging.getLogger(__name__)


def register_user(request: UserRegisterRequest) -> str:
    if find_user_by_email(request.email):
        raise EmailAlreadyRegistered(request.email)

    user_id = create_user(
        name=request.name,
        email=request.email,
        password_hash=hash_password(request.password),
        avatar=gravatar_url(request.email),
    )
    logger.info("Registered user id=%s", user_id)
    return user_id
