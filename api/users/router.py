import logging

from fastapi import APIRouter

from api.errors import bad_request, server_error
from api.users.schemas import UserRegisterRequest, UserRegisterResponse
from user_store import EmailAlreadyRegistered
from .service import register_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users")


@router.post("", response_model=UserRegisterResponse)
def register_route(request: UserRegisterRequest):
    try:
        register_user(request)
        return UserRegisterResponse(msg="User registered")
    except EmailAlreadyRegistered:
        raise bad_request("User already exists") from None
    except Exception as exc:
        logger.exception("User registration failed")
        raise server_error() from exc
