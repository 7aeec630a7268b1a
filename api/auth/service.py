from api.auth.schemas import LoginRequest
from passwords import verify_password
from tokens import create_access_token
from user_store import find_user_by_email


class InvalidCredentials(Exception):
    pass


def login(request: LoginRequest) -> str:
    user = find_user_by_email(request.email)
    if not user or not verify_password(user.get("password", ""), request.password):
        raise InvalidCredentials(request.email)
    return create_access_token(str(user["_id"]))
