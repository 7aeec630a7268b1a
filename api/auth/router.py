import logging

from fastapi import APIRouter, Depends

from api.auth.schemas import LoginRequest, TokenResponse
from api.errors import bad_request, server_error
from api.security import get_current_user
from utils import to_public
from .service import InvalidCredentials, login

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth")


@router.get("")
def current_user_route(user: dict = Depends(get_current_user)):
    return to_public(user)


@router.post("", response_model=TokenResponse)
def login_route(request: LoginRequest):
    try:
        return TokenResponse(token=login(request))
    except InvalidCredentials:
        raise bad_request("Invalid credentials") from None
    except Exception as exc:
        logger.exception("Login failed")
        raise server_error() from exc
