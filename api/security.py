import logging

from fastapi import Depends, Header, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.errors import ApiError, server_error
from tokens import decode_access_token
from user_store import find_user_by_id

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(msg: str) -> ApiError:
    return ApiError(status.HTTP_401_UNAUTHORIZED, msg)


def get_token(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    x_auth_token: str | None = Header(default=None, alias="x-auth-token"),
) -> str:
    if credentials and credentials.credentials:
        return credentials.credentials
    if x_auth_token:
        return x_auth_token
    raise _unauthorized("No token, authorization denied")


def get_current_user(token: str = Depends(get_token)) -> dict:
    """Resolve the caller's user document from the bearer token."""
    try:
        payload = decode_access_token(token)
    except ValueError:
        raise _unauthorized("Token is not valid") from None
    except RuntimeError as exc:
        logger.error("Token verification unavailable: %s", exc)
        raise server_error() from exc

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Token is not valid")

    try:
        user = find_user_by_id(user_id)
    except Exception as exc:
        logger.exception("Failed to load user for token sub=%s", user_id)
        raise server_error() from exc
    if not user:
        raise _unauthorized("Token is not valid")
    return user


def get_current_user_id(user: dict = Depends(get_current_user)) -> str:
    return str(user["_id"])
