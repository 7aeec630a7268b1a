"""
JWT helpers for the bearer tokens that identify the caller.
"""

import os
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from dotenv import load_dotenv
from jose import JWTError, jwt


def _require_secret() -> str:
    load_dotenv()
    secret = os.getenv("JWT_SECRET")
    if not secret:
        raise RuntimeError("Missing JWT_SECRET. Add it to your environment or .env file.")
    return secret


def _algorithm() -> str:
    load_dotenv()
    return os.getenv("JWT_ALGORITHM", "HS256")


def create_access_token(user_id: str, expires_minutes: int | None = None) -> str:
    """
    Create a signed access token for ``user_id``.

    The token carries ``sub`` (the user id), ``exp`` and a random ``jti``.
    """
    load_dotenv()
    minutes = expires_minutes or int(os.getenv("JWT_EXPIRE_MINUTES", "6000"))
    claims: dict[str, Any] = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=minutes),
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(claims, _require_secret(), algorithm=_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate an access token.

    Raises:
        ValueError: If the signature or expiry check fails.
    """
    secret = _require_secret()
    try:
        return jwt.decode(token, secret, algorithms=[_algorithm()])
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
