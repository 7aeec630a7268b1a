import hashlib
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlencode

from bson import ObjectId

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar"
GRAVATAR_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}

# Never rendered to clients.
PRIVATE_KEYS = {"password"}


def clean_optional_text(value: str | None) -> str:
    if value is None:
        return ""
    return value.strip()


def split_skills(value: str) -> list[str]:
    return [skill.strip() for skill in value.split(",") if skill.strip()]


def gravatar_url(email: str) -> str:
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE_URL}/{digest}?{urlencode(GRAVATAR_OPTIONS)}"


def to_public(value: Any) -> Any:
    """Render a MongoDB document as JSON-safe data.

    ``_id`` keys become ``id``, ObjectIds become strings and datetimes become
    ISO-8601 UTC strings with an offset, recursively.
    """
    if isinstance(value, dict):
        doc = {}
        for key, item in value.items():
            if key in PRIVATE_KEYS:
                continue
            doc["id" if key == "_id" else key] = to_public(item)
        return doc
    if isinstance(value, list):
        return [to_public(item) for item in value]
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        # Mongo stores UTC; naive values come from clients built without tz_aware.
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()
    return value
