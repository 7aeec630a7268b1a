from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

from database import USERS, get_collection


class EmailAlreadyRegistered(Exception):
    pass


def to_object_id(value: str | ObjectId) -> ObjectId | None:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def normalize_email(email: str) -> str:
    return email.strip().lower()


def find_user_by_email(email: str) -> dict | None:
    return get_collection(USERS).find_one({"email": normalize_email(email)})


def find_user_by_id(user_id: str | ObjectId) -> dict | None:
    oid = to_object_id(user_id)
    if oid is None:
        return None
    return get_collection(USERS).find_one({"_id": oid})


def find_users_by_ids(user_ids: list[ObjectId]) -> dict[ObjectId, dict]:
    if not user_ids:
        return {}
    cursor = get_collection(USERS).find(
        {"_id": {"$in": list(set(user_ids))}},
        {"name": 1, "avatar": 1},
    )
    return {doc["_id"]: doc for doc in cursor}


def create_user(*, name: str, email: str, password_hash: str, avatar: str) -> str:
    payload = {
        "name": name,
        "email": normalize_email(email),
        "password": password_hash,
        "avatar": avatar,
        "date": datetime.now(timezone.utc),
    }
    try:
        result = get_collection(USERS).insert_one(payload)
    except DuplicateKeyError as exc:
        raise EmailAlreadyRegistered(payload["email"]) from exc
    return str(result.inserted_id)


def delete_user(user_id: str | ObjectId) -> bool:
    oid = to_object_id(user_id)
    if oid is None:
        return False
    result = get_collection(USERS).delete_one({"_id": oid})
    return result.deleted_count > 0
