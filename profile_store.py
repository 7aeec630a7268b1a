import logging
from datetime import datetime, timezone

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from database import PROFILES, get_collection
from user_store import find_users_by_ids, to_object_id

logger = logging.getLogger(__name__)

SUB_RESOURCES = ("experience", "education")


class ProfileNotFound(Exception):
    pass


class EntryNotFound(Exception):
    pass


def _collection():
    return get_collection(PROFILES)


def _merge_profile(user_oid: ObjectId, fields: dict, social: dict) -> dict:
    update = dict(fields)
    for network, url in social.items():
        update[f"social.{network}"] = url
    if update:
        profile = _collection().find_one_and_update(
            {"user": user_oid},
            {"$set": update},
            return_document=ReturnDocument.AFTER,
        )
    else:
        profile = _collection().find_one({"user": user_oid})
    if profile is None:
        # Deleted between the existence check and the update.
        raise ProfileNotFound(str(user_oid))
    return profile


def upsert_profile(user_id: str, fields: dict, social: dict) -> dict:
    """Create the caller's profile, or merge the supplied fields into it.

    Only keys present in ``fields`` and ``social`` are written. Social links
    are set one network at a time, so links that are not supplied keep their
    stored values. Experience and education are never touched here.
    """
    user_oid = to_object_id(user_id)
    if user_oid is None:
        raise ProfileNotFound(user_id)

    if _collection().find_one({"user": user_oid}, {"_id": 1}):
        logger.info("Merging profile fields user=%s keys=%s", user_id, sorted(fields))
        return _merge_profile(user_oid, fields, social)

    payload = {
        "user": user_oid,
        **fields,
        "social": dict(social),
        "experience": [],
        "education": [],
        "date": datetime.now(timezone.utc),
    }
    try:
        result = _collection().insert_one(payload)
    except DuplicateKeyError:
        # Lost a create race with another request for the same user.
        logger.info("Profile created concurrently, merging instead user=%s", user_id)
        return _merge_profile(user_oid, fields, social)
    logger.info("Created profile user=%s", user_id)
    return _collection().find_one({"_id": result.inserted_id})


def find_profile(user_id: str | ObjectId) -> dict | None:
    user_oid = to_object_id(user_id)
    if user_oid is None:
        return None
    return _collection().find_one({"user": user_oid})


def list_profiles() -> list[dict]:
    return list(_collection().find())


def attach_users(profiles: list[dict]) -> list[dict]:
    """Replace each profile's ``user`` reference with the owner's name and avatar."""
    users = find_users_by_ids([p["user"] for p in profiles if p.get("user")])
    populated = []
    for profile in profiles:
        doc = dict(profile)
        owner = users.get(doc.get("user"))
        if owner is not None:
            doc["user"] = {
                "_id": owner["_id"],
                "name": owner.get("name"),
                "avatar": owner.get("avatar"),
            }
        populated.append(doc)
    return populated


def prepend_entry(user_id: str, list_name: str, entry: dict) -> dict:
    if list_name not in SUB_RESOURCES:
        raise ValueError(f"Unknown profile list: {list_name}")

    user_oid = to_object_id(user_id)
    if user_oid is None:
        raise ProfileNotFound(user_id)

    record = {"_id": ObjectId(), **entry}
    profile = _collection().find_one_and_update(
        {"user": user_oid},
        {"$push": {list_name: {"$each": [record], "$position": 0}}},
        return_document=ReturnDocument.AFTER,
    )
    if profile is None:
        raise ProfileNotFound(user_id)
    logger.info("Added %s entry id=%s user=%s", list_name, record["_id"], user_id)
    return profile


def remove_entry(user_id: str, list_name: str, entry_id: str) -> dict:
    """Remove exactly one sub-entry by identifier.

    Raises ProfileNotFound when the caller has no profile and EntryNotFound
    when no entry carries ``entry_id``; an unmatched id never succeeds silently.
    """
    if list_name not in SUB_RESOURCES:
        raise ValueError(f"Unknown profile list: {list_name}")

    user_oid = to_object_id(user_id)
    if user_oid is None:
        raise ProfileNotFound(user_id)

    entry_oid = to_object_id(entry_id)
    if entry_oid is not None:
        profile = _collection().find_one_and_update(
            {"user": user_oid, f"{list_name}._id": entry_oid},
            {"$pull": {list_name: {"_id": entry_oid}}},
            return_document=ReturnDocument.AFTER,
        )
        if profile is not None:
            logger.info("Removed %s entry id=%s user=%s", list_name, entry_id, user_id)
            return profile

    if _collection().find_one({"user": user_oid}, {"_id": 1}) is None:
        raise ProfileNotFound(user_id)
    raise EntryNotFound(entry_id)


def delete_profile(user_id: str | ObjectId) -> bool:
    user_oid = to_object_id(user_id)
    if user_oid is None:
        return False
    result = _collection().delete_one({"user": user_oid})
    return result.deleted_count > 0
