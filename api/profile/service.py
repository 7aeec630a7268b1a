import logging

from api.profile.schemas import EducationRequest, ExperienceRequest, ProfileUpsertRequest
from github_client import fetch_latest_repos
from profile_store import (
    attach_users,
    delete_profile,
    find_profile,
    list_profiles,
    prepend_entry,
    remove_entry,
    upsert_profile,
)
from user_store import delete_user
from utils import to_public

logger = logging.getLogger(__name__)


class AccountDeletionIncomplete(Exception):
    """The profile was removed but the user record could not be."""


def _render(profile: dict) -> dict:
    return to_public(attach_users([profile])[0])


def save_user_profile(user_id: str, request: ProfileUpsertRequest) -> dict:
    profile = upsert_profile(user_id, request.profile_fields(), request.social_links())
    return to_public(profile)


def get_user_profile(user_id: str) -> dict | None:
    profile = find_profile(user_id)
    if not profile:
        return None
    return _render(profile)


def get_all_profiles() -> list[dict]:
    return [to_public(p) for p in attach_users(list_profiles())]


def add_experience(user_id: str, request: ExperienceRequest) -> dict:
    return to_public(prepend_entry(user_id, "experience", request.to_document()))


def delete_experience(user_id: str, exp_id: str) -> dict:
    return to_public(remove_entry(user_id, "experience", exp_id))


def add_education(user_id: str, request: EducationRequest) -> dict:
    return to_public(prepend_entry(user_id, "education", request.to_document()))


def delete_education(user_id: str, edu_id: str) -> dict:
    return to_public(remove_entry(user_id, "education", edu_id))


def delete_account(user_id: str) -> None:
    """Delete the profile, then the user.

    The two deletes are not atomic. If the second fails the profile stays
    deleted and AccountDeletionIncomplete is raised; repeating the request
    finishes the job because both deletes are idempotent.
    """
    profile_deleted = delete_profile(user_id)
    try:
        delete_user(user_id)
    except Exception as exc:
        logger.warning(
            "Account deletion incomplete user=%s profile_deleted=%s", user_id, profile_deleted
        )
        raise AccountDeletionIncomplete(user_id) from exc
    logger.info("Deleted account user=%s profile_deleted=%s", user_id, profile_deleted)


def get_github_repos(username: str) -> list | dict:
    return fetch_latest_repos(username)
