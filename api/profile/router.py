import logging

from fastapi import APIRouter, Depends, status

from api.errors import ApiError, bad_request, server_error
from api.profile.schemas import (
    EducationRequest,
    ExperienceRequest,
    MessageResponse,
    ProfileUpsertRequest,
)
from api.security import get_current_user_id
from github_client import GithubProfileNotFound
from profile_store import EntryNotFound, ProfileNotFound
from .service import (
    add_education,
    add_experience,
    delete_account,
    delete_education,
    delete_experience,
    get_all_profiles,
    get_github_repos,
    get_user_profile,
    save_user_profile,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profiles")

NO_PROFILE = "There is no profile for this User"


@router.get("/me")
def get_my_profile_route(user_id: str = Depends(get_current_user_id)):
    try:
        profile = get_user_profile(user_id)
        if not profile:
            raise bad_request(NO_PROFILE)
        return profile
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Failed to load profile user=%s", user_id)
        raise server_error() from exc


@router.post("")
def save_profile_route(request: ProfileUpsertRequest, user_id: str = Depends(get_current_user_id)):
    try:
        return save_user_profile(user_id, request)
    except ProfileNotFound:
        raise bad_request(NO_PROFILE) from None
    except Exception as exc:
        logger.exception("Failed to save profile user=%s", user_id)
        raise server_error() from exc


@router.get("")
def list_profiles_route():
    try:
        return get_all_profiles()
    except Exception as exc:
        logger.exception("Failed to list profiles")
        raise server_error() from exc


@router.get("/user/{user_id}")
def get_profile_by_user_route(user_id: str):
    try:
        profile = get_user_profile(user_id)
        if not profile:
            raise bad_request("Profile not found")
        return profile
    except ApiError:
        raise
    except Exception as exc:
        logger.exception("Failed to load profile user=%s", user_id)
        raise server_error() from exc


@router.delete("", response_model=MessageResponse)
def delete_account_route(user_id: str = Depends(get_current_user_id)):
    try:
        delete_account(user_id)
        return MessageResponse(msg="User Deleted")
    except Exception as exc:
        logger.exception("Failed to delete account user=%s", user_id)
        raise server_error() from exc


@router.put("/experience")
def add_experience_route(request: ExperienceRequest, user_id: str = Depends(get_current_user_id)):
    try:
        return add_experience(user_id, request)
    except ProfileNotFound:
        raise bad_request(NO_PROFILE) from None
    except Exception as exc:
        logger.exception("Failed to add experience user=%s", user_id)
        raise server_error() from exc


@router.delete("/experience/{exp_id}")
def delete_experience_route(exp_id: str, user_id: str = Depends(get_current_user_id)):
    try:
        return delete_experience(user_id, exp_id)
    except ProfileNotFound:
        raise bad_request(NO_PROFILE) from None
    except EntryNotFound:
        raise bad_request("Experience not found") from None
    except Exception as exc:
        logger.exception("Failed to delete experience id=%s user=%s", exp_id, user_id)
        raise server_error() from exc


@router.put("/education")
def add_education_route(request: EducationRequest, user_id: str = Depends(get_current_user_id)):
    try:
        return add_education(user_id, request)
    except ProfileNotFound:
        raise bad_request(NO_PROFILE) from None
    except Exception as exc:
        logger.exception("Failed to add education user=%s", user_id)
        raise server_error() from exc


@router.delete("/education/{edu_id}")
def delete_education_route(edu_id: str, user_id: str = Depends(get_current_user_id)):
    try:
        return delete_education(user_id, edu_id)
    except ProfileNotFound:
        raise bad_request(NO_PROFILE) from None
    except EntryNotFound:
        raise bad_request("Education not found") from None
    except Exception as exc:
        logger.exception("Failed to delete education id=%s user=%s", edu_id, user_id)
        raise server_error() from exc


@router.get("/github/{username}")
def github_repos_route(username: str):
    try:
        return get_github_repos(username)
    except GithubProfileNotFound:
        raise ApiError(status.HTTP_404_NOT_FOUND, "No Github profile found") from None
    except Exception as exc:
        logger.exception("GitHub lookup failed for username=%s", username)
        raise server_error() from exc
