from datetime import date, datetime, time, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils import clean_optional_text, split_skills

PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")
SOCIAL_NETWORKS = ("youtube", "facebook", "twitter", "instagram", "linkedin")


def _required(value: str | None, message: str) -> str:
    cleaned = clean_optional_text(value)
    if not cleaned:
        raise ValueError(message)
    return cleaned


def _as_datetime(value: date | None) -> datetime | None:
    if value is None:
        return None
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


class ProfileUpsertRequest(BaseModel):
    """Partial profile update; only non-empty fields are written."""

    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str = Field(default="", validate_default=True)
    githubusername: str | None = None
    skills: str = Field(default="", validate_default=True, description="Comma-separated list, e.g. 'python, fastapi'")
    youtube: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    linkedin: str | None = None

    @field_validator("status")
    @classmethod
    def status_required(cls, value: str) -> str:
        return _required(value, "Status is required")

    @field_validator("skills")
    @classmethod
    def skills_required(cls, value: str) -> str:
        if not split_skills(value or ""):
            raise ValueError("Skills is required")
        return value

    def profile_fields(self) -> dict:
        fields = {}
        for name in PROFILE_FIELDS:
            value = clean_optional_text(getattr(self, name))
            if value:
                fields[name] = value
        fields["skills"] = split_skills(self.skills)
        return fields

    def social_links(self) -> dict:
        links = {}
        for network in SOCIAL_NETWORKS:
            value = clean_optional_text(getattr(self, network))
            if value:
                links[network] = value
        return links


class SubEntryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: date = Field(alias="from")
    to: date | None = None
    current: bool = False
    description: str | None = None

    @field_validator("to", mode="before")
    @classmethod
    def blank_to_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("description")
    @classmethod
    def clean_description(cls, value: str | None) -> str | None:
        return clean_optional_text(value) or None

    def to_document(self) -> dict:
        doc = self.model_dump(exclude={"from_", "to"}, exclude_none=True)
        doc["from"] = _as_datetime(self.from_)
        if self.to is not None:
            doc["to"] = _as_datetime(self.to)
        return doc


class ExperienceRequest(SubEntryRequest):
    title: str = Field(default="", validate_default=True)
    company: str = Field(default="", validate_default=True)
    location: str | None = None

    @field_validator("location")
    @classmethod
    def clean_location(cls, value: str | None) -> str | None:
        return clean_optional_text(value) or None

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        return _required(value, "Title is required")

    @field_validator("company")
    @classmethod
    def company_required(cls, value: str) -> str:
        return _required(value, "Company is required")


class EducationRequest(SubEntryRequest):
    school: str = Field(default="", validate_default=True)
    degree: str = Field(default="", validate_default=True)
    fieldofstudy: str = Field(default="", validate_default=True)

    @field_validator("school")
    @classmethod
    def school_required(cls, value: str) -> str:
        return _required(value, "School is required")

    @field_validator("degree")
    @classmethod
    def degree_required(cls, value: str) -> str:
        return _required(value, "Degree is required")

    @field_validator("fieldofstudy")
    @classmethod
    def fieldofstudy_required(cls, value: str) -> str:
        return _required(value, "Field of study is required")


class MessageResponse(BaseModel):
    msg: str
