from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

PASSWORD_MIN_LENGTH = 6


class UserRegisterRequest(BaseModel):
    name: str = Field(default="", validate_default=True, description="Display name")
    email: str = Field(default="", validate_default=True, description="Unique login email")
    password: str = Field(default="", validate_default=True, description="Plain-text password, hashed before storage")

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Please include a valid email") from None
        return value.strip()

    @field_validator("password")
    @classmethod
    def password_length(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Please enter a password with {PASSWORD_MIN_LENGTH} or more characters")
        return value


class UserRegisterResponse(BaseModel):
    msg: str
