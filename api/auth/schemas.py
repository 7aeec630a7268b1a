from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    email: str = Field(default="", validate_default=True)
    password: str = Field(default="", validate_default=True)

    @field_validator("email")
    @classmethod
    def email_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please include a valid email")
        return value

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Password is required")
        return value


class TokenResponse(BaseModel):
    token: str
