"""
Request payload schemas
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, ValidationError, field_validator

from blog_backend.errors import BadRequest

__all__ = ['CredentialsPayload', 'PostPayload', 'MessagePayload', 'ValidatedMessagePayload', 'parse_payload']


class CredentialsPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    username: str
    password: str

    @field_validator('username', 'password')
    @classmethod
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError('must not be empty')
        return v

    @field_validator('username')
    @classmethod
    def strip(cls, v):
        return v.strip()


class PostPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    title: str
    content: str
    image: str

    @field_validator('title', 'content', 'image')
    @classmethod
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError('must not be empty')
        return v

    @field_validator('title', 'image')
    @classmethod
    def strip(cls, v):
        return v.strip()


class MessagePayload(BaseModel):
    model_config = ConfigDict(extra='ignore', coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    phonenumber: Optional[str] = None


class ValidatedMessagePayload(MessagePayload):
    """Contact message whose sender address must be well formed."""
    email: EmailStr


def parse_payload(schema, data, message):
    """Validate ``data`` against ``schema`` or raise BadRequest with ``message``."""
    try:
        return schema.model_validate(data or {})
    except ValidationError:
        raise BadRequest(message) from None
