# studyhub/schemas/auth.py
from pydantic import BaseModel

from studyhub.schemas.base import CamelModel


class LoginRequest(BaseModel):
    # presence is checked by the route so a missing field is a 400, not a validation error
    email: str | None = None
    password: str | None = None


class SessionUser(CamelModel):
    email: str


class MessageResponse(CamelModel):
    message: str


class LoginResponse(MessageResponse):
    user: SessionUser


class AuthStatus(CamelModel):
    is_authenticated: bool
    user: SessionUser | None = None
