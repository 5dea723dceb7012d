# studyhub/schemas/user.py
from pydantic import EmailStr

from studyhub.schemas.base import CamelModel


class UserUpsert(CamelModel):
    id: str
    email: EmailStr | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
