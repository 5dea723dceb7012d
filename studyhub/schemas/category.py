# studyhub/schemas/category.py
from datetime import datetime

from pydantic import ConfigDict

from studyhub.schemas.base import CamelModel, PartialUpdate


class CategoryBase(CamelModel):
    name: str
    description: str
    icon: str = "folder"
    color: str = "blue"


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(PartialUpdate):
    name: str | None = None
    description: str | None = None
    icon: str | None = None
    color: str | None = None


class CategoryPublic(CategoryBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(frozen=True)
