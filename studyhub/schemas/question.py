# studyhub/schemas/question.py
from datetime import datetime

from pydantic import ConfigDict

from studyhub.schemas.base import CamelModel, PartialUpdate
from studyhub.schemas.category import CategoryPublic


class QuestionBase(CamelModel):
    title: str
    content: str
    answer: str
    category_id: int


class QuestionCreate(QuestionBase):
    pass


class QuestionUpdate(PartialUpdate):
    title: str | None = None
    content: str | None = None
    answer: str | None = None
    category_id: int | None = None


class QuestionPublic(QuestionBase):
    id: int
    views: int
    created_at: datetime
    updated_at: datetime


class QuestionWithCategory(QuestionPublic):
    """Read model: a question joined with its category at query time."""

    category: CategoryPublic

    model_config = ConfigDict(frozen=True)
