from .user import User
from .session import WebSession
from .category import Category
from .question import Question

__all__ = [
    "User",
    "WebSession",
    "Category",
    "Question",
]
