# studyhub/db/init_db.py
import logging

from sqlalchemy.orm import Session

from studyhub.db.base import Base
from studyhub.db.session import engine
from studyhub.models.category import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "Mathematics", "description": "Algebra, Geometry, Calculus", "icon": "calculator", "color": "blue"},
    {"name": "Science", "description": "Physics, Chemistry, Biology", "icon": "microscope", "color": "green"},
    {"name": "History", "description": "World History, Ancient Civilizations", "icon": "monument", "color": "purple"},
    {"name": "Literature", "description": "Classic Literature, Poetry, Essays", "icon": "book", "color": "amber"},
]


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)


def seed_default_categories(db: Session) -> int:
    """
    Insert the default categories, but only into an empty table.
    Returns how many rows were inserted.
    """
    if db.query(Category.id).first() is not None:
        return 0

    db.add_all(Category(**data) for data in DEFAULT_CATEGORIES)
    db.commit()
    logger.info(f"Seeded {len(DEFAULT_CATEGORIES)} default categories")
    return len(DEFAULT_CATEGORIES)
