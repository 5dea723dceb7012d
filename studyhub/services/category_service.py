# studyhub/services/category_service.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from studyhub.models.category import Category
from studyhub.models.question import Question
from studyhub.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def list_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category(db: Session, category_id: int) -> Optional[Category]:
    return db.get(Category, category_id)


def create_category(db: Session, *, obj_in: CategoryCreate) -> Category:
    """
    Insert a category. A duplicate name surfaces as IntegrityError from the commit.
    """
    db_obj = Category(**obj_in.model_dump())
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    logger.info(f"Created category {db_obj.id} ({db_obj.name!r})")
    return db_obj


def update_category(
    db: Session,
    category_id: int,
    *,
    obj_in: CategoryUpdate,
) -> Optional[Category]:
    """
    Apply only the fields present in the request body.
    Returns None if the category does not exist.
    """
    db_obj = get_category(db, category_id)
    if db_obj is None:
        return None

    update_data = obj_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    logger.info(f"Updated category {category_id}: {sorted(update_data)}")
    return db_obj


def has_questions(db: Session, category_id: int) -> bool:
    return (
        db.query(Question.id)
        .filter(Question.category_id == category_id)
        .first()
        is not None
    )


def delete_category(db: Session, category_id: int) -> bool:
    """
    Delete a category that no question references.

    Returns False, without raising, when questions still point at it or when
    nothing was deleted. Callers that need to tell the two apart check
    existence first.
    """
    if has_questions(db, category_id):
        logger.info(f"Refusing to delete category {category_id}: it still has questions")
        return False

    deleted = (
        db.query(Category)
        .filter(Category.id == category_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info(f"Deleted category {category_id}")
    return deleted > 0
