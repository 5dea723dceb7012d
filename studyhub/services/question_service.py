# studyhub/services/question_service.py
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, Query

from studyhub.models.category import Category
from studyhub.models.question import Question
from studyhub.models.utils import utcnow
from studyhub.schemas.category import CategoryPublic
from studyhub.schemas.question import (
    QuestionCreate,
    QuestionUpdate,
    QuestionWithCategory,
)

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


def _with_category(db: Session) -> Query:
    return (
        db.query(Question, Category)
        .join(Category, Question.category_id == Category.id)
    )


def _newest_first(query: Query) -> Query:
    # id breaks ties between rows created within the same clock tick
    return query.order_by(Question.created_at.desc(), Question.id.desc())


def _to_projection(question: Question, category: Category) -> QuestionWithCategory:
    return QuestionWithCategory(
        id=question.id,
        title=question.title,
        content=question.content,
        answer=question.answer,
        category_id=question.category_id,
        views=question.views,
        created_at=question.created_at,
        updated_at=question.updated_at,
        category=CategoryPublic.model_validate(category),
    )


def _escape_like(text: str) -> str:
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def list_questions(db: Session) -> List[QuestionWithCategory]:
    rows = _newest_first(_with_category(db)).all()
    return [_to_projection(q, c) for q, c in rows]


def list_questions_by_category(
    db: Session,
    category_id: int,
) -> List[QuestionWithCategory]:
    rows = _newest_first(
        _with_category(db).filter(Question.category_id == category_id)
    ).all()
    return [_to_projection(q, c) for q, c in rows]


def search_questions(db: Session, query: str) -> List[QuestionWithCategory]:
    """
    Case-insensitive substring match on title, content or answer.
    An empty query matches nothing.
    """
    if not query or not query.strip():
        return []

    pattern = f"%{_escape_like(query)}%"
    rows = _newest_first(
        _with_category(db).filter(
            or_(
                Question.title.ilike(pattern, escape=_LIKE_ESCAPE),
                Question.content.ilike(pattern, escape=_LIKE_ESCAPE),
                Question.answer.ilike(pattern, escape=_LIKE_ESCAPE),
            )
        )
    ).all()
    return [_to_projection(q, c) for q, c in rows]


def get_question(db: Session, question_id: int) -> Optional[QuestionWithCategory]:
    """Does not touch the view counter, see increment_views."""
    row = _with_category(db).filter(Question.id == question_id).first()
    if row is None:
        return None
    return _to_projection(*row)


def create_question(db: Session, *, obj_in: QuestionCreate) -> Question:
    """
    Insert a question with views=0. An unknown category_id is rejected by the
    foreign key and surfaces as IntegrityError from the commit.
    """
    db_obj = Question(
        title=obj_in.title,
        content=obj_in.content,
        answer=obj_in.answer,
        category_id=obj_in.category_id,
        views=0,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    logger.info(f"Created question {db_obj.id} in category {db_obj.category_id}")
    return db_obj


def update_question(
    db: Session,
    question_id: int,
    *,
    obj_in: QuestionUpdate,
) -> Optional[Question]:
    db_obj = db.get(Question, question_id)
    if db_obj is None:
        return None

    update_data = obj_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_obj, field, value)
    db_obj.updated_at = utcnow()
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    logger.info(f"Updated question {question_id}: {sorted(update_data)}")
    return db_obj


def delete_question(db: Session, question_id: int) -> bool:
    deleted = (
        db.query(Question)
        .filter(Question.id == question_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info(f"Deleted question {question_id}")
    return deleted > 0


def increment_views(db: Session, question_id: int) -> None:
    """
    views = views + 1 evaluated by the database, so concurrent readers never
    lose an increment. Unknown ids update zero rows.
    """
    db.query(Question).filter(Question.id == question_id).update(
        {Question.views: Question.views + 1},
        synchronize_session=False,
    )
    db.commit()
