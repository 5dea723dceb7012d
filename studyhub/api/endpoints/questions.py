# studyhub/api/endpoints/questions.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studyhub.api.deps import get_db, require_auth
from studyhub.schemas.question import (
    QuestionCreate,
    QuestionPublic,
    QuestionUpdate,
    QuestionWithCategory,
)
from studyhub.services import question_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions", tags=["questions"])


def _storage_failure(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )


def _parse_category_id(raw: str) -> int:
    # parsed only once search has been ruled out, so ?search= ignores a bad value
    try:
        return int(raw)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid question data",
        )


@router.get("", response_model=List[QuestionWithCategory])
def list_questions(
    category: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """
    ?search= wins over ?category= when both are given; an empty value counts
    as absent.
    """
    try:
        if search:
            return question_service.search_questions(db, search)
        if category:
            return question_service.list_questions_by_category(db, _parse_category_id(category))
        return question_service.list_questions(db)
    except SQLAlchemyError:
        raise _storage_failure("Failed to fetch questions")


@router.get("/{question_id}", response_model=QuestionWithCategory)
def get_question(question_id: int, db: Session = Depends(get_db)):
    """
    Returns the question as it was before this read, then counts the view.
    """
    try:
        question = question_service.get_question(db, question_id)
        if question is None:
            raise HTTPException(status_code=404, detail="Question not found")
        question_service.increment_views(db, question_id)
    except SQLAlchemyError:
        raise _storage_failure("Failed to fetch question")
    return question


@router.post(
    "",
    response_model=QuestionPublic,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_auth)],
)
def create_question(obj_in: QuestionCreate, db: Session = Depends(get_db)):
    try:
        return question_service.create_question(db, obj_in=obj_in)
    except SQLAlchemyError:
        raise _storage_failure("Failed to create question")


@router.put(
    "/{question_id}",
    response_model=QuestionPublic,
    dependencies=[Depends(require_auth)],
)
def update_question(
    question_id: int,
    obj_in: QuestionUpdate,
    db: Session = Depends(get_db),
):
    try:
        question = question_service.update_question(db, question_id, obj_in=obj_in)
    except SQLAlchemyError:
        raise _storage_failure("Failed to update question")

    if question is None:
        raise HTTPException(status_code=404, detail="Question not found")
    return question


@router.delete(
    "/{question_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_auth)],
)
def delete_question(question_id: int, db: Session = Depends(get_db)):
    try:
        deleted = question_service.delete_question(db, question_id)
    except SQLAlchemyError:
        raise _storage_failure("Failed to delete question")

    if not deleted:
        raise HTTPException(status_code=404, detail="Question not found")
    return None
