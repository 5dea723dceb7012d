# studyhub/api/endpoints/categories.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studyhub.api.deps import get_db, require_auth
from studyhub.schemas.category import CategoryCreate, CategoryPublic, CategoryUpdate
from studyhub.services import category_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


def _storage_failure(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )


@router.get("", response_model=List[CategoryPublic])
def list_categories(db: Session = Depends(get_db)):
    try:
        return category_service.list_categories(db)
    except SQLAlchemyError:
        raise _storage_failure("Failed to fetch categories")


@router.post(
    "",
    response_model=CategoryPublic,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_auth)],
)
def create_category(obj_in: CategoryCreate, db: Session = Depends(get_db)):
    try:
        return category_service.create_category(db, obj_in=obj_in)
    except SQLAlchemyError:
        raise _storage_failure("Failed to create category")


@router.put(
    "/{category_id}",
    response_model=CategoryPublic,
    dependencies=[Depends(require_auth)],
)
def update_category(
    category_id: int,
    obj_in: CategoryUpdate,
    db: Session = Depends(get_db),
):
    try:
        category = category_service.update_category(db, category_id, obj_in=obj_in)
    except SQLAlchemyError:
        raise _storage_failure("Failed to update category")

    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_auth)],
)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    try:
        if category_service.get_category(db, category_id) is None:
            raise HTTPException(status_code=404, detail="Category not found")
        deleted = category_service.delete_category(db, category_id)
    except SQLAlchemyError:
        raise _storage_failure("Failed to delete category")

    if not deleted:
        raise HTTPException(
            status_code=400,
            detail="Cannot delete category with existing questions",
        )
    return None
