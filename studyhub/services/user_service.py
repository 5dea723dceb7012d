# studyhub/services/user_service.py
from typing import Optional

from sqlalchemy.orm import Session

from studyhub.models.user import User
from studyhub.models.utils import utcnow
from studyhub.schemas.user import UserUpsert


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)


def upsert_user(db: Session, *, obj_in: UserUpsert) -> User:
    """
    Insert the user, or overwrite the supplied fields of the existing row with
    the same id and bump updated_at.
    """
    data = obj_in.model_dump(exclude_unset=True)
    db_obj = get_user(db, obj_in.id)
    if db_obj is None:
        db_obj = User(**data)
    else:
        for field, value in data.items():
            setattr(db_obj, field, value)
        db_obj.updated_at = utcnow()
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    return db_obj
