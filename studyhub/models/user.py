# studyhub/models/user.py
from sqlalchemy import Column, String, DateTime

from studyhub.db.base_class import Base
from studyhub.models.utils import utcnow


class User(Base):
    """Identity record keyed by an external provider id. Not routed yet."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    email = Column(String, unique=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow)
