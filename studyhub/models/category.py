# studyhub/models/category.py
from sqlalchemy import Column, Integer, Text, DateTime

from studyhub.db.base_class import Base
from studyhub.models.utils import utcnow


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, unique=True, nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(Text, nullable=False, default="folder", server_default="folder")
    color = Column(Text, nullable=False, default="blue", server_default="blue")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
