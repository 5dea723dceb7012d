# studyhub/models/question.py
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey

from studyhub.db.base_class import Base
from studyhub.models.utils import utcnow


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)

    # no ondelete: category_service refuses to delete a category still in use
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    views = Column(Integer, nullable=False, default=0, server_default="0")

    # set in python so sqlite keeps microseconds for newest-first ordering
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    # bumped by question_service.update_question only, view counting leaves it alone
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
