# studyhub/models/session.py
from sqlalchemy import Column, String, DateTime, JSON, Index

from studyhub.db.base_class import Base


class WebSession(Base):
    """Server side HTTP session row, owned by DatabaseSessionStore."""

    __tablename__ = "sessions"

    sid = Column(String, primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (Index("IDX_session_expire", "expire"),)
