# studyhub/core/sessions.py
"""
Server side session storage.

The browser only holds an opaque session id in an HttpOnly cookie; the data
for that id lives in a SessionStore. Two backends:

- MemorySessionStore: a dict, for tests and single process dev runs
- DatabaseSessionStore: the ``sessions`` table, for everything else
"""
import copy
import logging
import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional

from sqlalchemy.orm import Session

from studyhub.models.session import WebSession

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def expiry_from_now(seconds: int) -> datetime:
    return datetime.now(timezone.utc) + timedelta(seconds=seconds)


def _is_expired(expires_at: datetime, now: datetime) -> bool:
    # sqlite hands back naive datetimes, they were written as UTC
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at <= now


class SessionStore(ABC):
    @abstractmethod
    def get(self, sid: str) -> Optional[dict[str, Any]]:
        """Session data for sid, or None if unknown or expired."""

    @abstractmethod
    def save(self, sid: str, data: dict[str, Any], expires_at: datetime) -> None:
        ...

    @abstractmethod
    def destroy(self, sid: str) -> None:
        ...

    @abstractmethod
    def purge_expired(self) -> int:
        ...


class MemorySessionStore(SessionStore):
    def __init__(self) -> None:
        self._entries: dict[str, tuple[dict[str, Any], datetime]] = {}

    def get(self, sid: str) -> Optional[dict[str, Any]]:
        entry = self._entries.get(sid)
        if entry is None:
            return None
        data, expires_at = entry
        if _is_expired(expires_at, datetime.now(timezone.utc)):
            self._entries.pop(sid, None)
            return None
        return copy.deepcopy(data)

    def save(self, sid: str, data: dict[str, Any], expires_at: datetime) -> None:
        self._entries[sid] = (copy.deepcopy(data), expires_at)

    def destroy(self, sid: str) -> None:
        self._entries.pop(sid, None)

    def purge_expired(self) -> int:
        now = datetime.now(timezone.utc)
        expired = [sid for sid, (_, exp) in self._entries.items() if _is_expired(exp, now)]
        for sid in expired:
            del self._entries[sid]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)


class DatabaseSessionStore(SessionStore):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def get(self, sid: str) -> Optional[dict[str, Any]]:
        with self._session_factory() as db:
            row = db.get(WebSession, sid)
            if row is None:
                return None
            if _is_expired(row.expire, datetime.now(timezone.utc)):
                db.delete(row)
                db.commit()
                return None
            return dict(row.sess)

    def save(self, sid: str, data: dict[str, Any], expires_at: datetime) -> None:
        with self._session_factory() as db:
            row = db.get(WebSession, sid)
            if row is None:
                row = WebSession(sid=sid)
            row.sess = data
            row.expire = expires_at
            db.add(row)
            db.commit()

    def destroy(self, sid: str) -> None:
        with self._session_factory() as db:
            db.query(WebSession).filter(WebSession.sid == sid).delete(
                synchronize_session=False
            )
            db.commit()

    def purge_expired(self) -> int:
        with self._session_factory() as db:
            count = (
                db.query(WebSession)
                .filter(WebSession.expire <= datetime.now(timezone.utc))
                .delete(synchronize_session=False)
            )
            db.commit()
        if count:
            logger.info(f"Purged {count} expired sessions")
        return count
