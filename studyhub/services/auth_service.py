# studyhub/services/auth_service.py
"""
Admin login state kept in a SessionStore.

A session is either anonymous (no id, unknown id, expired) or authenticated,
in which case its data is {"isAuthenticated": True, "user": {"email": ...}}.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from studyhub.core.security import CredentialVerifier
from studyhub.core.sessions import SessionStore, expiry_from_now, new_session_id

logger = logging.getLogger(__name__)


class MissingCredentials(Exception):
    pass


class InvalidCredentials(Exception):
    pass


@dataclass
class SessionState:
    sid: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.data.get("isAuthenticated"))

    @property
    def email(self) -> Optional[str]:
        user = self.data.get("user") or {}
        return user.get("email")


def load_session(store: SessionStore, sid: Optional[str]) -> SessionState:
    if not sid:
        return SessionState()
    data = store.get(sid)
    if data is None:
        return SessionState()
    return SessionState(sid=sid, data=data)


def login(
    store: SessionStore,
    verifier: CredentialVerifier,
    *,
    current: SessionState,
    email: Optional[str],
    password: Optional[str],
    max_age_seconds: int,
) -> SessionState:
    """
    Check the credentials and start an authenticated session under a fresh id.

    Raises MissingCredentials before the verifier is consulted if either value
    is empty, InvalidCredentials if the verifier says no. The current session
    is left untouched on failure.
    """
    if not email or not password:
        raise MissingCredentials()

    if not verifier.verify(email, password):
        logger.warning(f"Failed admin login for {email!r}")
        raise InvalidCredentials()

    if current.sid:
        store.destroy(current.sid)

    state = SessionState(
        sid=new_session_id(),
        data={"isAuthenticated": True, "user": {"email": email}},
    )
    store.save(state.sid, state.data, expiry_from_now(max_age_seconds))
    logger.info(f"Admin {email!r} logged in")
    return state


def logout(store: SessionStore, current: SessionState) -> None:
    """Errors from the store propagate so the route can report them."""
    if current.sid:
        store.destroy(current.sid)
    if current.is_authenticated:
        logger.info(f"Admin {current.email!r} logged out")
