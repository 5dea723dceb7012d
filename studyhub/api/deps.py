# studyhub/api/deps.py
from fastapi import Depends, HTTPException, Request, status

from studyhub.core.config import settings
from studyhub.core.security import CredentialVerifier
from studyhub.core.sessions import SessionStore
from studyhub.db.deps import get_db  # noqa
from studyhub.services import auth_service
from studyhub.services.auth_service import SessionState


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_credential_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.credential_verifier


def get_session_state(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> SessionState:
    sid = request.cookies.get(settings.SESSION_COOKIE_NAME)
    return auth_service.load_session(store, sid)


def require_auth(
    session: SessionState = Depends(get_session_state),
) -> SessionState:
    if not session.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return session
