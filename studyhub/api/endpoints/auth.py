# studyhub/api/endpoints/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from studyhub.api.deps import (
    get_credential_verifier,
    get_session_state,
    get_session_store,
)
from studyhub.core.config import settings
from studyhub.core.security import CredentialVerifier
from studyhub.core.sessions import SessionStore
from studyhub.schemas.auth import (
    AuthStatus,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SessionUser,
)
from studyhub.services import auth_service
from studyhub.services.auth_service import SessionState

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    response: Response,
    payload: Optional[LoginRequest] = None,
    current: SessionState = Depends(get_session_state),
    store: SessionStore = Depends(get_session_store),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    try:
        session = auth_service.login(
            store,
            verifier,
            current=current,
            email=payload.email if payload else None,
            password=payload.password if payload else None,
            max_age_seconds=settings.SESSION_MAX_AGE_SECONDS,
        )
    except auth_service.MissingCredentials:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )
    except auth_service.InvalidCredentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session.sid,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return LoginResponse(message="Login successful", user=SessionUser(email=session.email))


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    current: SessionState = Depends(get_session_state),
    store: SessionStore = Depends(get_session_store),
):
    try:
        auth_service.logout(store, current)
    except Exception:
        logger.exception("Session destroy failed during logout")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not log out",
        )

    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return MessageResponse(message="Logout successful")


@router.get(
    "/auth/check",
    response_model=AuthStatus,
    response_model_exclude_none=True,
)
def check_auth(current: SessionState = Depends(get_session_state)):
    if current.is_authenticated:
        return AuthStatus(is_authenticated=True, user=SessionUser(email=current.email))
    return AuthStatus(is_authenticated=False)
