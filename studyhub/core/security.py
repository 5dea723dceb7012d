# studyhub/core/security.py
import hmac
from abc import ABC, abstractmethod

from studyhub.core.config import settings


class CredentialVerifier(ABC):
    @abstractmethod
    def verify(self, email: str, password: str) -> bool:
        ...


class StaticAdminVerifier(CredentialVerifier):
    """
    Accepts exactly one email/password pair, compared in plaintext.
    Swap in another CredentialVerifier to use a real identity provider.
    """

    def __init__(self, email: str, password: str) -> None:
        self._email = email
        self._password = password

    def verify(self, email: str, password: str) -> bool:
        email_ok = hmac.compare_digest(email.encode(), self._email.encode())
        password_ok = hmac.compare_digest(password.encode(), self._password.encode())
        return email_ok and password_ok


def default_verifier() -> CredentialVerifier:
    return StaticAdminVerifier(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
