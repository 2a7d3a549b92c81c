"""In-process stand-in for the hosted authentication backend.

Implements the ``AuthProvider`` protocol with email/password accounts,
federated (provider + subject) accounts and opaque session tokens.

Federated sign-in trusts the provider and subject it is given; there is no
identity-token check, so it is only enabled where
``PROVIDER_SIGNIN_ENABLED`` is set (development and testing).
"""

import logging
import re
import secrets
import threading
import uuid
from typing import Dict, Optional, Tuple

from passlib.context import CryptContext

from medsky.core.config_helper import config
from medsky.core.errors import AuthError
from medsky.models.domain import AuthSession, User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# New hashes use the first scheme; bcrypt hashes still verify
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")


class InMemoryAuthProvider:
    """Accounts and sessions held in process memory."""

    def __init__(self, allow_provider_signin: Optional[bool] = None):
        """Initialize the provider.

        Args:
            allow_provider_signin: Accept federated sign-in (defaults to
                config.PROVIDER_SIGNIN_ENABLED)
        """
        if allow_provider_signin is None:
            allow_provider_signin = config.PROVIDER_SIGNIN_ENABLED
        self.allow_provider_signin = allow_provider_signin
        self._accounts: Dict[str, Tuple[User, str]] = {}
        self._federated: Dict[Tuple[str, str], User] = {}
        self._sessions: Dict[str, User] = {}
        self._lock = threading.Lock()

    def _open_session(self, user: User) -> AuthSession:
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[token] = user
        return AuthSession(token=token, user=user)

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Create an email/password account and sign it in.

        Raises:
            AuthError: Invalid email, weak password or email already in use
        """
        email = (email or "").strip().lower()
        if not EMAIL_PATTERN.match(email):
            raise AuthError("Invalid email address.", details={"email": email})
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise AuthError(
                f"Password should be at least {MIN_PASSWORD_LENGTH} characters.",
                details={"min_length": MIN_PASSWORD_LENGTH}
            )

        password_hash = pwd_context.hash(password)
        user = User(uid=uuid.uuid4().hex, email=email, provider="password")
        with self._lock:
            if email in self._accounts:
                raise AuthError("Email already in use.", details={"email": email})
            self._accounts[email] = (user, password_hash)

        logger.info(f"Created account {user.uid}")
        return self._open_session(user)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password.

        Raises:
            AuthError: Unknown email or wrong password
        """
        email = (email or "").strip().lower()
        with self._lock:
            account = self._accounts.get(email)
        if account is None:
            raise AuthError("Invalid email or password.")

        user, password_hash = account
        if not pwd_context.verify(password or "", password_hash):
            raise AuthError("Invalid email or password.")

        logger.info(f"User {user.uid} signed in")
        return self._open_session(user)

    def sign_in_with_provider(self, provider: str, subject: str,
                              email: Optional[str] = None) -> AuthSession:
        """Sign in through an identity provider, creating the user on first use.

        Raises:
            AuthError: Federated sign-in is disabled, or provider/subject missing
        """
        if not self.allow_provider_signin:
            raise AuthError("Provider sign-in is not enabled.")

        provider = (provider or "").strip().lower()
        subject = (subject or "").strip()
        if not provider or not subject:
            raise AuthError("Provider sign-in requires a provider and subject.")

        with self._lock:
            user = self._federated.get((provider, subject))
            if user is None:
                user = User(uid=uuid.uuid4().hex, email=email, provider=provider)
                self._federated[(provider, subject)] = user
                logger.info(f"Created {provider} account {user.uid}")

        return self._open_session(user)

    def sign_out(self, token: str) -> None:
        with self._lock:
            user = self._sessions.pop(token, None)
        if user is not None:
            logger.info(f"User {user.uid} signed out")

    def get_user(self, token: str) -> Optional[User]:
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)
