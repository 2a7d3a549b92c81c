"""Dependency injection for FastAPI.

This module provides dependencies that can be injected into route handlers,
following FastAPI's dependency injection pattern.
"""

from typing import Optional
import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from medsky.core.config_helper import config
from medsky.core.errors import NotAuthenticatedError
from medsky.models.domain import User
from medsky.services.auth import InMemoryAuthProvider
from medsky.services.case import CaseStudyGenerator, CaseStudyService, create_repository
from medsky.utils.protocols import AuthProvider

logger = logging.getLogger(__name__)

# Service singletons
_auth_provider: Optional[AuthProvider] = None
_case_service: Optional[CaseStudyService] = None

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_provider() -> AuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = InMemoryAuthProvider()
        logger.info("Auth provider created (in-memory)")
    return _auth_provider


def get_case_service() -> CaseStudyService:
    """Get or create CaseStudyService singleton.

    Returns:
        CaseStudyService backed by PubMed and the configured store
    """
    global _case_service
    if _case_service is None:
        _case_service = CaseStudyService(
            generator=CaseStudyGenerator(),
            repository=create_repository(config.database_url),
        )
        logger.info("CaseStudyService singleton created")
    return _case_service


def get_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    if credentials is None or not credentials.credentials:
        raise NotAuthenticatedError("Please sign in to continue.")
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_current_token),
    auth: AuthProvider = Depends(get_auth_provider),
) -> User:
    """Resolve the bearer token to a signed-in user."""
    user = auth.get_user(token)
    if user is None:
        raise NotAuthenticatedError("Session expired. Please sign in again.")
    return user


def reset_services() -> None:
    """Drop the service singletons so the next request rebuilds them."""
    global _auth_provider, _case_service
    _auth_provider = None
    _case_service = None


def shutdown_services() -> None:
    """Close the literature client and the case store, then drop the singletons."""
    if _case_service is not None:
        close = getattr(_case_service.generator.literature_client, "close", None)
        if close is not None:
            close()
        dispose = getattr(_case_service.repository, "dispose", None)
        if dispose is not None:
            dispose()
        logger.info("CaseStudyService resources released")
    reset_services()
