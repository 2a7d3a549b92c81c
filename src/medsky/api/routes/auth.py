"""
Auth API Routes for MedSky

Sign-up, sign-in (email/password or identity provider) and sign-out.
"""

import logging

from fastapi import APIRouter, Depends, status

from medsky.api.dependencies import get_auth_provider, get_current_token
from medsky.models.requests import ProviderSignInRequest, SignInRequest, SignUpRequest
from medsky.models.responses import AuthResponse
from medsky.utils.protocols import AuthProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(request: SignUpRequest, auth: AuthProvider = Depends(get_auth_provider)):
    """Create an email/password account and return a session token."""
    session = auth.sign_up(request.email, request.password)
    return AuthResponse(token=session.token, user=session.user)


@router.post("/signin", response_model=AuthResponse)
def sign_in(request: SignInRequest, auth: AuthProvider = Depends(get_auth_provider)):
    """Sign in with email and password."""
    session = auth.sign_in(request.email, request.password)
    return AuthResponse(token=session.token, user=session.user)


@router.post("/provider", response_model=AuthResponse)
def sign_in_with_provider(request: ProviderSignInRequest,
                          auth: AuthProvider = Depends(get_auth_provider)):
    """
    Sign in through an identity provider such as Google.

    Development stand-in: the provider and subject are trusted as sent, with no
    identity-token verification. Disabled unless PROVIDER_SIGNIN_ENABLED is set
    (off in the production config); a disabled call returns 401.
    """
    session = auth.sign_in_with_provider(request.provider, request.subject, request.email)
    return AuthResponse(token=session.token, user=session.user)


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(token: str = Depends(get_current_token),
             auth: AuthProvider = Depends(get_auth_provider)):
    """End the current session."""
    auth.sign_out(token)
