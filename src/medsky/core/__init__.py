"""Core functionality for MedSky.

This module provides core infrastructure including:
- Configuration management
- Logging
- Error types
"""

from .errors import (
    MedSkyError,
    UnknownCategoryError,
    AuthError,
    NotAuthenticatedError,
    PersistenceError,
    CaseStudyNotFoundError,
    GenerationInProgressError,
)

__all__ = [
    "MedSkyError",
    "UnknownCategoryError",
    "AuthError",
    "NotAuthenticatedError",
    "PersistenceError",
    "CaseStudyNotFoundError",
    "GenerationInProgressError",
]
