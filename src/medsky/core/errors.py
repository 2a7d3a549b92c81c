"""Structured MedSky exceptions."""

from typing import Dict, Any, Optional


class MedSkyError(Exception):
    """Base error for MedSky services."""
    
    error_code = "MEDSKY_ERROR"
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class UnknownCategoryError(MedSkyError, ValueError):
    """Category key is not one of the known medical fields."""
    error_code = "UNKNOWN_CATEGORY"


class AuthError(MedSkyError):
    """Sign-up, sign-in or sign-out was rejected."""
    error_code = "AUTH_ERROR"


class NotAuthenticatedError(AuthError):
    """No signed-in user for an action that needs one."""
    error_code = "NOT_AUTHENTICATED"


class PersistenceError(MedSkyError):
    """The case-study store failed to read or write."""
    error_code = "PERSISTENCE_ERROR"


class CaseStudyNotFoundError(MedSkyError):
    """No case study with the given id for this owner."""
    error_code = "CASE_NOT_FOUND"


class GenerationInProgressError(MedSkyError):
    """A case study is already being generated for this owner."""
    error_code = "GENERATION_IN_PROGRESS"
