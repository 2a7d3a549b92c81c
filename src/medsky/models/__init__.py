"""Data models for MedSky.

Includes Pydantic models (validation) and SQLAlchemy models (database).
Request and response models live in ``medsky.models.requests`` and
``medsky.models.responses``.
"""

from .domain import (
    CategoryDefinition,
    PatientProfile,
    CaseStudy,
    AnswerResult,
    User,
    AuthSession,
)
from .database import (
    Base,
    CaseStudyRecord,
)

__all__ = [
    # Domain
    "CategoryDefinition",
    "PatientProfile",
    "CaseStudy",
    "AnswerResult",
    "User",
    "AuthSession",
    # Database
    "Base",
    "CaseStudyRecord",
]
