"""Service layer for business logic.

This module contains the business logic services, organized by domain:
- case/: Case-study generation, storage and answer checking
- auth/: Authentication collaborators
- literature/: Literature search clients
- study_session: Per-user study screen state
"""

from .case import (
    CaseStudyGenerator,
    CaseStudyService,
    InMemoryCaseStudyRepository,
    SqlAlchemyCaseStudyRepository,
    create_repository,
)
from .auth import InMemoryAuthProvider
from .literature import PubMedClient
from .study_session import StudySession

__all__ = [
    "CaseStudyGenerator",
    "CaseStudyService",
    "InMemoryCaseStudyRepository",
    "SqlAlchemyCaseStudyRepository",
    "create_repository",
    "InMemoryAuthProvider",
    "PubMedClient",
    "StudySession",
]
