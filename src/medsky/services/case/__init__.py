"""Case-study generation and management."""

from .generator import CaseStudyGenerator, build_fallback_case
from .repository import (
    InMemoryCaseStudyRepository,
    SqlAlchemyCaseStudyRepository,
    create_repository,
)
from .service import CaseStudyService, filter_and_sort

__all__ = [
    "CaseStudyGenerator",
    "build_fallback_case",
    "InMemoryCaseStudyRepository",
    "SqlAlchemyCaseStudyRepository",
    "create_repository",
    "CaseStudyService",
    "filter_and_sort",
]
