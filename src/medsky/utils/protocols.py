"""
Protocol definitions for MedSky collaborators.

This module defines Protocol interfaces (structural subtyping) for the
external services MedSky talks to, allowing for flexible dependency injection
and testing.
"""

from typing import List, Optional, Protocol

from medsky.models.domain import AuthSession, CaseStudy, User


class LiteratureClient(Protocol):
    """Protocol for the biomedical literature search service."""

    def search_ids(self, query: str, retmax: int) -> List[str]:
        """Search for a query.

        Returns:
            Ordered result identifiers; empty when nothing was found or the
            service failed
        """
        ...

    def fetch_title(self, pmid: str) -> Optional[str]:
        """Fetch the display title for one identifier.

        Returns:
            Title string, or None when unavailable
        """
        ...


class CaseStudyRepository(Protocol):
    """Protocol for the case-study document store."""

    def add(self, owner_id: str, case_study: CaseStudy) -> CaseStudy:
        """Store a case study and return it with its assigned id."""
        ...

    def list_for_owner(self, owner_id: str) -> List[CaseStudy]:
        """All case studies of one owner in insertion order."""
        ...

    def get(self, owner_id: str, case_id: str) -> Optional[CaseStudy]:
        ...

    def delete(self, owner_id: str, case_id: str) -> bool:
        """Delete one case study; False if it did not exist."""
        ...


class AuthProvider(Protocol):
    """Protocol for the authentication backend."""

    def sign_up(self, email: str, password: str) -> AuthSession:
        ...

    def sign_in(self, email: str, password: str) -> AuthSession:
        ...

    def sign_in_with_provider(self, provider: str, subject: str,
                              email: Optional[str] = None) -> AuthSession:
        """Federated sign-in (e.g. Google) keyed by the provider's subject id."""
        ...

    def sign_out(self, token: str) -> None:
        ...

    def get_user(self, token: str) -> Optional[User]:
        ...
