"""Case service for managing a user's case studies.

This service handles:
- Generating and saving new case studies (one in flight per owner)
- Listing with field filter and title sort
- Fetching and deleting single case studies
- Checking answers
"""

import logging
import threading
from typing import List, Optional, Set

from medsky.core.errors import (
    CaseStudyNotFoundError,
    GenerationInProgressError,
)
from medsky.data.categories import get_category
from medsky.models.domain import AnswerResult, CaseStudy
from medsky.services.case.generator import CaseStudyGenerator
from medsky.utils.protocols import CaseStudyRepository

logger = logging.getLogger(__name__)

ALL_FIELDS = "all"
OPTION_LETTERS = "ABCD"


def filter_and_sort(case_studies: List[CaseStudy], field: str = ALL_FIELDS,
                    ascending: bool = True) -> List[CaseStudy]:
    """Filter by disease field ("all" keeps everything) and sort by title."""
    if field and field != ALL_FIELDS:
        case_studies = [c for c in case_studies if c.disease_field == field]
    return sorted(case_studies, key=lambda c: c.title.casefold(), reverse=not ascending)


class CaseStudyService:
    """Service for generating and managing case studies per owner."""

    def __init__(self, generator: CaseStudyGenerator, repository: CaseStudyRepository):
        """Initialize case service.

        Args:
            generator: Case-study generator
            repository: Store for saved case studies
        """
        self.generator = generator
        self.repository = repository
        self._in_flight: Set[str] = set()
        self._lock = threading.Lock()
        logger.info("CaseStudyService initialized")

    def is_generating(self, owner_id: str) -> bool:
        with self._lock:
            return owner_id in self._in_flight

    async def generate_case(self, owner_id: str, field: str) -> CaseStudy:
        """Generate a case study and save it for the owner.

        Args:
            owner_id: User id of the owner
            field: Category key

        Returns:
            The saved case study, with its id

        Raises:
            UnknownCategoryError: Unknown category key
            GenerationInProgressError: A generation for this owner is running
            PersistenceError: The store rejected the write
        """
        get_category(field)

        with self._lock:
            if owner_id in self._in_flight:
                raise GenerationInProgressError(
                    "A case study is already being generated. Please wait.",
                    details={"owner_id": owner_id}
                )
            self._in_flight.add(owner_id)

        try:
            case_study = await self.generator.generate(field)
            saved = self.repository.add(owner_id, case_study)
        finally:
            with self._lock:
                self._in_flight.discard(owner_id)

        logger.info(f"Saved case study {saved.id} ({field}) for owner {owner_id}")
        return saved

    def list_cases(self, owner_id: str, field: str = ALL_FIELDS,
                   ascending: bool = True) -> List[CaseStudy]:
        """List an owner's case studies.

        Raises:
            UnknownCategoryError: ``field`` is neither "all" nor a known key
        """
        if field and field != ALL_FIELDS:
            get_category(field)
        return filter_and_sort(self.repository.list_for_owner(owner_id), field, ascending)

    def get_case(self, owner_id: str, case_id: str) -> CaseStudy:
        case_study = self.repository.get(owner_id, case_id)
        if case_study is None:
            raise CaseStudyNotFoundError(
                f"Case study not found: {case_id}",
                details={"case_id": case_id}
            )
        return case_study

    def delete_case(self, owner_id: str, case_id: str) -> None:
        if not self.repository.delete(owner_id, case_id):
            raise CaseStudyNotFoundError(
                f"Case study not found: {case_id}",
                details={"case_id": case_id}
            )
        logger.info(f"Deleted case study {case_id} for owner {owner_id}")

    def check_answer(self, owner_id: str, case_id: str, selected: Optional[str]) -> AnswerResult:
        """Check a selected option against the correct answer.

        Args:
            owner_id: User id of the owner
            case_id: Case study id
            selected: Full option text ("A. Asthma") or its letter ("A")

        Raises:
            ValueError: Empty selection or not one of the options
            CaseStudyNotFoundError: Unknown case id
        """
        case_study = self.get_case(owner_id, case_id)
        selected_option = resolve_option(case_study, selected)
        return AnswerResult(
            case_id=case_id,
            selected_answer=selected_option,
            is_correct=selected_option == case_study.correct_answer,
            correct_answer=case_study.correct_answer,
            explanation=case_study.explanation,
        )


def resolve_option(case_study: CaseStudy, selected: Optional[str]) -> str:
    """Map a selection (option text or letter) to the option text."""
    selected = (selected or "").strip()
    if not selected:
        raise ValueError("Please select an answer.")

    if selected in case_study.options:
        return selected

    letter = selected.rstrip(".").upper()
    if len(letter) == 1 and letter in OPTION_LETTERS:
        return case_study.options[OPTION_LETTERS.index(letter)]

    raise ValueError(f"'{selected}' is not one of the options for this case study")
