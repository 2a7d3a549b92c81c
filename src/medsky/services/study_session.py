"""Per-user study session state.

``StudySession`` holds what one signed-in user sees: the collection of case
studies, the filter and sort settings, the open case and its chosen answer, and
the status flags and error message the front end displays. Every user action
is one method; failures are reported through ``error`` rather than raised.
"""

import logging
from typing import List, Optional

from medsky.core.errors import AuthError
from medsky.data.categories import get_category, list_categories
from medsky.models.domain import AuthSession, CaseStudy, User
from medsky.services.case.service import ALL_FIELDS, CaseStudyService, filter_and_sort
from medsky.utils.protocols import AuthProvider

logger = logging.getLogger(__name__)

SIGN_IN_TO_GENERATE = "Please sign in to generate case studies."
SIGN_IN_TO_DELETE = "Please sign in to delete case studies."
LOAD_FAILED = "Failed to load case studies."
GENERATE_FAILED = "Failed to generate case study. Please try again."
DELETE_FAILED = "Failed to delete case study."


class StudySession:
    """State and actions for one user's study screen."""

    def __init__(self, auth: AuthProvider, service: CaseStudyService):
        self.auth = auth
        self.service = service

        self.token: Optional[str] = None
        self.user: Optional[User] = None
        self.case_studies: List[CaseStudy] = []
        self.selected_case: Optional[CaseStudy] = None
        self.selected_answer: str = ""
        self.show_result: bool = False
        self.disease_field: str = list_categories()[0]
        self.filter_field: str = ALL_FIELDS
        self.sort_asc: bool = True
        self.is_generating: bool = False
        self.error: str = ""
        self.delete_confirm: Optional[str] = None

    # Authentication

    def _on_auth_changed(self, session: Optional[AuthSession]) -> None:
        self.token = session.token if session else None
        self.user = session.user if session else None
        self.error = ""
        self.load_case_studies()

    def sign_up(self, email: str, password: str) -> bool:
        try:
            session = self.auth.sign_up(email, password)
        except AuthError as e:
            logger.warning(f"Sign-up failed: {e.message}")
            self.error = e.message
            return False
        self._on_auth_changed(session)
        return True

    def sign_in(self, email: str, password: str) -> bool:
        try:
            session = self.auth.sign_in(email, password)
        except AuthError as e:
            logger.warning(f"Sign-in failed: {e.message}")
            self.error = e.message
            return False
        self._on_auth_changed(session)
        return True

    def sign_in_with_provider(self, provider: str, subject: str, email: Optional[str] = None) -> bool:
        try:
            session = self.auth.sign_in_with_provider(provider, subject, email)
        except AuthError as e:
            logger.warning(f"{provider} sign-in failed: {e.message}")
            self.error = e.message
            return False
        self._on_auth_changed(session)
        return True

    def sign_out(self) -> None:
        if self.token:
            self.auth.sign_out(self.token)
        self._on_auth_changed(None)
        self.selected_case = None
        self.selected_answer = ""
        self.show_result = False
        self.delete_confirm = None

    # Collection

    def load_case_studies(self) -> None:
        if self.user is None:
            self.case_studies = []
            return
        try:
            self.case_studies = self.service.list_cases(self.user.uid)
        except Exception as e:
            logger.error(f"Failed to load case studies for {self.user.uid}: {e}")
            self.error = LOAD_FAILED

    async def generate_case(self) -> Optional[CaseStudy]:
        """Generate a case study in the selected field and add it to the collection."""
        if self.user is None:
            self.error = SIGN_IN_TO_GENERATE
            return None

        self.is_generating = True
        self.error = ""
        try:
            saved = await self.service.generate_case(self.user.uid, self.disease_field)
        except Exception as e:
            logger.error(f"Error generating case study: {e}", exc_info=True)
            self.error = GENERATE_FAILED
            return None
        finally:
            self.is_generating = False

        self.case_studies = [*self.case_studies, saved]
        return saved

    def delete_case(self, case_id: str) -> bool:
        """Delete a case study; the first call for an id only asks for confirmation."""
        if self.user is None:
            self.error = SIGN_IN_TO_DELETE
            return False

        if self.delete_confirm != case_id:
            self.delete_confirm = case_id
            return False

        try:
            self.service.delete_case(self.user.uid, case_id)
        except Exception as e:
            logger.error(f"Error deleting case study {case_id}: {e}")
            self.error = DELETE_FAILED
            return False

        self.case_studies = [c for c in self.case_studies if c.id != case_id]
        if self.selected_case is not None and self.selected_case.id == case_id:
            self.selected_case = None
        self.delete_confirm = None
        return True

    # Filter and sort

    def set_disease_field(self, field: str) -> None:
        get_category(field)
        self.disease_field = field

    def set_filter_field(self, field: str) -> None:
        if field != ALL_FIELDS:
            get_category(field)
        self.filter_field = field

    def toggle_sort(self) -> None:
        self.sort_asc = not self.sort_asc

    @property
    def visible_case_studies(self) -> List[CaseStudy]:
        return filter_and_sort(self.case_studies, self.filter_field, self.sort_asc)

    # Answering

    def select_case(self, case_study: CaseStudy) -> None:
        self.selected_case = case_study
        self.selected_answer = ""
        self.show_result = False

    def back_to_cases(self) -> None:
        self.selected_case = None

    def choose_answer(self, option: str) -> None:
        self.selected_answer = option

    def submit_answer(self) -> bool:
        """Reveal the result; does nothing until an answer is chosen."""
        if self.selected_case is None or not self.selected_answer:
            return False
        self.show_result = True
        return True

    @property
    def is_correct(self) -> Optional[bool]:
        if not self.show_result or self.selected_case is None:
            return None
        return self.selected_answer == self.selected_case.correct_answer

    @property
    def result_message(self) -> Optional[str]:
        if self.is_correct is None:
            return None
        return "Correct!" if self.is_correct else "Incorrect."
