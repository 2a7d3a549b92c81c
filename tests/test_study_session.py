"""Tests for the per-user study session state."""

import asyncio
import random

import pytest

from conftest import FakeLiteratureClient
from medsky.core.errors import UnknownCategoryError
from medsky.services.auth import InMemoryAuthProvider
from medsky.services.case import CaseStudyGenerator, CaseStudyService, InMemoryCaseStudyRepository
from medsky.services.study_session import (
    DELETE_FAILED,
    GENERATE_FAILED,
    LOAD_FAILED,
    SIGN_IN_TO_DELETE,
    SIGN_IN_TO_GENERATE,
    StudySession,
)


class FailingRepository(InMemoryCaseStudyRepository):
    def add(self, owner_id, case_study):
        raise RuntimeError("store offline")

    def list_for_owner(self, owner_id):
        raise RuntimeError("store offline")

    def delete(self, owner_id, case_id):
        raise RuntimeError("store offline")


def make_session(client=None, repository=None):
    generator = CaseStudyGenerator(
        literature_client=client or FakeLiteratureClient(),
        rng=random.Random(0),
    )
    service = CaseStudyService(generator, repository or InMemoryCaseStudyRepository())
    return StudySession(InMemoryAuthProvider(), service)


@pytest.fixture
def session():
    return make_session()


def test_initial_state(session):
    assert session.user is None
    assert session.case_studies == []
    assert session.disease_field == "cardiology"
    assert session.filter_field == "all"
    assert session.sort_asc is True
    assert session.error == ""


def test_sign_up_and_sign_out(session):
    assert session.sign_up("a@b.com", "secret1")
    assert session.user.email == "a@b.com"
    assert session.token

    session.sign_out()
    assert session.user is None
    assert session.token is None
    assert session.case_studies == []


def test_sign_in_failure_sets_error(session):
    assert not session.sign_in("a@b.com", "secret1")
    assert session.error == "Invalid email or password."
    assert session.user is None


def test_provider_sign_in(session):
    assert session.sign_in_with_provider("google", "sub-1", "g@example.com")
    assert session.user.provider == "google"


def test_generate_requires_sign_in(session):
    assert asyncio.run(session.generate_case()) is None
    assert session.error == SIGN_IN_TO_GENERATE


def test_generate_adds_to_collection(session):
    session.sign_up("a@b.com", "secret1")
    session.set_disease_field("neurology")

    saved = asyncio.run(session.generate_case())

    assert saved.disease_field == "neurology"
    assert session.case_studies == [saved]
    assert not session.is_generating
    assert session.error == ""


def test_generate_failure_sets_error():
    session = make_session(repository=FailingRepository())
    session.sign_up("a@b.com", "secret1")
    assert session.error == LOAD_FAILED

    assert asyncio.run(session.generate_case()) is None
    assert session.error == GENERATE_FAILED
    assert not session.is_generating


def test_delete_needs_confirmation(session):
    session.sign_up("a@b.com", "secret1")
    saved = asyncio.run(session.generate_case())
    session.select_case(saved)

    assert not session.delete_case(saved.id)
    assert session.delete_confirm == saved.id
    assert session.case_studies == [saved]

    assert session.delete_case(saved.id)
    assert session.case_studies == []
    assert session.selected_case is None
    assert session.delete_confirm is None


def test_delete_requires_sign_in(session):
    assert not session.delete_case("abc")
    assert session.error == SIGN_IN_TO_DELETE


def test_delete_failure_sets_error():
    session = make_session(repository=FailingRepository())
    session.sign_up("a@b.com", "secret1")
    session.delete_case("abc")
    assert not session.delete_case("abc")
    assert session.error == DELETE_FAILED


def test_filter_and_sort(session):
    session.sign_up("a@b.com", "secret1")
    for field in ("oncology", "cardiology", "oncology"):
        session.set_disease_field(field)
        asyncio.run(session.generate_case())

    session.set_filter_field("oncology")
    assert {c.disease_field for c in session.visible_case_studies} == {"oncology"}

    session.set_filter_field("all")
    titles = [c.title for c in session.visible_case_studies]
    assert titles == sorted(titles, key=str.casefold)
    session.toggle_sort()
    assert not session.sort_asc
    assert [c.title for c in session.visible_case_studies] == sorted(titles, key=str.casefold, reverse=True)

    with pytest.raises(UnknownCategoryError):
        session.set_filter_field("radiology")
    with pytest.raises(UnknownCategoryError):
        session.set_disease_field("radiology")


def test_answer_flow():
    session = make_session(FakeLiteratureClient(
        searches={"pediatric diagnosis": ["1"], "Asthma diagnosis": ["2"]},
        titles={"1": "Asthma outcomes", "2": "Guidelines for Asthma"},
    ))
    session.sign_up("a@b.com", "secret1")
    session.set_disease_field("pediatrics")
    saved = asyncio.run(session.generate_case())

    session.select_case(saved)
    assert not session.submit_answer()
    assert session.result_message is None

    session.choose_answer(saved.options[1])
    assert session.submit_answer()
    assert session.is_correct is False
    assert session.result_message == "Incorrect."

    session.select_case(saved)
    assert not session.show_result
    session.choose_answer("A. Asthma")
    session.submit_answer()
    assert session.result_message == "Correct!"

    session.back_to_cases()
    assert session.selected_case is None
