"""Tests for the case-study generator."""

import asyncio
import random

import pytest

from conftest import FakeLiteratureClient
from medsky.core.errors import UnknownCategoryError
from medsky.data.categories import get_category, list_categories
from medsky.services.case.generator import (
    EXPLANATION_UNAVAILABLE,
    CaseStudyGenerator,
    build_fallback_case,
)


class BrokenRandom(random.Random):
    """Random source that fails as soon as it is used."""

    def randrange(self, *args, **kwargs):
        raise RuntimeError("entropy exhausted")

    def shuffle(self, x):
        raise RuntimeError("entropy exhausted")


def make_generator(client, seed=0, **kwargs):
    return CaseStudyGenerator(literature_client=client, rng=random.Random(seed), **kwargs)


@pytest.mark.parametrize("key", list_categories())
def test_generate_every_category(fake_client, key):
    """Every known field yields a valid record for that field."""
    case_study = asyncio.run(make_generator(fake_client).generate(key))

    assert case_study.disease_field == key
    assert len(case_study.options) == 4
    assert case_study.correct_answer == case_study.options[0]
    assert case_study.title.startswith(get_category(key).title_prefix)
    assert case_study.options[2:] == ("C. Unrelated Condition", "D. Normal Finding")


def test_condition_falls_back_to_first_example(fake_client):
    """An empty id list resolves to the category's first example."""
    condition = asyncio.run(make_generator(fake_client).resolve_condition("cardiology"))
    assert condition == "Myocardial Infarction"


def test_condition_uses_first_word_of_top_title():
    client = FakeLiteratureClient(
        searches={"neurology diagnosis": ["9", "10"]},
        titles={"9": "Migraine prevalence in adults", "10": "Stroke outcomes"},
    )
    condition = asyncio.run(make_generator(client).resolve_condition("neurology"))
    assert condition == "Migraine"
    assert ("search_ids", "neurology diagnosis", 5) in client.calls


def test_condition_blank_title_falls_back():
    client = FakeLiteratureClient(searches={"oncology diagnosis": ["1"]}, titles={"1": "   "})
    condition = asyncio.run(make_generator(client).resolve_condition("oncology"))
    assert condition == "Lung Cancer"


def test_explanation_placeholder_when_no_ids(fake_client):
    explanation = asyncio.run(make_generator(fake_client).resolve_explanation("Croup"))
    assert explanation == EXPLANATION_UNAVAILABLE


def test_explanation_placeholder_when_no_title():
    client = FakeLiteratureClient(searches={"Croup diagnosis": ["5"]})
    explanation = asyncio.run(make_generator(client).resolve_explanation("Croup"))
    assert explanation == EXPLANATION_UNAVAILABLE


def test_explanation_uses_top_title():
    client = FakeLiteratureClient(
        searches={"Croup diagnosis": ["5"]},
        titles={"5": "Croup in the emergency department"},
    )
    explanation = asyncio.run(make_generator(client).resolve_explanation("Croup"))
    assert explanation == "Based on PubMed: Croup in the emergency department"
    assert ("search_ids", "Croup diagnosis", 1) in client.calls


def test_pediatrics_asthma_end_to_end(asthma_client):
    case_study = asyncio.run(make_generator(asthma_client).generate("pediatrics"))

    assert case_study.correct_answer == "A. Asthma"
    assert "Asthma" in case_study.explanation
    assert "Based on PubMed: Guidelines for Asthma" in case_study.explanation
    assert case_study.explanation == (
        "This case is consistent with Asthma. Based on PubMed: Guidelines for Asthma"
    )


def test_description_and_title_shape(fake_client):
    case_study = asyncio.run(make_generator(fake_client, seed=7).generate("cardiology"))

    assert case_study.title.startswith("Acute Cardiac Case in a ")
    assert "-Year-Old " in case_study.title
    assert case_study.description.startswith("A ")
    assert " presents with " in case_study.description
    assert "Patient has a " in case_study.description
    assert "Vital signs: " in case_study.description
    assert case_study.description.endswith(".")
    assert case_study.options[1].startswith("B. ")
    assert case_study.options[1][3:] in get_category("cardiology").condition_examples


@pytest.mark.parametrize("fail_search,fail_title", [(True, False), (False, True), (True, True)])
def test_network_failures_never_raise(fail_search, fail_title):
    """Lookup failures degrade to static text instead of raising."""
    client = FakeLiteratureClient(
        searches={"cardiology diagnosis": ["1"]},
        titles={"1": "Tachycardia"},
        fail_search=fail_search,
        fail_title=fail_title,
    )
    case_study = asyncio.run(make_generator(client).generate("cardiology"))

    assert case_study.disease_field == "cardiology"
    assert case_study.correct_answer == "A. Myocardial Infarction"
    assert case_study.explanation.endswith(EXPLANATION_UNAVAILABLE)


def test_explanation_failure_keeps_condition():
    client = FakeLiteratureClient(
        searches={"cardiology diagnosis": ["1"]},
        titles={"1": "Pericarditis in young adults"},
    )
    case_study = asyncio.run(make_generator(client).generate("cardiology"))

    assert case_study.correct_answer == "A. Pericarditis"
    assert case_study.explanation == (
        f"This case is consistent with Pericarditis. {EXPLANATION_UNAVAILABLE}"
    )


def test_slow_lookup_counts_as_not_found():
    client = FakeLiteratureClient(searches={"cardiology diagnosis": ["1"]}, delay=0.5)
    generator = make_generator(client, lookup_timeout=0.05)

    condition = asyncio.run(generator.resolve_condition("cardiology"))
    assert condition == "Myocardial Infarction"


def test_assembly_failure_returns_fallback(fake_client):
    generator = CaseStudyGenerator(literature_client=fake_client, rng=BrokenRandom())
    case_study = asyncio.run(generator.generate("dermatology"))

    assert case_study == build_fallback_case("dermatology")
    assert case_study.title == "Fallback Case"
    assert case_study.disease_field == "dermatology"
    assert case_study.options == ("A. Unknown", "B. Unknown", "C. Unknown", "D. Unknown")
    assert case_study.explanation == "Error generating case study. Please check logs."


def test_different_seeds_same_field(asthma_client):
    """Two runs with different seeds are each valid for the same field."""
    first = asyncio.run(make_generator(asthma_client, seed=1).generate("pediatrics"))
    second = asyncio.run(make_generator(asthma_client, seed=2).generate("pediatrics"))

    assert first.disease_field == second.disease_field == "pediatrics"
    for case_study in (first, second):
        assert len(case_study.options) == 4
        assert case_study.correct_answer == case_study.options[0] == "A. Asthma"


def test_same_seed_is_reproducible(fake_client):
    first = asyncio.run(make_generator(fake_client, seed=11).generate("hematology"))
    second = asyncio.run(make_generator(fake_client, seed=11).generate("hematology"))
    assert first == second


def test_unknown_category_raises(fake_client):
    with pytest.raises(UnknownCategoryError):
        asyncio.run(make_generator(fake_client).generate("radiology"))
    assert fake_client.calls == []
