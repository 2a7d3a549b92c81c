"""
Case-study generator.

Fills a category's templates with randomly sampled patient details and enriches
the result with two sequential PubMed lookups:

1. Condition lookup: first word of the top article title for the category's
   query seed, falling back to the category's first example condition.
2. Explanation lookup: title of the top article for "<condition> diagnosis".

``generate`` is total for known categories: lookup failures degrade to static
text and any other failure returns the fixed fallback record.
"""

import asyncio
import logging
import random
from typing import Any, Callable, Optional

from medsky.core.config_helper import config
from medsky.core.logging_config import log_case_generated, log_lookup
from medsky.data.categories import (
    PATIENT_PROFILES,
    QUESTION_TEMPLATES,
    get_category,
)
from medsky.models.domain import CaseStudy
from medsky.utils.protocols import LiteratureClient
from medsky.utils.sampling import get_random_items, pick_one

logger = logging.getLogger(__name__)

SYMPTOM_COUNT = 3
EXPLANATION_PREFIX = "Based on PubMed: "
EXPLANATION_UNAVAILABLE = "Unable to fetch PubMed explanation."
ALTERNATIVE_CONDITION = "Alternative Condition"
DECOY_OPTIONS = ("C. Unrelated Condition", "D. Normal Finding")


def build_fallback_case(category_key: str) -> CaseStudy:
    """Fixed placeholder record returned when assembly fails."""
    return CaseStudy(
        title="Fallback Case",
        description="A patient presents with unspecified symptoms. Vital signs: normal.",
        question="What is the diagnosis?",
        options=["A. Unknown", "B. Unknown", "C. Unknown", "D. Unknown"],
        correct_answer="A. Unknown",
        explanation="Error generating case study. Please check logs.",
        disease_field=category_key,
    )


class CaseStudyGenerator:
    """Generates case studies for the known medical fields."""

    def __init__(
        self,
        literature_client: Optional[LiteratureClient] = None,
        rng: Optional[random.Random] = None,
        lookup_timeout: Optional[float] = None,
        condition_retmax: Optional[int] = None,
    ):
        """Initialize the generator.

        Args:
            literature_client: PubMed-style search client (a PubMedClient when omitted)
            rng: Random source for sampling
            lookup_timeout: Seconds allowed per lookup before it counts as not found
            condition_retmax: Result bound for the condition search
        """
        if literature_client is None:
            from medsky.services.literature.pubmed_client import PubMedClient
            literature_client = PubMedClient()
        self.literature_client = literature_client
        self.rng = rng or random.Random()
        self.lookup_timeout = lookup_timeout if lookup_timeout is not None else config.LOOKUP_TIMEOUT_SECONDS
        self.condition_retmax = condition_retmax or config.CONDITION_SEARCH_RETMAX

    async def _lookup(self, func: Callable[..., Any], *args: Any, default: Any) -> Any:
        """Run one blocking lookup in a worker thread under the lookup timeout."""
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args),
                timeout=self.lookup_timeout
            )
        except asyncio.TimeoutError:
            logger.warning(f"Lookup {getattr(func, '__name__', func)}{args} timed out after {self.lookup_timeout}s")
            return default
        except Exception as e:
            logger.warning(f"Lookup {getattr(func, '__name__', func)}{args} failed: {e}")
            return default

    async def resolve_condition(self, category_key: str) -> str:
        """
        Pick the condition for a case from the literature.

        Args:
            category_key: Known category key

        Returns:
            First word of the top article title, or the category's first
            example condition when nothing usable comes back
        """
        category = get_category(category_key)
        fallback = category.condition_examples[0]
        query = category.query_base

        ids = await self._lookup(
            self.literature_client.search_ids, query, self.condition_retmax, default=[]
        )
        if not ids:
            logger.warning(f"No PubMed conditions found for: {category_key}")
            log_lookup("condition", query, 0, fallback)
            return fallback

        title = await self._lookup(self.literature_client.fetch_title, ids[0], default=None)
        tokens = (title or "").split()
        condition = tokens[0] if tokens else fallback
        log_lookup("condition", query, len(ids), condition)
        return condition

    async def resolve_explanation(self, condition: str) -> str:
        """
        Find a supporting article title for a condition.

        Args:
            condition: Condition name used as the correct answer

        Returns:
            "Based on PubMed: <title>", or the unavailable placeholder
        """
        query = f"{condition} diagnosis"

        ids = await self._lookup(self.literature_client.search_ids, query, 1, default=[])
        if not ids:
            logger.warning(f"No PubMed explanation found for: {condition}")
            log_lookup("explanation", query, 0, EXPLANATION_UNAVAILABLE)
            return EXPLANATION_UNAVAILABLE

        title = await self._lookup(self.literature_client.fetch_title, ids[0], default=None)
        if not title:
            log_lookup("explanation", query, len(ids), EXPLANATION_UNAVAILABLE)
            return EXPLANATION_UNAVAILABLE

        explanation = f"{EXPLANATION_PREFIX}{title}"
        log_lookup("explanation", query, len(ids), explanation)
        return explanation

    async def generate(self, category_key: str) -> CaseStudy:
        """
        Generate a case study for one medical field.

        Args:
            category_key: One of the known category keys

        Returns:
            A new, unsaved case study (the fallback record if assembly fails)

        Raises:
            UnknownCategoryError: If ``category_key`` is not a known field
        """
        category = get_category(category_key)
        logger.info(f"Generating case study for field: {category_key}")

        try:
            condition = await self.resolve_condition(category_key)
            patient = pick_one(PATIENT_PROFILES, self.rng)
            symptoms = get_random_items(category.symptoms_pool, SYMPTOM_COUNT, self.rng)
            history = get_random_items(category.history_pool, 1, self.rng)[0]
            vitals = get_random_items(category.vitals_pool, 1, self.rng)[0]
            labs = get_random_items(category.labs_pool, 1, self.rng)[0]
            question = get_random_items(QUESTION_TEMPLATES, 1, self.rng)[0]

            gender_title = patient.gender[:1].upper() + patient.gender[1:]
            title = f"{category.title_prefix} in a {patient.age}-Year-Old {gender_title}"
            description = (
                f"A {patient.age}-year-old {patient.gender} presents with {', '.join(symptoms)}. "
                f"Patient has a {history}. Vital signs: {vitals}. Laboratory findings: {labs}."
            )

            alternative = (
                pick_one(category.condition_examples, self.rng)
                if category.condition_examples else ALTERNATIVE_CONDITION
            )
            correct_answer = f"A. {condition}"
            options = [correct_answer, f"B. {alternative}", *DECOY_OPTIONS]

            literature_explanation = await self.resolve_explanation(condition)

            case_study = CaseStudy(
                title=title,
                description=description,
                question=question,
                options=options,
                correct_answer=correct_answer,
                explanation=f"This case is consistent with {condition}. {literature_explanation}",
                disease_field=category_key,
            )
        except Exception as e:
            logger.error(f"Error generating case study for {category_key}: {e}", exc_info=True)
            fallback = build_fallback_case(category_key)
            log_case_generated(fallback.model_dump(mode="json", by_alias=True), fallback=True)
            return fallback

        log_case_generated(case_study.model_dump(mode="json", by_alias=True))
        return case_study
