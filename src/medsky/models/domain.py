"""Domain models representing core business entities for MedSky.

These models define the core data structures used throughout the application.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

OPTION_COUNT = 4


class CategoryDefinition(BaseModel):
    """Static template data for one medical field."""
    title_prefix: str
    query_base: str
    condition_examples: Tuple[str, ...]
    symptoms_pool: Tuple[str, ...]
    history_pool: Tuple[str, ...]
    vitals_pool: Tuple[str, ...]
    labs_pool: Tuple[str, ...]

    model_config = ConfigDict(frozen=True)


class PatientProfile(BaseModel):
    """Age and gender of a generated patient."""
    age: int = Field(..., ge=0)
    gender: str

    model_config = ConfigDict(frozen=True)


class CaseStudy(BaseModel):
    """A generated patient vignette with a four-option question.

    Field names serialize in camelCase (``correctAnswer``, ``diseaseField``) so
    stored documents keep the same shape as the browser client expects.
    """
    id: Optional[str] = Field(None, description="Identifier assigned by the store")
    title: str
    description: str
    question: str
    options: Tuple[str, ...] = Field(..., description="Exactly four lettered options")
    correct_answer: str = Field(..., alias="correctAnswer")
    explanation: str
    disease_field: str = Field(..., alias="diseaseField")
    owner_id: Optional[str] = Field(None, alias="ownerId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator('options')
    @classmethod
    def validate_options(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Require exactly four options."""
        if len(v) != OPTION_COUNT:
            raise ValueError(f'Case study must have exactly {OPTION_COUNT} options')
        return v

    @field_validator('disease_field')
    @classmethod
    def validate_disease_field(cls, v: str) -> str:
        """Require a known category key."""
        from medsky.data.categories import is_known_category
        if not is_known_category(v):
            raise ValueError(f"Unknown disease field: {v}")
        return v

    @model_validator(mode='after')
    def correct_answer_is_first_option(self) -> "CaseStudy":
        if self.correct_answer != self.options[0]:
            raise ValueError('correctAnswer must equal the first option')
        return self

    def preview(self, length: int = 100) -> str:
        """Shortened description used in case lists."""
        return f"{self.description[:length]}..."


class AnswerResult(BaseModel):
    """Outcome of checking a selected option."""
    case_id: str
    selected_answer: str
    is_correct: bool
    correct_answer: str
    explanation: str


class User(BaseModel):
    """Authenticated user as reported by the auth provider."""
    uid: str
    email: Optional[str] = None
    provider: str = "password"

    model_config = ConfigDict(frozen=True)


class AuthSession(BaseModel):
    """Session token paired with its user."""
    token: str
    user: User


__all__ = [
    "OPTION_COUNT",
    "CategoryDefinition",
    "PatientProfile",
    "CaseStudy",
    "AnswerResult",
    "User",
    "AuthSession",
]
