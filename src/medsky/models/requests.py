"""Pydantic request models with automatic validation.

This module defines all request models used by the FastAPI endpoints.
"""

from typing import Optional, Annotated
from pydantic import BaseModel, Field, field_validator, ConfigDict


class SignUpRequest(BaseModel):
    """Email/password sign-up or sign-in."""

    email: Annotated[str, Field(min_length=1)] = Field(
        ...,
        description="Account email",
        json_schema_extra={"example": "student@example.com"}
    )
    password: Annotated[str, Field(min_length=1)] = Field(
        ...,
        description="Account password"
    )


class SignInRequest(SignUpRequest):
    """Email/password sign-in."""


class ProviderSignInRequest(BaseModel):
    """Federated sign-in through an identity provider.

    Attributes:
        provider: Provider name, e.g. "google"
        subject: Provider's stable user id
        email: Optional email reported by the provider
    """

    provider: Annotated[str, Field(min_length=1)] = Field(
        ...,
        json_schema_extra={"example": "google"}
    )
    subject: Annotated[str, Field(min_length=1)] = Field(
        ...,
        json_schema_extra={"example": "109876543210"}
    )
    email: Optional[str] = None


class GenerateCaseRequest(BaseModel):
    """Request to generate a new case study.

    Attributes:
        disease_field: Category key; unknown keys are rejected
    """

    disease_field: str = Field(
        ...,
        alias="diseaseField",
        description="Medical field to generate a case study for",
        json_schema_extra={"example": "cardiology"}
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('disease_field')
    @classmethod
    def known_field(cls, v: str) -> str:
        """Ensure the field is a known category key."""
        from medsky.data.categories import is_known_category
        v = v.strip().lower()
        if not is_known_category(v):
            raise ValueError(f"Unknown disease field: {v}")
        return v


class AnswerRequest(BaseModel):
    """Answer to a case study's question.

    Attributes:
        selected_answer: Full option text ("A. Asthma") or its letter ("A")
    """

    selected_answer: Annotated[str, Field(min_length=1)] = Field(
        ...,
        alias="selectedAnswer",
        json_schema_extra={"example": "A"}
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator('selected_answer')
    @classmethod
    def answer_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Please select an answer.')
        return v.strip()
