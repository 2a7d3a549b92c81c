"""Pydantic response models for API endpoints.

This module defines all response models returned by the FastAPI endpoints.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, ConfigDict

from .domain import CaseStudy, User


class AuthResponse(BaseModel):
    """Session issued after sign-up or sign-in."""
    token: str = Field(..., description="Bearer token for later requests")
    user: User


class CategoryInfo(BaseModel):
    key: str
    label: str
    title_prefix: str


class CategoryListResponse(BaseModel):
    categories: List[CategoryInfo]
    count: int


class CaseStudySummary(BaseModel):
    """Row in a case-study list."""
    id: str
    title: str
    preview: str
    disease_field: str = Field(..., alias="diseaseField")
    field_label: str = Field(..., alias="fieldLabel")

    model_config = ConfigDict(populate_by_name=True)


class CaseStudyListResponse(BaseModel):
    case_studies: List[CaseStudySummary] = Field(..., alias="caseStudies")
    count: int
    field: str = "all"
    order: str = "asc"

    model_config = ConfigDict(populate_by_name=True)


class CaseStudyResponse(BaseModel):
    """A full case study."""
    case_study: CaseStudy = Field(..., alias="caseStudy")

    model_config = ConfigDict(populate_by_name=True)


class AnswerResponse(BaseModel):
    """Result of checking an answer."""
    is_correct: bool = Field(..., alias="isCorrect")
    message: str = Field(..., description="Correct! or Incorrect.")
    selected_answer: str = Field(..., alias="selectedAnswer")
    correct_answer: str = Field(..., alias="correctAnswer")
    explanation: str

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Standard error response for all endpoints.

    Attributes:
        error: Human-readable error message
        error_code: Machine-readable error code
        details: Additional error details
    """

    error: str = Field(
        ...,
        description="Human-readable error message"
    )
    error_code: Optional[str] = Field(
        None,
        description="Machine-readable error code"
    )
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional error details for debugging"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Unknown disease field: 'radiology'",
                "error_code": "UNKNOWN_CATEGORY",
                "details": {"known_fields": ["cardiology", "neurology"]}
            }
        }
    )
