"""
Case Study API Routes for MedSky

Generate, list, open, answer and delete the caller's case studies.
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query, status

from medsky.api.dependencies import get_case_service, get_current_user
from medsky.data.categories import category_label
from medsky.models.domain import User
from medsky.models.requests import AnswerRequest, GenerateCaseRequest
from medsky.models.responses import (
    AnswerResponse,
    CaseStudyListResponse,
    CaseStudyResponse,
    CaseStudySummary,
)
from medsky.services.case import CaseStudyService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cases", tags=["cases"])


@router.post("/generate", response_model=CaseStudyResponse, status_code=status.HTTP_201_CREATED)
async def generate_case(
    request: GenerateCaseRequest,
    user: User = Depends(get_current_user),
    service: CaseStudyService = Depends(get_case_service),
):
    """
    Generate a new case study and save it to the caller's collection.

    **Example Request:**
    ```json
    {"diseaseField": "cardiology"}
    ```

    **Example Response:**
    ```json
    {
        "caseStudy": {
            "id": "4f1c...",
            "title": "Acute Cardiac Case in a 60-Year-Old Male",
            "question": "What is the most likely diagnosis?",
            "options": ["A. Myocardial", "B. Heart Failure", "C. Unrelated Condition", "D. Normal Finding"],
            "correctAnswer": "A. Myocardial",
            "diseaseField": "cardiology"
        }
    }
    ```
    """
    saved = await service.generate_case(user.uid, request.disease_field)
    return CaseStudyResponse(case_study=saved)


@router.get("", response_model=CaseStudyListResponse)
def list_cases(
    field: str = Query("all", description="Category key, or 'all'"),
    order: Literal["asc", "desc"] = Query("asc", description="Title sort order"),
    user: User = Depends(get_current_user),
    service: CaseStudyService = Depends(get_case_service),
):
    """List the caller's case studies, filtered by field and sorted by title."""
    case_studies = service.list_cases(user.uid, field=field, ascending=order == "asc")
    summaries = [
        CaseStudySummary(
            id=c.id,
            title=c.title,
            preview=c.preview(),
            disease_field=c.disease_field,
            field_label=category_label(c.disease_field),
        )
        for c in case_studies
    ]
    return CaseStudyListResponse(case_studies=summaries, count=len(summaries), field=field, order=order)


@router.get("/{case_id}", response_model=CaseStudyResponse)
def get_case(
    case_id: str,
    user: User = Depends(get_current_user),
    service: CaseStudyService = Depends(get_case_service),
):
    """Fetch one case study."""
    return CaseStudyResponse(case_study=service.get_case(user.uid, case_id))


@router.post("/{case_id}/answer", response_model=AnswerResponse)
def answer_case(
    case_id: str,
    request: AnswerRequest,
    user: User = Depends(get_current_user),
    service: CaseStudyService = Depends(get_case_service),
):
    """Check an answer and reveal the explanation."""
    result = service.check_answer(user.uid, case_id, request.selected_answer)
    return AnswerResponse(
        is_correct=result.is_correct,
        message="Correct!" if result.is_correct else "Incorrect.",
        selected_answer=result.selected_answer,
        correct_answer=result.correct_answer,
        explanation=result.explanation,
    )


@router.delete("/{case_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_case(
    case_id: str,
    user: User = Depends(get_current_user),
    service: CaseStudyService = Depends(get_case_service),
):
    """Delete one case study."""
    service.delete_case(user.uid, case_id)
