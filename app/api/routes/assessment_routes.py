# app/api/routes/assessment_routes.py
from fastapi import APIRouter, HTTPException

from app.models.assessment_models import AssessmentAnswers, AssessmentResponse, AssessmentResult
from app.services.assessment_services import get_assessment, score_assessment

router = APIRouter(tags=["Assessment"])


@router.get("", response_model=AssessmentResponse)
def assessment(language: str = "fa"):
    return get_assessment(language)


@router.post("/score", response_model=AssessmentResult)
def score(request: AssessmentAnswers):
    """Work out the personality trait from one option index per question."""
    try:
        return score_assessment(request.answers, request.language)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
