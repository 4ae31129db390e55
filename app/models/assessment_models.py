# app/models/assessment_models.py
from typing import Dict, List

from pydantic import BaseModel


class AssessmentOption(BaseModel):
    text: str
    trait: str


class AssessmentQuestion(BaseModel):
    id: str
    question: str
    options: List[AssessmentOption]


class PersonalityTrait(BaseModel):
    id: str
    label: str
    description: str


class ResponseStyle(BaseModel):
    id: str
    label: str
    description: str


class Language(BaseModel):
    id: str
    label: str
    dir: str


class AssessmentResponse(BaseModel):
    language: str
    questions: List[AssessmentQuestion]
    traits: List[PersonalityTrait]
    styles: List[ResponseStyle]
    languages: List[Language]


class AssessmentAnswers(BaseModel):
    answers: List[int]
    language: str = "fa"


class AssessmentResult(BaseModel):
    personality: str
    label: str
    description: str
    scores: Dict[str, int]
