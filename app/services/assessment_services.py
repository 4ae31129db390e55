# app/services/assessment_services.py
from typing import List

from app.data.assessment import (
    ASSESSMENT_QUESTIONS,
    LANGUAGES,
    PERSONALITY_TRAITS,
    RESPONSE_STYLES,
    localize,
)
from app.models.assessment_models import AssessmentResponse, AssessmentResult


def get_assessment(language: str) -> AssessmentResponse:
    """Localized questionnaire, traits, styles and languages for the quiz UI."""
    return AssessmentResponse(
        language=language,
        questions=[
            {
                "id": question["id"],
                "question": localize(question["question"], language),
                "options": [
                    {"text": localize(option["text"], language), "trait": option["trait"]}
                    for option in question["options"]
                ],
            }
            for question in ASSESSMENT_QUESTIONS
        ],
        traits=[
            {
                "id": trait_id,
                "label": localize(trait["label"], language),
                "description": localize(trait["description"], language),
            }
            for trait_id, trait in PERSONALITY_TRAITS.items()
        ],
        styles=[
            {
                "id": style["id"],
                "label": localize(style["label"], language),
                "description": localize(style["description"], language),
            }
            for style in RESPONSE_STYLES
        ],
        languages=LANGUAGES,
    )


def score_assessment(answers: List[int], language: str = "fa") -> AssessmentResult:
    """
    Count the trait behind each chosen option and return the strongest one.

    Ties are resolved in favour of the trait that comes later in
    PERSONALITY_TRAITS.
    """
    if len(answers) != len(ASSESSMENT_QUESTIONS):
        raise ValueError(f"Expected {len(ASSESSMENT_QUESTIONS)} answers, got {len(answers)}")

    scores = {trait_id: 0 for trait_id in PERSONALITY_TRAITS}
    for question, answer in zip(ASSESSMENT_QUESTIONS, answers):
        options = question["options"]
        if not 0 <= answer < len(options):
            raise ValueError(f"Invalid option {answer} for question {question['id']}")
        scores[options[answer]["trait"]] += 1

    personality = None
    for trait_id, score in scores.items():
        if personality is None or score >= scores[personality]:
            personality = trait_id

    trait = PERSONALITY_TRAITS[personality]
    return AssessmentResult(
        personality=personality,
        label=localize(trait["label"], language),
        description=localize(trait["description"], language),
        scores=scores,
    )
