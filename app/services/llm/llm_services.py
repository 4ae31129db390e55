# app/services/llm/llm_services.py
import logging
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool
from google import genai
from sqlalchemy.orm import Session

from app.core.config import settings
from app.data.assessment import (
    DEFAULT_PERSONALITY,
    PERSONALITY_TRAITS,
    RESPONSE_STYLES,
    localize,
)
from app.models.llm_models import AnalyzeRequest, AnalyzeResponse
from app.models.podcast_models import Podcast
from app.services.database.query_database_services import save_query
from app.services.llm.llm_utils import LLMServiceError, generate_image, generate_text
from app.services.markup_services import render_markup
from app.services.relevance_services import build_context_text, find_relevant_podcasts

logger = logging.getLogger(__name__)

IMAGE_PROMPT = (
    "A professional, minimal, and purely conceptual psychological illustration for: {problem}. "
    "No text. Symbolic representation. Style: soft colors, clean, high quality."
)


def build_analysis_prompt(request: AnalyzeRequest, context_text: str) -> str:
    language = request.language
    trait = PERSONALITY_TRAITS.get(request.personality or "", PERSONALITY_TRAITS[DEFAULT_PERSONALITY])
    style = next((s for s in RESPONSE_STYLES if s["id"] == request.style), RESPONSE_STYLES[0])

    return f"""
Role: You are the "Dr. Azarakhsh Mokri Smart Assistant". Respond in: {language}.
Style: {localize(style["label"], language)}.
User Personality: {localize(trait["label"], language)}.
User Context (About them): {request.user_context or 'Not provided'}.
Article Mode: {'ON' if request.article_mode else 'OFF'}.

Instructions:
1. Tone: Analytical, compassionate, evidence-based.
2. Structure:
   - Deep Empathy & Understanding.
   - Root Cause Analysis.
   - :::important [Key Concept/Experiment]
     Explain a scientific experiment (e.g., Skinner's pigeons, Harlow's monkeys) or core psychological concept.
     :::
   - Practical Steps: Use ":::step [Number]\nDescription\n:::" for each step.
3. Content:
   - If Article Mode is ON, be comprehensive and detailed (aim for high quality, around 800-1000 words).
   - Insert placeholders like "[IMAGE_PLACEHOLDER_1]", "[IMAGE_PLACEHOLDER_2]" in the middle of the text where a conceptual image would fit best.
4. Grounding: Use the provided context:
{context_text}

User's Problem: {request.problem}
"""


async def generate_article_images(client: genai.Client, problem: str, count: Optional[int] = None) -> List[str]:
    """
    Generates the concept images for article mode.
    Stops at the first failure and keeps whatever was generated before it.
    """
    images = []
    prompt = IMAGE_PROMPT.format(problem=problem)
    try:
        for _ in range(settings.ARTICLE_IMAGE_COUNT if count is None else count):
            image = await generate_image(client, prompt)
            if image:
                images.append(image)
    except LLMServiceError:
        logger.exception("Image generation failed")
    return images


async def analyze_problem_logic(
    request: AnalyzeRequest, db: Session, client: genai.Client, podcasts: List[Podcast]
) -> AnalyzeResponse:
    """
    Ground the problem in the podcast corpus, ask the model for an answer,
    optionally illustrate it, and store the result for the user.
    """
    if not request.problem or not request.problem.strip():
        raise ValueError("Problem cannot be empty")

    logger.debug(f"Analyzing problem for user {request.user_id} (article mode: {request.article_mode})")

    sources = find_relevant_podcasts(request.problem, podcasts)
    prompt = build_analysis_prompt(request, build_context_text(sources))

    answer = await generate_text(client, prompt)

    images = []
    if request.article_mode:
        images = await generate_article_images(client, request.problem)

    if request.user_id is not None:
        await run_in_threadpool(
            save_query,
            db,
            problem=request.problem,
            answer=answer,
            user_id=request.user_id,
            user_context=request.user_context,
            personality=request.personality,
            style=request.style,
            language=request.language,
            images=images,
            is_public=request.is_public,
        )
        logger.info(f"Saved analysis for user {request.user_id}")

    return AnalyzeResponse(
        answer=answer,
        images=images,
        sources=sources,
        fragments=render_markup(answer, images, request.language),
        personality=request.personality,
        style=request.style,
        language=request.language,
    )
