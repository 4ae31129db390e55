# app/api/routes/llm_routes.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from google import genai
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.dependencies import get_llm_client, get_podcast_corpus
from app.core.security import limiter
from app.data.assessment import get_message
from app.data.database import get_db
from app.models.llm_models import AnalyzeRequest, AnalyzeResponse, SpeechRequest
from app.models.markup_models import RenderRequest, RenderResponse
from app.models.podcast_models import Podcast
from app.services.audio_services import pcm_to_wav
from app.services.llm.llm_services import analyze_problem_logic
from app.services.llm.llm_utils import LLMServiceError, synthesize_speech
from app.services.markup_services import render_markup

logger = logging.getLogger(__name__)

router = APIRouter(tags=["LLM"])


@router.post("/analyze", response_model=AnalyzeResponse)
@limiter.limit(settings.ANALYZE_RATE_LIMIT)
async def analyze(
    request: Request,
    analyze_request: AnalyzeRequest,
    db: Session = Depends(get_db),
    client: genai.Client = Depends(get_llm_client),
    podcasts: List[Podcast] = Depends(get_podcast_corpus),
):
    """
    Answer the user's problem in their chosen style, grounded in the podcast corpus.
    """
    try:
        return await analyze_problem_logic(analyze_request, db=db, client=client, podcasts=podcasts)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LLMServiceError:
        raise HTTPException(status_code=502, detail=get_message("error", analyze_request.language))
    except SQLAlchemyError:
        logger.exception("Failed to save analysis")
        raise HTTPException(status_code=500, detail="Failed to save query")


@router.post("/speech")
async def speech(speech_request: SpeechRequest, client: genai.Client = Depends(get_llm_client)):
    """Read an answer aloud, returned as a WAV file."""
    if not speech_request.text.strip():
        raise HTTPException(status_code=400, detail="Text cannot be empty")

    try:
        pcm = await synthesize_speech(client, speech_request.text)
    except LLMServiceError:
        raise HTTPException(status_code=502, detail=get_message("error", speech_request.language))

    return Response(content=pcm_to_wav(pcm, settings.TTS_SAMPLE_RATE), media_type="audio/wav")


@router.post("/render", response_model=RenderResponse)
def render(render_request: RenderRequest):
    """Split an answer's block markup into display fragments."""
    return {"fragments": render_markup(render_request.text, render_request.images, render_request.language)}
