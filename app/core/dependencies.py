# app/core/dependencies.py
from typing import List

from fastapi import HTTPException, Request, status
from google import genai

from app.models.podcast_models import Podcast


def get_podcast_corpus(request: Request) -> List[Podcast]:
    """Dependency to provide the podcast corpus loaded at startup."""
    return getattr(request.app.state, "podcasts", [])


def get_llm_client(request: Request) -> genai.Client:
    """Dependency to provide the Gemini client created at startup."""
    client = getattr(request.app.state, "llm_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI provider is not configured",
        )
    return client
