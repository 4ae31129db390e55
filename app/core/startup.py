# app/core/startup.py
import logging

from fastapi import FastAPI
from google import genai

from app.core.config import load_gemini_api_key, settings
from app.data.migrations import run_migrations
from app.data.podcasts import load_podcast_corpus

logger = logging.getLogger(__name__)


async def startup_event(app: FastAPI):
    """
    Initialize resources on application startup.
    The corpus and the LLM client live on app.state and reach routes through dependencies.
    """
    try:
        if settings.RUN_MIGRATIONS_ON_STARTUP:
            run_migrations(settings.DATABASE_URL)

        try:
            app.state.podcasts = load_podcast_corpus(settings.PODCASTS_PATH)
        except FileNotFoundError:
            logger.error(f"Podcast corpus not found at {settings.PODCASTS_PATH}; answers will be ungrounded.")
            app.state.podcasts = []

        api_key = load_gemini_api_key()
        app.state.llm_client = genai.Client(api_key=api_key) if api_key else None
        if app.state.llm_client is None:
            logger.warning("No Gemini API key configured; AI routes will answer 503.")
        else:
            logger.info("Gemini client initialized successfully.")

    except Exception:
        logger.exception("Failed to startup")
        raise
