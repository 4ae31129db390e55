# app/core/config.py
import logging
import os
from typing import List, Optional

from pydantic_settings import BaseSettings

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./mokri_assistant.db"
    RUN_MIGRATIONS_ON_STARTUP: bool = True

    GEMINI_API_KEY: Optional[str] = None
    TEXT_MODEL: str = "gemini-3-flash-preview"
    IMAGE_MODEL: str = "gemini-2.5-flash-image"
    TTS_MODEL: str = "gemini-2.5-flash-preview-tts"
    TTS_VOICE: str = "Kore"
    TTS_SAMPLE_RATE: int = 24000
    TEMPERATURE: float = 0.8
    ARTICLE_IMAGE_COUNT: int = 3

    PODCASTS_PATH: str = os.path.join(BASE_DIR, "app", "data", "podcasts_db.json")

    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "30/minute"
    ANALYZE_RATE_LIMIT: str = "10/minute"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)
logger.info(f"Loaded DATABASE_URL: {settings.DATABASE_URL}")


def load_gemini_api_key() -> Optional[str]:
    """
    Returns the Gemini API key from the environment, falling back to the secrets file.
    """
    if settings.GEMINI_API_KEY:
        return settings.GEMINI_API_KEY

    secrets_path = os.path.join(BASE_DIR, "secrets", "Google-ai-studio-gemini-key.txt")
    try:
        with open(secrets_path, "r") as file:
            return file.read().strip() or None
    except FileNotFoundError:
        logger.warning(f"API key file not found at {secrets_path}; AI features are disabled.")
        return None
    except OSError as e:
        raise RuntimeError(f"Error reading API key file: {e}")
