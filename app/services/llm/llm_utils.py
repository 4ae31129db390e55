# app/services/llm/llm_utils.py
import base64
import logging
from typing import Optional

from google import genai
from google.genai import errors, types

from app.core.config import settings

logger = logging.getLogger(__name__)

NO_RESPONSE_TEXT = "No response received."


class LLMServiceError(Exception):
    """The generative-AI provider call failed or returned nothing usable."""


def _first_inline_part(response: types.GenerateContentResponse):
    if not response.candidates:
        return None
    content = response.candidates[0].content
    if content is None or not content.parts:
        return None
    for part in content.parts:
        if part.inline_data:
            return part
    return None


async def generate_text(
    client: genai.Client, prompt: str, model: Optional[str] = None, temperature: Optional[float] = None
) -> str:
    """Single-shot text generation; no retries."""
    model = model or settings.TEXT_MODEL
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.TEMPERATURE if temperature is None else temperature
            ),
        )
    except errors.APIError as e:
        logger.exception(f"Gemini API error from {model}")
        raise LLMServiceError(str(e)) from e
    except Exception as e:
        logger.exception(f"Unexpected error querying {model}")
        raise LLMServiceError(str(e)) from e

    return response.text or NO_RESPONSE_TEXT


async def generate_image(client: genai.Client, prompt: str, model: Optional[str] = None) -> Optional[str]:
    """
    Generates one illustration and returns it as a data URL,
    or None when the response holds no image.
    """
    model = model or settings.IMAGE_MODEL
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(image_config=types.ImageConfig(aspect_ratio="16:9")),
        )
    except Exception as e:
        raise LLMServiceError(str(e)) from e

    part = _first_inline_part(response)
    if part is None:
        return None
    mime_type = part.inline_data.mime_type or "image/png"
    encoded = base64.b64encode(part.inline_data.data).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


async def synthesize_speech(
    client: genai.Client, text: str, model: Optional[str] = None, voice: Optional[str] = None
) -> bytes:
    """Returns raw 16-bit mono PCM for the given text."""
    model = model or settings.TTS_MODEL
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=text,
            config=types.GenerateContentConfig(
                response_modalities=["AUDIO"],
                speech_config=types.SpeechConfig(
                    voice_config=types.VoiceConfig(
                        prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice or settings.TTS_VOICE)
                    )
                ),
            ),
        )
    except Exception as e:
        logger.exception(f"Speech synthesis failed on {model}")
        raise LLMServiceError(str(e)) from e

    part = _first_inline_part(response)
    if part is None:
        raise LLMServiceError("No audio returned by the speech model")
    return part.inline_data.data
