# app/data/podcasts.py
import json
import logging
from typing import List

from app.models.podcast_models import Podcast

logger = logging.getLogger(__name__)


def load_podcast_corpus(filepath: str) -> List[Podcast]:
    """
    Load the podcast reference corpus from a JSON array of
    {title, text, link, mp3_url} records.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    podcasts = [Podcast(**record) for record in data]
    logger.info(f"Loaded {len(podcasts)} podcasts from {filepath}")
    return podcasts
