# app/services/relevance_services.py
from typing import List

from app.models.podcast_models import Podcast, ScoredPodcast

MAX_RELEVANT_PODCASTS = 5
MIN_KEYWORD_LENGTH = 3

CONTEXT_SEPARATOR = "\n\n---\n\n"
NO_CONTEXT_TEXT = "هیچ متن مرجع مستقیمی یافت نشد."


def extract_keywords(query: str) -> List[str]:
    return [token for token in query.lower().split() if len(token) >= MIN_KEYWORD_LENGTH]


def find_relevant_podcasts(
    query: str, podcasts: List[Podcast], limit: int = MAX_RELEVANT_PODCASTS
) -> List[ScoredPodcast]:
    """
    Rank podcasts by how many query keywords appear in their title or text.

    Each keyword adds one point when it occurs anywhere in the podcast as a
    substring. Keywords are not deduplicated, so a repeated word scores once
    per repetition. Podcasts with no hits are dropped, ties keep corpus order.
    """
    if not query or not podcasts:
        return []

    keywords = extract_keywords(query)
    scored = []
    for podcast in podcasts:
        content = f"{podcast.title} {podcast.text}".lower()
        score = sum(1 for keyword in keywords if keyword in content)
        if score > 0:
            scored.append(ScoredPodcast(**podcast.model_dump(), score=score))

    scored.sort(key=lambda p: p.score, reverse=True)
    return scored[:limit]


def build_context_text(sources: List[Podcast]) -> str:
    if not sources:
        return NO_CONTEXT_TEXT
    return CONTEXT_SEPARATOR.join(f"عنوان: {p.title}\nمتن: {p.text}" for p in sources)
