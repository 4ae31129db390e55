# app/models/llm_models.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.markup_models import MarkupFragment
from app.models.podcast_models import ScoredPodcast


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    problem: str
    user_id: Optional[int] = Field(default=None, alias="userId")
    user_context: Optional[str] = Field(default=None, alias="userContext")
    personality: Optional[str] = None
    style: str = "friendly"
    language: str = "fa"
    article_mode: bool = Field(default=False, alias="articleMode")
    is_public: bool = Field(default=True, alias="isPublic")


class AnalyzeResponse(BaseModel):
    answer: str
    images: List[str]
    sources: List[ScoredPodcast]
    fragments: List[MarkupFragment]
    personality: Optional[str] = None
    style: str
    language: str


class SpeechRequest(BaseModel):
    text: str
    language: str = "fa"
