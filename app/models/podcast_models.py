# app/models/podcast_models.py
from pydantic import BaseModel


class Podcast(BaseModel):
    title: str
    text: str
    link: str = ""
    mp3_url: str = ""


class ScoredPodcast(Podcast):
    score: int
