# app/models/markup_models.py
from typing import List, Literal, Optional

from pydantic import BaseModel


class MarkupFragment(BaseModel):
    type: Literal["text", "image", "step", "callout"]
    content: Optional[str] = None
    url: Optional[str] = None
    number: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None


class RenderRequest(BaseModel):
    text: str
    images: List[str] = []
    language: str = "fa"


class RenderResponse(BaseModel):
    fragments: List[MarkupFragment]
