# app/models/query_models.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SaveQueryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[int] = Field(default=None, alias="userId")
    user_context: Optional[str] = Field(default=None, alias="userContext")
    problem: str
    personality: Optional[str] = None
    style: Optional[str] = None
    language: Optional[str] = None
    answer: str
    images: Optional[List[str]] = None
    is_public: Optional[bool] = Field(default=None, alias="isPublic")


class QueryResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    user_context: Optional[str] = None
    problem: str
    personality: Optional[str] = None
    style: Optional[str] = None
    language: Optional[str] = None
    answer: str
    images: List[str] = []
    is_public: int
    created_at: Optional[str] = None


class PublicQueryResponse(QueryResponse):
    user_id_text: str
