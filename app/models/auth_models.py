# app/models/auth_models.py
from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    identifier: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    identifier: str
    type: str
    created_at: Optional[str] = None
