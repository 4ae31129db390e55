# app/api/routes/auth_routes.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import limiter
from app.data.database import get_db
from app.models.auth_models import LoginRequest, UserResponse
from app.services.database.query_database_services import format_timestamp
from app.services.database.user_database_services import get_or_create_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=UserResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
def login(request: Request, login_data: LoginRequest, db: Session = Depends(get_db)):
    """Log in with an email or phone number, registering it on first use."""
    if not login_data.identifier:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Identifier is required")

    try:
        user = get_or_create_user(db, login_data.identifier)
    except SQLAlchemyError:
        logger.exception("Login failed")
        raise HTTPException(status_code=500, detail="Database error")

    return {
        "id": user.id,
        "identifier": user.identifier,
        "type": user.type,
        "created_at": format_timestamp(user.created_at),
    }
