# app/api/routes/query_routes.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.models.query_models import PublicQueryResponse, QueryResponse, SaveQueryRequest
from app.services.database.query_database_services import (
    get_public_feed,
    get_user_history,
    save_query,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Queries"])


@router.post("/save-query")
def save_query_route(request: SaveQueryRequest, db: Session = Depends(get_db)):
    """Store one analysis result."""
    try:
        save_query(
            db,
            problem=request.problem,
            answer=request.answer,
            user_id=request.user_id,
            user_context=request.user_context,
            personality=request.personality,
            style=request.style,
            language=request.language,
            images=request.images,
            is_public=request.is_public,
        )
    except SQLAlchemyError:
        logger.exception("Failed to save query")
        raise HTTPException(status_code=500, detail="Failed to save query")

    return {"success": True}


@router.get("/history/{user_id}", response_model=List[QueryResponse])
def get_history(user_id: int, db: Session = Depends(get_db)):
    """Fetch a user's saved analyses, newest first."""
    try:
        return get_user_history(db, user_id)
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch history for user {user_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch history")


@router.get("/public-feed", response_model=List[PublicQueryResponse])
def public_feed(db: Session = Depends(get_db)):
    """The latest public analyses with their authors' identifiers masked."""
    try:
        return get_public_feed(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch public feed")
        raise HTTPException(status_code=500, detail="Failed to fetch public feed")
