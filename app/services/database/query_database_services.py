# app/services/database/query_database_services.py
import json
from datetime import datetime
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from app.models.database_models.query import Query
from app.models.database_models.user import User

PUBLIC_FEED_LIMIT = 50
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(TIMESTAMP_FORMAT) if value else None


def mask_identifier(identifier: str) -> str:
    """Hide most of an identifier before it is shown in the public feed."""
    if "@" in identifier:
        parts = identifier.split("@")
        return parts[0][:3] + "***@" + parts[1]
    return identifier[:4] + "****" + identifier[8:]


def query_to_dict(query: Query) -> dict:
    return {
        "id": query.id,
        "user_id": query.user_id,
        "user_context": query.user_context,
        "problem": query.problem,
        "personality": query.personality,
        "style": query.style,
        "language": query.language,
        "answer": query.answer,
        "images": json.loads(query.images) if query.images else [],
        "is_public": query.is_public,
        "created_at": format_timestamp(query.created_at),
    }


def save_query(
    db: Session,
    problem: str,
    answer: str,
    user_id: Optional[int] = None,
    user_context: Optional[str] = None,
    personality: Optional[str] = None,
    style: Optional[str] = None,
    language: Optional[str] = None,
    images: Optional[List[str]] = None,
    is_public: Optional[bool] = None,
) -> Query:
    db_query = Query(
        user_id=user_id,
        user_context=user_context,
        problem=problem,
        personality=personality,
        style=style,
        language=language,
        answer=answer,
        images=json.dumps(images or []),
        is_public=1 if is_public else 0,
    )
    db.add(db_query)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_query)
    return db_query


def get_user_history(db: Session, user_id: int) -> List[dict]:
    result = db.execute(
        select(Query)
        .where(Query.user_id == user_id)
        .order_by(desc(Query.created_at), desc(Query.id))
    )
    return [query_to_dict(query) for query in result.scalars().all()]


def get_public_feed(db: Session, limit: int = PUBLIC_FEED_LIMIT) -> List[dict]:
    result = db.execute(
        select(Query, User.identifier)
        .join(User, Query.user_id == User.id)
        .where(Query.is_public == 1)
        .order_by(desc(Query.created_at), desc(Query.id))
        .limit(limit)
    )
    feed = []
    for query, identifier in result.all():
        entry = query_to_dict(query)
        entry["user_id_text"] = mask_identifier(identifier)
        feed.append(entry)
    return feed
