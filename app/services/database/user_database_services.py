# app/services/database/user_database_services.py
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.database_models.user import User

logger = logging.getLogger(__name__)


def classify_identifier(identifier: str) -> str:
    return "email" if "@" in identifier else "phone"


def get_user_by_identifier(db: Session, identifier: str) -> Optional[User]:
    result = db.execute(select(User).filter(User.identifier == identifier))
    return result.scalars().first()


def get_or_create_user(db: Session, identifier: str) -> User:
    """
    Insert-if-absent by identifier, then return the stored row.
    A concurrent insert of the same identifier loses on the unique constraint
    and falls back to reading the winner's row.
    """
    user = get_user_by_identifier(db, identifier)
    if user:
        return user

    db_user = User(identifier=identifier, type=classify_identifier(identifier))
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.debug(f"User {identifier!r} was created concurrently, reading it back")
        return get_user_by_identifier(db, identifier)

    db.refresh(db_user)
    logger.info(f"Registered new {db_user.type} user {db_user.id}")
    return db_user
