# app/models/database_models/query.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base


class Query(Base):
    __tablename__ = "queries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    user_context = Column(Text, nullable=True)
    problem = Column(Text, nullable=False)
    personality = Column(String, nullable=True)
    style = Column(String, nullable=True)
    language = Column(String, nullable=True)
    answer = Column(Text, nullable=False)
    images = Column(Text, nullable=True)  # JSON array of image references
    is_public = Column(Integer, default=1, server_default="1")
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="queries")
