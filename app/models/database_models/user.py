# app/models/database_models/user.py
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.data.database import Base
from app.models.database_models.query import Query


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    identifier = Column(String, unique=True, nullable=False)  # email or phone
    type = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    queries = relationship("Query", back_populates="user")
