"""User ORM model: the account that owns sessions and events."""
import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from drinklog.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(50), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
