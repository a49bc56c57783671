"""Event ORM model: one drink consumed by one user at one moment."""
import uuid
import enum
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from drinklog.database import Base


class HealthTag(str, enum.Enum):
    fine = "fine"
    tipsy = "tipsy"
    drunk = "drunk"
    hangover = "hangover"
    sick = "sick"


class Event(Base):
    __tablename__ = "events"

    event_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    drink_id = Column(String(36), ForeignKey("drinks.drink_id"), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    cost = Column(Integer, nullable=True)
    volume = Column(Integer, nullable=False)
    health = Column(SAEnum(HealthTag), nullable=True)

    drink = relationship("Drink")
