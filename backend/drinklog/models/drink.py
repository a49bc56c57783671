"""Drink ORM model, identified by type + name + percentage."""
import uuid
import enum
from sqlalchemy import Column, String, Float, UniqueConstraint, Enum as SAEnum
from drinklog.database import Base


class DrinkType(str, enum.Enum):
    beer = "beer"
    wine = "wine"
    cider = "cider"
    spirits = "spirits"
    cocktail = "cocktail"
    other = "other"


class Drink(Base):
    __tablename__ = "drinks"
    __table_args__ = (
        UniqueConstraint("type", "name", "percentage", name="uq_drinks_type_name_percentage"),
    )

    drink_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    type = Column(SAEnum(DrinkType), nullable=False)
    name = Column(String(150), nullable=False)
    percentage = Column(Float, nullable=False)
