"""Pydantic schemas for Events."""
from __future__ import annotations
from datetime import datetime
from typing import Optional, Union
from pydantic import BaseModel, Field

from drinklog.models.event import HealthTag
from drinklog.schemas.drink import DrinkOut

# Loose on purpose: presence and coercion are checked by event_service so that
# every bad field yields the same "invalid income data" answer.
Scalar = Optional[Union[int, float, str]]


class EventCreate(BaseModel):
    drink_type: Optional[str] = Field(default=None, alias="drinkType")
    drink_name: Scalar = Field(default=None, alias="drinkName")
    percentage: Scalar = None
    date: Scalar = None
    cost: Scalar = None
    volume: Scalar = None
    health: Optional[str] = None


class EventOut(BaseModel):
    """Event with its drink as a bare id (create/delete responses)."""

    id: str = Field(validation_alias="event_id")
    user: str = Field(validation_alias="user_id")
    drink: str = Field(validation_alias="drink_id")
    date: datetime
    volume: int
    cost: Optional[int] = None
    health: Optional[HealthTag] = None

    model_config = {"from_attributes": True, "populate_by_name": True}


class EventWithDrinkOut(EventOut):
    """Event with the referenced drink embedded (list/get responses)."""

    drink: DrinkOut
