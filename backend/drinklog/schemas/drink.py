"""Pydantic schemas for Drinks."""
from pydantic import BaseModel, Field

from drinklog.models.drink import DrinkType


class DrinkOut(BaseModel):
    id: str = Field(validation_alias="drink_id")
    type: DrinkType
    name: str
    percentage: float

    model_config = {"from_attributes": True, "populate_by_name": True}
