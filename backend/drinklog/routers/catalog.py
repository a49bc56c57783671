"""Enumeration routes used by clients to render form labels.

Only mounted when ``ENABLE_CATALOG_ROUTES`` is set.
"""
from fastapi import APIRouter

from drinklog.models.drink import DrinkType
from drinklog.models.event import HealthTag

router = APIRouter()


@router.get("/drink", response_model=list[str])
def list_drink_types():
    return [t.value for t in DrinkType]


@router.get("/health", response_model=list[str])
def list_health_tags():
    return [t.value for t in HealthTag]
