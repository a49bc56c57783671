"""Event API routes: delegates to event_service for ownership and validation."""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from drinklog.database import get_db
from drinklog.dependencies import get_current_user
from drinklog.schemas.event import EventCreate, EventOut, EventWithDrinkOut
from drinklog.schemas.user import CurrentUser
from drinklog.services import event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/events", response_model=list[EventWithDrinkOut], response_model_exclude_none=True)
def list_events(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List the caller's events, newest first, with drinks embedded."""
    return event_service.list_events(db, current_user)


@router.get("/event/{event_id}", response_model=EventWithDrinkOut, response_model_exclude_none=True)
def get_event(
    event_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Fetch one of the caller's events with its drink embedded."""
    return event_service.get_event(db, current_user, event_id)


@router.post("/events", response_model=EventOut, response_model_exclude_none=True)
def create_event(
    payload: EventCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create an event for the caller; the drink is resolved or created first."""
    return event_service.create_event(db, current_user, payload)


@router.delete("/events/{event_id}", response_model=EventOut, response_model_exclude_none=True)
def delete_event(
    event_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete one of the caller's events and return it."""
    return event_service.delete_event(db, current_user, event_id)
