"""Core event service: ownership-scoped CRUD with request validation.

Responsibilities:
- Every query and mutation is filtered by the caller's user id
- A miss and a foreign id are indistinguishable (both InvalidIncomeData)
- Create validates fail-fast, in order: drink fields, drink resolution,
  volume, cost, health, date
- The owner always comes from the session, never from the body
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session, joinedload

from drinklog.errors import InvalidIncomeData, StoreError
from drinklog.models.event import Event, HealthTag
from drinklog.schemas.event import EventCreate, EventOut
from drinklog.schemas.user import CurrentUser
from drinklog.services import drink_service

logger = logging.getLogger(__name__)

# Bounds of the 32-bit Integer columns.
INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1


def _parse_event_id(event_id: str) -> str:
    """Normalize a path id; malformed ids are store errors, not domain misses."""
    try:
        return str(uuid.UUID(event_id))
    except (TypeError, ValueError) as exc:
        raise StoreError(f"malformed event id {event_id!r}") from exc


def _to_int(value: Any, field: str) -> int:
    """Coerce client input to int, truncating decimals ("12.7" -> 12)."""
    if isinstance(value, bool):
        raise InvalidIncomeData(f"{field} must be a number")
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(float(str(value).strip()))
        except (ValueError, OverflowError):
            raise InvalidIncomeData(f"{field} {value!r} is not a number")
    if not INT_MIN <= number <= INT_MAX:
        raise InvalidIncomeData(f"{field} {number} out of range")
    return number


def _parse_health(value: Any) -> HealthTag:
    try:
        return HealthTag(value)
    except ValueError:
        raise InvalidIncomeData(f"unknown health tag {value!r}")


def _parse_date(value: Any) -> datetime:
    """Parse the client's date and normalize it to UTC.

    Accepts ISO-8601 strings (naive values are taken as UTC) and numeric
    epoch milliseconds. A missing date is not rejected: it falls back to
    the current time.
    """
    if isinstance(value, bool):
        raise InvalidIncomeData("date must be a string or epoch milliseconds")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            raise InvalidIncomeData(f"date {value!r} out of range")
    if not value:
        return datetime.now(timezone.utc)
    raw = str(value).strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise InvalidIncomeData(f"date {value!r} is not ISO-8601")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _owned(db: Session, user: CurrentUser):
    return db.query(Event).filter(Event.user_id == user.id)


def list_events(db: Session, user: CurrentUser) -> list[Event]:
    """All of the user's events with drinks joined in, newest first."""
    return (
        _owned(db, user)
        .options(joinedload(Event.drink))
        .order_by(Event.date.desc())
        .all()
    )


def get_event(db: Session, user: CurrentUser, event_id: str) -> Event:
    event = (
        _owned(db, user)
        .options(joinedload(Event.drink))
        .filter(Event.event_id == _parse_event_id(event_id))
        .first()
    )
    if not event:
        raise InvalidIncomeData(f"event {event_id} not found for user {user.id}")
    return event


def create_event(db: Session, user: CurrentUser, payload: EventCreate) -> Event:
    """Validate the payload and persist a new event owned by ``user``."""
    if not (payload.drink_type and payload.drink_name and payload.percentage):
        raise InvalidIncomeData("drinkType, drinkName and percentage are required")

    drink_id = drink_service.resolve_drink(
        db, payload.drink_type, payload.drink_name, payload.percentage,
    )

    fields: dict[str, Any] = {
        "user_id": user.id,
        "drink_id": drink_id,
    }

    if not payload.volume:
        raise InvalidIncomeData("volume is required")
    fields["volume"] = _to_int(payload.volume, "volume")

    if payload.cost:
        fields["cost"] = _to_int(payload.cost, "cost")

    if payload.health:
        fields["health"] = _parse_health(payload.health)

    fields["date"] = _parse_date(payload.date)

    event = Event(**fields)
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Created event %s for user %s (drink %s)", event.event_id, user.id, drink_id)
    return event


def delete_event(db: Session, user: CurrentUser, event_id: str) -> EventOut:
    """Find-and-delete in one transaction; returns the deleted event."""
    event = (
        _owned(db, user)
        .filter(Event.event_id == _parse_event_id(event_id))
        .with_for_update()
        .first()
    )
    if not event:
        db.rollback()
        raise InvalidIncomeData(f"event {event_id} not found for user {user.id}")

    deleted = EventOut.model_validate(event)
    db.delete(event)
    db.commit()
    logger.info("Deleted event %s for user %s", deleted.id, user.id)
    return deleted
