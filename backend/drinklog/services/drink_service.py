"""Drink resolver: map (type, name, percentage) onto a Drink id."""
import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from drinklog.errors import InvalidIncomeData
from drinklog.models.drink import Drink, DrinkType

logger = logging.getLogger(__name__)


def parse_drink_type(value: Any) -> DrinkType:
    try:
        return DrinkType(str(value).strip().lower())
    except ValueError:
        raise InvalidIncomeData(f"unknown drink type {value!r}")


def parse_percentage(value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidIncomeData("percentage must be a number")
    try:
        percentage = float(str(value).strip())
    except ValueError:
        raise InvalidIncomeData(f"percentage {value!r} is not a number")
    if not 0 <= percentage <= 100:
        raise InvalidIncomeData(f"percentage {percentage} out of range")
    return percentage


def _find(db: Session, drink_type: DrinkType, name: str, percentage: float) -> Drink | None:
    return (
        db.query(Drink)
        .filter(Drink.type == drink_type, Drink.name == name, Drink.percentage == percentage)
        .first()
    )


def resolve_drink(db: Session, drink_type: Any, drink_name: Any, percentage: Any) -> str:
    """Return the id of the matching drink, creating it if needed.

    The new drink is committed on its own. Callers that go on to reject the
    request leave the drink behind; events never point at a missing drink,
    and an unused drink is harmless.
    """
    dtype = parse_drink_type(drink_type)
    name = str(drink_name).strip()
    if not name:
        raise InvalidIncomeData("drink name is blank")
    pct = parse_percentage(percentage)

    drink = _find(db, dtype, name, pct)
    if drink:
        return drink.drink_id

    drink = Drink(type=dtype, name=name, percentage=pct)
    db.add(drink)
    try:
        db.commit()
    except IntegrityError:
        # Another request inserted the same drink first.
        db.rollback()
        drink = _find(db, dtype, name, pct)
        if drink is None:
            raise
        return drink.drink_id

    logger.info("Created drink %s (%s '%s' %.1f%%)", drink.drink_id, dtype.value, name, pct)
    return drink.drink_id
