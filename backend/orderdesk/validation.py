from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable

from sqlalchemy.exc import SQLAlchemyError

from orderdesk.time_utils import parse_iso_date


# Numeric(12, 2) upper bound
MAX_AMOUNT = Decimal("9999999999.99")
CENTS = Decimal("0.01")


class ValidationError(ValueError):
    """400-level input problem."""


# Anything raised by the database layer, including single-row fetch
# violations (NoResultFound / MultipleResultsFound). Surfaced as a 500.
StoreError = SQLAlchemyError


def coerce_json_object(payload: Any) -> dict:
    """Request body as a dict; an absent or unparseable body counts as empty."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def require_text(key: str, value: Any) -> str:
    """Non-blank string, stripped."""
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    text = value.strip()
    if not text:
        raise ValidationError(f"{key} cannot be blank")
    return text


def quantize_money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def coerce_amount(key: str, value: Any) -> Decimal:
    """
    Coerce a JSON money value to a 2-place Decimal.

    Accepts ints, floats and numeric strings. Rejects booleans, NaN/Infinity,
    negatives and values beyond the column precision.
    """
    if value is None:
        raise ValidationError(f"{key} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{key} must be a number")

    if isinstance(value, (int, float)):
        # str() first so 0.1 stays 0.1 rather than its binary expansion
        raw = str(value)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            raise ValidationError(f"{key} must be a number")
    else:
        raise ValidationError(f"{key} must be a number")

    try:
        amount = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"{key} must be a number")

    if not amount.is_finite():
        raise ValidationError(f"{key} must be a finite number")
    if amount < 0:
        raise ValidationError(f"{key} must be >= 0")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"{key} cannot exceed {MAX_AMOUNT:,}")

    return quantize_money(amount)


def coerce_date(key: str, value: Any) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{key} must be an ISO-8601 date (YYYY-MM-DD)")
    try:
        parsed = parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{key} must be an ISO-8601 date (YYYY-MM-DD)")
    if parsed is None:
        raise ValidationError(f"{key} is required")
    return parsed


def coerce_choice(key: str, value: Any, choices: Iterable[str]) -> str:
    choices = list(choices)
    if value not in choices:
        allowed = ", ".join(f"'{c}'" for c in choices)
        raise ValidationError(f"{key} must be one of {allowed}")
    return value
