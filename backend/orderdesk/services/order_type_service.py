# Overview: Service-layer operations for order types; encapsulates business logic and database work.

"""
Order Type Service

Order types are free-form category tags ("Wedding cake", "Alteration", ...)
that the frontend offers when creating an order. Orders copy the name, so
the registry is only a pick-list.

DESIGN:
- No application-level duplicate check; the unique constraint on
  order_types.name rejects duplicates at the store.
- Delete is by name and succeeds whether or not anything matched.
"""

from flask import current_app

from ..extensions import db
from ..models import OrderType
from ..validation import ValidationError, StoreError


def list_order_types() -> list[str]:
    """Return every order-type name in store order."""
    rows = db.session.query(OrderType.name).all()
    return [row.name for row in rows]


def create_order_type(name: str | None) -> OrderType:
    """
    Add a new order type.

    Raises:
        ValidationError: name missing or blank
        StoreError: insert rejected (e.g. duplicate name)
    """
    if not name or not isinstance(name, str) or not name.strip():
        raise ValidationError("Order type name is required")

    order_type = OrderType(name=name.strip())
    db.session.add(order_type)
    try:
        db.session.commit()
    except StoreError:
        db.session.rollback()
        raise

    current_app.logger.info("Added order type %r", order_type.name)
    return order_type


def delete_order_type(name: str) -> int:
    """
    Delete all order types with the given name.

    Returns the number of rows removed, which may be zero.
    """
    try:
        deleted = db.session.query(OrderType).filter(OrderType.name == name).delete(
            synchronize_session=False
        )
        db.session.commit()
    except StoreError:
        db.session.rollback()
        raise

    current_app.logger.info("Deleted order type %r (%d row(s))", name, deleted)
    return deleted
