# Overview: Service-layer lookup of invoices.

from sqlalchemy.orm import joinedload

from ..extensions import db
from ..models import Invoice


def get_invoice_by_order_id(order_id: int) -> Invoice:
    """
    Fetch the single invoice for an order, with the order loaded.

    Raises:
        StoreError: NoResultFound when the order has no invoice,
            MultipleResultsFound when it has more than one
    """
    return (
        db.session.query(Invoice)
        .options(joinedload(Invoice.order))
        .filter(Invoice.order_id == order_id)
        .one()
    )
