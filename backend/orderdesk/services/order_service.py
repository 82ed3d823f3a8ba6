# Overview: Service-layer operations for orders; encapsulates business logic and database work.

"""
Order Service

WHY: Orders are the unit the frontend works with. Each order gets exactly
one invoice at creation time, carrying a tax breakdown and a copy of the
payment snapshot.

DESIGN:
- Order and invoice are written in ONE transaction (flush for the order id,
  single commit). A failure on either insert leaves neither row behind.
- remaining_balance is a snapshot: total_amount - amount_paid at creation,
  recomputed only when the order is marked Paid.
- Marking an order Paid also updates its invoice(s) in the same commit.
"""

from decimal import Decimal

from flask import current_app

from ..extensions import db
from ..models import (
    Order,
    Invoice,
    PAYMENT_STATUS_NOT_PAID,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUSES,
    INVOICE_STATUS_PAID,
    INVOICE_STATUS_PENDING,
)
from ..validation import (
    ValidationError,
    StoreError,
    coerce_amount,
    coerce_choice,
    coerce_date,
    quantize_money,
    require_text,
)
from orderdesk.time_utils import epoch_millis, utctoday


TAX_RATE = Decimal("0.05")
INVOICE_NUMBER_PREFIX = "INV-"


def compute_tax(total_amount: Decimal) -> Decimal:
    return quantize_money(total_amount * TAX_RATE)


def invoice_status_for(payment_status: str) -> str:
    return INVOICE_STATUS_PAID if payment_status == PAYMENT_STATUS_PAID else INVOICE_STATUS_PENDING


def generate_invoice_number() -> str:
    return f"{INVOICE_NUMBER_PREFIX}{epoch_millis()}"


def create_order(
    *,
    order_type: str | None,
    deadline,
    total_amount,
    client_name: str | None,
    payment_status: str | None = None,
    amount_paid=None,
    client_phone: str | None = None,
    notes: str | None = None,
) -> tuple[Order, Invoice]:
    """
    Create an order and its invoice.

    Args:
        order_type: Order type name (required, not checked against the registry)
        deadline: ISO date string (required)
        total_amount: Order total (required, >= 0)
        client_name: Customer name (required)
        payment_status: "Not Paid" (default) or "Paid"
        amount_paid: Amount already paid (default 0)
        client_phone: Optional phone
        notes: Optional free text

    Returns:
        (order, invoice)

    Raises:
        ValidationError: Missing or invalid field; nothing is written
        StoreError: Insert failed; the transaction is rolled back
    """
    if not order_type or not deadline or not client_name or total_amount is None:
        raise ValidationError("Order type, deadline, client name, and total amount are required.")
    order_type = require_text("order_type", order_type)
    client_name = require_text("client_name", client_name)
    if client_phone is not None and not isinstance(client_phone, str):
        raise ValidationError("client_phone must be a string")
    if notes is not None and not isinstance(notes, str):
        raise ValidationError("notes must be a string")

    total = coerce_amount("total_amount", total_amount)
    paid = coerce_amount("amount_paid", 0 if amount_paid is None else amount_paid)
    due = coerce_date("deadline", deadline)
    status = coerce_choice(
        "payment_status",
        PAYMENT_STATUS_NOT_PAID if payment_status is None else payment_status,
        PAYMENT_STATUSES,
    )

    # amount_paid is taken as given, even when status is Paid
    remaining_balance = total - paid
    tax = compute_tax(total)
    subtotal = total - tax

    order = Order(
        order_type=order_type,
        deadline=due,
        total_amount=total,
        payment_status=status,
        amount_paid=paid,
        remaining_balance=remaining_balance,
        client_name=client_name,
        client_phone=client_phone,
        notes=notes,
    )

    try:
        db.session.add(order)
        db.session.flush()

        invoice = Invoice(
            order_id=order.id,
            invoice_number=generate_invoice_number(),
            total_amount=total,
            amount_paid=paid,
            remaining_balance=remaining_balance,
            subtotal=subtotal,
            tax=tax,
            issue_date=utctoday(),
            status=invoice_status_for(status),
        )
        db.session.add(invoice)
        db.session.commit()
    except StoreError:
        db.session.rollback()
        raise

    current_app.logger.info(
        "Created order %s with invoice %s (total=%s, status=%s)",
        order.id, invoice.invoice_number, total, status,
    )
    return order, invoice


def list_orders() -> list[Order]:
    """Return all orders, unfiltered and in store order."""
    return db.session.query(Order).all()


def update_payment_status(order_id: int, payment_status: str | None) -> Order:
    """
    Set an order's payment status and mirror it onto its invoice.

    Paid: amount_paid becomes total_amount and remaining_balance 0 on the
    order; the invoice is marked paid with amount_paid = total_amount.
    Not Paid: order balances are left as they are; the invoice goes back to
    pending and its amount_paid is cleared.

    Raises:
        ValidationError: payment_status missing or not a known value
        StoreError: order not found (single-row fetch) or write failed
    """
    if not payment_status:
        raise ValidationError("Payment status is required")
    coerce_choice("payment_status", payment_status, PAYMENT_STATUSES)

    is_paid = payment_status == PAYMENT_STATUS_PAID

    try:
        order = db.session.query(Order).filter(Order.id == order_id).one()

        order.payment_status = payment_status
        if is_paid:
            order.amount_paid = order.total_amount
            order.remaining_balance = Decimal("0")

        invoices = db.session.query(Invoice).filter(Invoice.order_id == order_id).all()
        for invoice in invoices:
            invoice.status = invoice_status_for(payment_status)
            invoice.amount_paid = order.total_amount if is_paid else None

        db.session.commit()
    except StoreError:
        db.session.rollback()
        raise

    current_app.logger.info(
        "Order %s payment status set to %r (%d invoice(s) updated)",
        order_id, payment_status, len(invoices),
    )
    return order
