from __future__ import annotations

from ..extensions import db
from orderdesk.time_utils import to_iso_date, to_utc_z


PAYMENT_STATUS_NOT_PAID = "Not Paid"
PAYMENT_STATUS_PAID = "Paid"
PAYMENT_STATUSES = (PAYMENT_STATUS_NOT_PAID, PAYMENT_STATUS_PAID)

INVOICE_STATUS_PENDING = "pending"
INVOICE_STATUS_PAID = "paid"


def _money(value):
    return float(value) if value is not None else None


class OrderType(db.Model):
    """
    Named category tag attachable to an order.

    Orders store the name as plain text; there is no foreign key, so deleting
    a type leaves existing orders untouched.
    """
    __tablename__ = "order_types"
    __table_args__ = (
        db.UniqueConstraint("name", name="uq_order_types_name"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "created_at": to_utc_z(self.created_at),
        }


class Order(db.Model):
    """
    Customer order with a payment snapshot.

    remaining_balance is computed once at creation and only recomputed when
    the payment status is set to Paid.
    """
    __tablename__ = "orders"
    __table_args__ = (
        db.Index("ix_orders_payment_status", "payment_status"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    order_type = db.Column(db.String(128), nullable=False)
    deadline = db.Column(db.Date, nullable=False)

    total_amount = db.Column(db.Numeric(12, 2), nullable=False)
    payment_status = db.Column(db.String(16), nullable=False, default=PAYMENT_STATUS_NOT_PAID)
    amount_paid = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    remaining_balance = db.Column(db.Numeric(12, 2), nullable=False)

    client_name = db.Column(db.String(255), nullable=False)
    client_phone = db.Column(db.String(32), nullable=True)
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "order_type": self.order_type,
            "deadline": to_iso_date(self.deadline),
            "total_amount": _money(self.total_amount),
            "payment_status": self.payment_status,
            "amount_paid": _money(self.amount_paid),
            "remaining_balance": _money(self.remaining_balance),
            "client_name": self.client_name,
            "client_phone": self.client_phone,
            "notes": self.notes,
            "created_at": to_utc_z(self.created_at),
        }


class Invoice(db.Model):
    """
    Billing record generated alongside its order.

    Carries its own copy of the amounts and a lowercase status mirror
    (pending/paid) of the order's payment status.
    """
    __tablename__ = "invoices"
    __table_args__ = (
        db.Index("ix_invoices_invoice_number", "invoice_number"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    invoice_number = db.Column(db.String(64), nullable=False)

    total_amount = db.Column(db.Numeric(12, 2), nullable=False)
    # Cleared to NULL when an order is marked back to Not Paid
    amount_paid = db.Column(db.Numeric(12, 2), nullable=True)
    remaining_balance = db.Column(db.Numeric(12, 2), nullable=False)
    subtotal = db.Column(db.Numeric(12, 2), nullable=False)
    tax = db.Column(db.Numeric(12, 2), nullable=False)

    issue_date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(16), nullable=False, default=INVOICE_STATUS_PENDING)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())

    order = db.relationship("Order", backref=db.backref("invoices", lazy=True))

    def to_dict(self, include_order: bool = False) -> dict:
        data = {
            "id": self.id,
            "order_id": self.order_id,
            "invoice_number": self.invoice_number,
            "total_amount": _money(self.total_amount),
            "amount_paid": _money(self.amount_paid),
            "remaining_balance": _money(self.remaining_balance),
            "subtotal": _money(self.subtotal),
            "tax": _money(self.tax),
            "issue_date": to_iso_date(self.issue_date),
            "status": self.status,
            "created_at": to_utc_z(self.created_at),
        }
        if include_order:
            # Key matches the embedded-relation shape the frontend reads
            data["orders"] = self.order.to_dict() if self.order else None
        return data
