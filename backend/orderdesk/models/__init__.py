from .orders import (
    OrderType,
    Order,
    Invoice,
    PAYMENT_STATUS_NOT_PAID,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUSES,
    INVOICE_STATUS_PENDING,
    INVOICE_STATUS_PAID,
)

__all__ = [
    'OrderType', 'Order', 'Invoice',
    'PAYMENT_STATUS_NOT_PAID', 'PAYMENT_STATUS_PAID', 'PAYMENT_STATUSES',
    'INVOICE_STATUS_PENDING', 'INVOICE_STATUS_PAID',
]
