# Overview: Flask API routes for invoice lookup.

from flask import Blueprint, jsonify, current_app

from ..services import invoice_service
from ..validation import StoreError


invoices_bp = Blueprint("invoices", __name__, url_prefix="/invoices")


@invoices_bp.get("/<int:order_id>")
def get_invoice_route(order_id: int):
    """
    Get the invoice for an order, with the order embedded under "orders".

    An order with no invoice (or more than one) is a store error (500).
    """
    try:
        invoice = invoice_service.get_invoice_by_order_id(order_id)
        return jsonify(invoice.to_dict(include_order=True)), 200
    except StoreError as e:
        current_app.logger.exception("Error fetching invoice for order %s", order_id)
        return jsonify({"error": str(e)}), 500
