# Overview: Flask API routes for orders; parses input and returns JSON responses.

"""
Order API Routes

DESIGN:
- POST creates the order and its invoice together and returns both
- PATCH only changes payment status; the invoice follows in the same commit
- List returns every order with no paging
"""

from flask import Blueprint, request, jsonify, current_app

from ..services import order_service
from ..validation import ValidationError, StoreError, coerce_json_object


orders_bp = Blueprint("orders", __name__, url_prefix="/orders")


@orders_bp.post("")
def create_order_route():
    """
    Create an order and its invoice.

    Request body:
    {
        "order_type": "Wedding",        // required
        "deadline": "2026-11-02",       // required, ISO date
        "total_amount": 100,            // required, >= 0
        "payment_status": "Not Paid",   // optional, "Not Paid" | "Paid"
        "amount_paid": 0,               // optional, default 0
        "client_name": "Jane Doe",      // required
        "client_phone": "...",          // optional
        "notes": "..."                  // optional
    }

    Returns:
        201: {order, invoice}
        400: Missing or invalid field, or body is not a JSON object
        500: {error}
    """
    try:
        data = coerce_json_object(request.get_json(silent=True))
        order, invoice = order_service.create_order(
            order_type=data.get("order_type"),
            deadline=data.get("deadline"),
            total_amount=data.get("total_amount"),
            payment_status=data.get("payment_status"),
            amount_paid=data.get("amount_paid"),
            client_name=data.get("client_name"),
            client_phone=data.get("client_phone"),
            notes=data.get("notes"),
        )
        return jsonify({
            "order": order.to_dict(),
            "invoice": invoice.to_dict(),
        }), 201
    except ValidationError as e:
        current_app.logger.warning("Rejected order: %s", e)
        return jsonify({"error": str(e)}), 400
    except StoreError as e:
        current_app.logger.exception("Error creating order")
        return jsonify({"error": str(e)}), 500


@orders_bp.get("")
def list_orders_route():
    """List all orders."""
    try:
        orders = order_service.list_orders()
        return jsonify([o.to_dict() for o in orders]), 200
    except StoreError as e:
        current_app.logger.exception("Error fetching orders")
        return jsonify({"error": "Failed to retrieve orders", "details": str(e)}), 500


@orders_bp.patch("/<int:order_id>")
def update_payment_status_route(order_id: int):
    """
    Update an order's payment status.

    Request body:
    {
        "payment_status": "Paid"  // required, "Not Paid" | "Paid"
    }

    Returns:
        200: Updated order
        400: payment_status missing or invalid, or body is not a JSON object
        404: order id is not an integer
        500: {error} (including unknown order id)
    """
    try:
        data = coerce_json_object(request.get_json(silent=True))
        order =order_service.update_payment_status(order_id, data.get("payment_status"))
        return jsonify(order.to_dict()), 200
    except ValidationError as e:
        current_app.logger.warning("Rejected payment status update for order %s: %s", order_id, e)
        return jsonify({"error": str(e)}), 400
    except StoreError as e:
        current_app.logger.exception("Error updating payment status")
        return jsonify({"error": str(e)}), 500
