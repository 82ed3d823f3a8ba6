# Overview: Flask API routes for the order-type registry; parses input and returns JSON responses.

from flask import Blueprint, request, jsonify, current_app

from ..services import order_type_service
from ..validation import ValidationError, StoreError, coerce_json_object


order_types_bp = Blueprint("order_types", __name__, url_prefix="/order-types")


@order_types_bp.get("")
def list_order_types_route():
    """
    List order-type names.

    Returns:
        200: ["Alteration", "Wedding", ...] (empty list when none exist)
        500: {error}
    """
    try:
        return jsonify(order_type_service.list_order_types()), 200
    except StoreError as e:
        current_app.logger.exception("Error fetching order types")
        return jsonify({"error": str(e)}), 500


@order_types_bp.post("")
def create_order_type_route():
    """
    Add an order type.

    Request body:
    {
        "name": "Wedding"  // required
    }

    Returns:
        201: Created OrderType row
        400: name missing, or body is not a JSON object
        500: {error}
    """
    try:
        data = coerce_json_object(request.get_json(silent=True))
        order_type = order_type_service.create_order_type(data.get("name"))
        return jsonify(order_type.to_dict()), 201
    except ValidationError as e:
        current_app.logger.warning("Rejected order type: %s", e)
        return jsonify({"error": str(e)}), 400
    except StoreError as e:
        current_app.logger.exception("Error adding order type")
        return jsonify({"error": str(e)}), 500


@order_types_bp.delete("/<path:name>")
def delete_order_type_route(name: str):
    """
    Delete an order type by name.

    Succeeds even when no order type has that name.
    """
    try:
        order_type_service.delete_order_type(name)
        return jsonify({"message": "Order type deleted successfully"}), 200
    except StoreError as e:
        current_app.logger.exception("Error deleting order type")
        return jsonify({"error": str(e)}), 500
