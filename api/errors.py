"""
api.errors - JSON error handlers for the API blueprint.
"""

from flask import jsonify
from api import api_bp
from catalog.store import AttributeNotFoundError


@api_bp.errorhandler(AttributeNotFoundError)
def api_attribute_not_found(e):
    return jsonify({"error": str(e)}), 404


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
