"""
api.routes_attributes - /api/v1/attributes/* endpoints.

Read-only view of how catalog attributes map to search index fields,
so indexer developers can check a field type or preview an indexed
value without running a full reindex.  Every request gets its own
session and mapper.
"""

from flask import request, jsonify

from api import api_bp
from db import get_session
from catalog.definition import AttributeDefinition
from catalog.store import SqlAttributeStore, AttributeCollectionFactory
from mapping import AttributeMapper
import config


def _build_mapper(session) -> AttributeMapper:
    return AttributeMapper(
        SqlAttributeStore(session),
        AttributeCollectionFactory(session),
        index_zero_values=config.INDEX_ZERO_VALUES,
    )


def _describe(mapper: AttributeMapper, attribute: AttributeDefinition) -> dict:
    d = attribute.to_dict()
    d["field_type"] = mapper.get_field_type(attribute).value
    d["field_options"] = mapper.get_mapping_field_options(attribute)
    if attribute.uses_source:
        d["option_text_field"] = mapper.get_option_text_field_name(attribute.attribute_code)
        d["options"] = attribute.get_source().get_all_options()
    return d


@api_bp.route("/attributes")
def list_attributes():
    """
    GET /api/v1/attributes?store_id=0

    Every catalog attribute with its index field type and field options.
    """
    store_id = request.args.get("store_id", config.DEFAULT_STORE_ID, type=int)
    session = get_session()
    try:
        mapper = _build_mapper(session)
        attributes = mapper.get_attribute_collection(store_id=store_id)
        return jsonify({
            "store_id": store_id,
            "total": len(attributes),
            "attributes": [_describe(mapper, a) for a in attributes],
        })
    finally:
        session.close()


@api_bp.route("/attributes/<int:attribute_id>")
def get_attribute(attribute_id: int):
    """GET /api/v1/attributes/{id}?store_id=0"""
    store_id = request.args.get("store_id", config.DEFAULT_STORE_ID, type=int)
    session = get_session()
    try:
        mapper = _build_mapper(session)
        attribute = mapper.get_attribute_by_store(attribute_id, store_id)
        return jsonify(_describe(mapper, attribute))
    finally:
        session.close()


@api_bp.route("/attributes/<int:attribute_id>/index-value", methods=["POST"])
def preview_index_value(attribute_id: int):
    """
    POST /api/v1/attributes/{id}/index-value

    JSON body: {"store_id": 1, "value": "3,7"}.  Returns the fields the
    raw value contributes to an index document.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "value" not in data:
        return jsonify({"error": "missing 'value'"}), 400
    try:
        store_id = int(data.get("store_id", config.DEFAULT_STORE_ID))
    except (TypeError, ValueError):
        return jsonify({"error": "store_id must be an integer"}), 400

    session = get_session()
    try:
        mapper = _build_mapper(session)
        attribute = mapper.get_attribute_by_store(attribute_id, store_id)
        fields = mapper.prepare_index_value(attribute, store_id, data["value"])
        return jsonify({
            "attribute_code": attribute.attribute_code,
            "store_id": store_id,
            "fields": fields,
        })
    finally:
        session.close()
