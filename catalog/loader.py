"""
catalog.loader - Seed the attribute catalog from a JSON document.

Format
------
{
  "attributes": [
    {
      "code": "color", "backend_type": "int", "frontend_input": "select",
      "label": "Color", "labels": {"1": "Couleur"},
      "is_searchable": true, "is_filterable": true, "search_weight": 2,
      "options": [
        {"id": 3, "sort_order": 0, "values": {"0": "Red", "1": "Rouge"}}
      ]
    }
  ]
}

Store keys are strings in JSON; they are stored as integers.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sqlalchemy.orm import Session

from db.models import (
    EavAttribute,
    EavAttributeLabel,
    EavAttributeOption,
    EavAttributeOptionValue,
)

logger = logging.getLogger(__name__)


def read_seed(path: str | Path) -> dict:
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def seed_catalog(session: Session, data: dict) -> dict:
    """
    Add every attribute (with labels and options) from data to the session.
    The caller commits.  Returns a stats dict for logging.
    """
    n_attributes = n_options = 0

    for entry in data.get("attributes", []):
        attribute = EavAttribute(
            attribute_code=entry["code"],
            backend_type=entry.get("backend_type", "static"),
            frontend_input=entry.get("frontend_input", "text"),
            frontend_class=entry.get("frontend_class"),
            source_model=entry.get("source_model"),
            frontend_label=entry.get("label", ""),
            is_searchable=bool(entry.get("is_searchable", False)),
            is_filterable=bool(entry.get("is_filterable", False)),
            search_weight=float(entry.get("search_weight", 1)),
        )
        if "id" in entry:
            attribute.attribute_id = int(entry["id"])

        for store, text in entry.get("labels", {}).items():
            attribute.labels.append(EavAttributeLabel(store_id=int(store), value=text))

        for idx, opt in enumerate(entry.get("options", [])):
            option = EavAttributeOption(sort_order=int(opt.get("sort_order", idx)))
            if "id" in opt:
                option.option_id = int(opt["id"])
            for store, text in opt.get("values", {}).items():
                option.values.append(EavAttributeOptionValue(store_id=int(store), value=text))
            attribute.options.append(option)
            n_options += 1

        session.add(attribute)
        n_attributes += 1

    session.flush()
    logger.info(f"Seeded {n_attributes} attributes, {n_options} options")
    return {"attributes": n_attributes, "options": n_options}
