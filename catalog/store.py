"""
catalog.store - SQL-backed attribute storage.

All session management is the caller's responsibility (open before,
close after).  Loading is the expensive step the mapper caches.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from db.models import EavAttribute
from catalog.definition import AttributeDefinition
from catalog.sources import create_source

logger = logging.getLogger(__name__)


class AttributeNotFoundError(LookupError):
    """Raised when an attribute id is not in the catalog."""
    pass


class SqlAttributeStore:

    def __init__(self, session: Session):
        self._session = session

    def create_blank_definition(self) -> AttributeDefinition:
        """Fresh, unloaded definition (store 0, no source)."""
        return AttributeDefinition()

    def load(self, attribute_id: int, store_id: int = 0) -> AttributeDefinition:
        """
        Load one attribute localized for store_id.
        Raises AttributeNotFoundError for unknown ids.
        """
        row = self._session.get(EavAttribute, attribute_id)
        if row is None:
            raise AttributeNotFoundError(f"Attribute {attribute_id} not found")
        logger.debug(f"Loaded attribute {row.attribute_code} ({attribute_id}) for store {store_id}")
        return self.hydrate(row, store_id)

    def hydrate(self, row: EavAttribute, store_id: int = 0) -> AttributeDefinition:
        """Fill a blank definition from an ORM row, scoped to store_id."""
        definition = self.create_blank_definition()
        definition.store_id = store_id

        definition.attribute_id   = row.attribute_id
        definition.attribute_code = row.attribute_code
        definition.backend_type   = row.backend_type
        definition.frontend_input = row.frontend_input or "text"
        definition.frontend_class = row.frontend_class or None
        definition.source_model   = row.source_model or None
        definition.is_searchable  = bool(row.is_searchable)
        definition.is_filterable  = bool(row.is_filterable)
        definition.search_weight  = row.search_weight

        # Store label, falling back to the default one
        definition.frontend_label = next(
            (lbl.value for lbl in row.labels if lbl.store_id == store_id and lbl.value),
            row.frontend_label or "",
        )

        if definition.uses_source:
            definition.source = create_source(
                definition.source_model, self._session, row.attribute_id, store_id,
            )
        return definition


class AttributeCollectionFactory:

    def __init__(self, session: Session):
        self._session = session

    def create(self, store_id: int = 0) -> list[AttributeDefinition]:
        """All catalog attributes ordered by code, localized for store_id."""
        store = SqlAttributeStore(self._session)
        rows = (
            self._session.query(EavAttribute)
            .order_by(EavAttribute.attribute_code)
            .all()
        )
        return [store.hydrate(row, store_id) for row in rows]
