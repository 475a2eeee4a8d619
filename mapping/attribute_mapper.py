"""
mapping.attribute_mapper - Product attribute → search index field mapping.

Given an attribute definition the mapper infers the index field type,
builds the mapping field options, and turns raw stored values into the
field → values bundle merged into an index document.  Coded-option
values are resolved to their store-localized labels.

Two caches live on the instance for its whole life (one indexing job):
  store id → attribute id → store-scoped AttributeDefinition
  store id → attribute id → option id → label
Nothing is evicted; call reset() to start over.  The caches are not
locked, so concurrent workers each need their own mapper.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from catalog.definition import AttributeDefinition
from catalog.sources import BOOLEAN_SOURCE_MODEL
from mapping.coercion import is_empty, to_float, to_int
from mapping.field_map import (
    DATETIME_BACKEND,
    DECIMAL_BACKEND,
    DIGITS_CLASS,
    INT_BACKEND,
    NUMBER_CLASS,
    FieldType,
    get_option_text_field_name,
)

logger = logging.getLogger(__name__)

AttributeOrId = Union[AttributeDefinition, int]


class AttributeMapper:
    """
    Stateful helper used while indexing products.

    attribute_store    - anything with load(attribute_id, store_id) →
                         AttributeDefinition (see catalog.SqlAttributeStore)
    collection_factory - anything with create() → attribute collection
    index_zero_values  - keep numeric 0 / "0" instead of dropping them
    """

    def __init__(self, attribute_store, collection_factory=None, *, index_zero_values: bool = False):
        self._attribute_store = attribute_store
        self._collection_factory = collection_factory
        self.index_zero_values = index_zero_values

        self._store_attributes: dict[int, dict[int, AttributeDefinition]] = {}
        self._option_text_cache: dict[int, dict[int, dict[Any, Optional[str]]]] = {}

    # ── Mapping definition ─────────────────────────────────────────────

    def get_attribute_collection(self, **kwargs):
        """Return a new attribute collection from the configured factory."""
        if self._collection_factory is None:
            raise RuntimeError("No attribute collection factory configured")
        return self._collection_factory.create(**kwargs)

    @staticmethod
    def get_mapping_field_options(attribute: AttributeDefinition) -> dict:
        """Parse attribute to get mapping field creation parameters."""
        return {
            "isSearchable": attribute.is_searchable,
            "isFilterable": attribute.is_filterable,
            # no separate "filterable in search" flag upstream
            "isFilterableInSearch": attribute.is_filterable,
            "searchWeight": attribute.search_weight,
        }

    @staticmethod
    def get_field_type(attribute: AttributeDefinition) -> FieldType:
        """
        Mapping field type of an attribute.  First matching rule wins:

        1. int backend or validate-digits       → INTEGER
        2. decimal backend or validate-number   → DOUBLE
        3. boolean source model                 → BOOLEAN
        4. datetime backend                     → DATE
        5. coded options without source model   → INTEGER (option ids)
        6. anything else                        → STRING
        """
        if attribute.backend_type == INT_BACKEND or attribute.frontend_class == DIGITS_CLASS:
            return FieldType.INTEGER
        if attribute.backend_type == DECIMAL_BACKEND or attribute.frontend_class == NUMBER_CLASS:
            return FieldType.DOUBLE
        if attribute.source_model == BOOLEAN_SOURCE_MODEL:
            return FieldType.BOOLEAN
        if attribute.backend_type == DATETIME_BACKEND:
            return FieldType.DATE
        if attribute.uses_source and attribute.source_model is None:
            return FieldType.INTEGER
        return FieldType.STRING

    @staticmethod
    def get_option_text_field_name(field_name: str) -> str:
        return get_option_text_field_name(field_name)

    # ── Values ─────────────────────────────────────────────────────────

    def prepare_index_value(self, attribute: AttributeDefinition, store_id: int, value: Any) -> dict:
        """
        Parse attribute raw value (as saved in the database) to prepare the indexed value.

        Every value becomes a list, so multivalued attributes merge easily
        on composite products.  For coded-option attributes the result has
        two keys: "<code>" with the option id(s) and "option_text_<code>"
        with the store label(s).  Empty fields are left out, so a value that
        normalizes to nothing yields {}.
        """
        attribute_code = attribute.attribute_code
        values: dict[str, list] = {}

        if attribute.uses_source and not isinstance(value, (list, tuple)):
            # multiselect values are stored comma separated
            value = ("" if value is None else str(value)).split(",")

        if not isinstance(value, (list, tuple)):
            value = [value]

        value = self._drop_empty(
            [self._prepare_simple_index_attribute_value(attribute, v) for v in value]
        )
        values[attribute_code] = value

        if attribute.uses_source:
            option_text_field = self.get_option_text_field_name(attribute_code)
            values[option_text_field] = self._drop_empty(
                self.get_index_options_text(attribute, store_id, value)
            )

        return {field: field_values for field, field_values in values.items() if field_values}

    def get_index_options_text(
        self, attribute: AttributeOrId, store_id: int, option_ids: list,
    ) -> list[Optional[str]]:
        """Option ids → store labels, same order, duplicates kept."""
        return [self.get_index_option_text(attribute, store_id, option_id) for option_id in option_ids]

    def get_index_option_text(self, attribute: AttributeOrId, store_id: int, option_id: Any) -> Optional[str]:
        """Store label of one option, or None when the source has none."""
        attribute = self.get_attribute_by_store(attribute, store_id)
        attribute_id = attribute.attribute_id

        texts = self._option_text_cache.setdefault(store_id, {}).setdefault(attribute_id, {})
        key = self._option_key(option_id)

        if key not in texts:
            texts[key] = attribute.get_source().get_index_option_text(option_id)

        return texts[key]

    def _prepare_simple_index_attribute_value(self, attribute: AttributeDefinition, value: Any) -> Any:
        """Ensure types of numerical values are correct before indexing."""
        if attribute.backend_type == DECIMAL_BACKEND:
            return to_float(value)
        if attribute.backend_type == INT_BACKEND:
            return to_int(value)
        return value

    def _drop_empty(self, values: list) -> list:
        return [v for v in values if not is_empty(v, keep_zero=self.index_zero_values)]

    @staticmethod
    def _option_key(option_id: Any) -> Any:
        # "3" and 3 are the same option
        if isinstance(option_id, str) and option_id.isdecimal():
            return int(option_id)
        return option_id

    # ── Store-scoped attributes ────────────────────────────────────────

    def get_attribute_by_store(self, attribute: AttributeOrId, store_id: int) -> AttributeDefinition:
        """
        Load the localized version of an attribute.
        Loaded once per (store, attribute) for the life of the mapper.
        """
        attribute_id = self.get_attribute_id(attribute)
        store_attributes = self._store_attributes.setdefault(store_id, {})

        if attribute_id not in store_attributes:
            logger.debug(f"Loading attribute {attribute_id} for store {store_id}")
            store_attributes[attribute_id] = self._attribute_store.load(attribute_id, store_id)

        return store_attributes[attribute_id]

    @staticmethod
    def get_attribute_id(attribute: AttributeOrId) -> int:
        """Return attribute if it is an id, else its attribute_id."""
        if isinstance(attribute, int) and not isinstance(attribute, bool):
            return attribute
        attribute_id = getattr(attribute, "attribute_id", None)
        if attribute_id is None:
            raise TypeError(f"Cannot resolve an attribute id from {attribute!r}")
        return attribute_id

    # ── Cache control ──────────────────────────────────────────────────

    def reset(self) -> None:
        """Drop every cached attribute and option label."""
        self._store_attributes.clear()
        self._option_text_cache.clear()

    def cache_stats(self) -> dict:
        return {
            "store_attributes": sum(len(a) for a in self._store_attributes.values()),
            "option_texts": sum(
                len(options)
                for attributes in self._option_text_cache.values()
                for options in attributes.values()
            ),
        }
