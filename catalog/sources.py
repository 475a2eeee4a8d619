"""
catalog.sources - Option sources for coded attributes.

An option source turns a stored option id into the display text a
shopper sees in a given store.  The source model id saved on the
attribute selects the implementation; attributes with no source model
but a select / multiselect input use the table source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from sqlalchemy.orm import Session

from db.models import EavAttributeOption, EavAttributeOptionValue

TABLE_SOURCE_MODEL   = "eav/entity_attribute_source_table"
BOOLEAN_SOURCE_MODEL = "eav/entity_attribute_source_boolean"

ADMIN_STORE_ID = 0


class OptionSource(ABC):
    """Resolves option ids of one attribute, localized for one store."""

    def __init__(self, session: Optional[Session], attribute_id: int, store_id: int = ADMIN_STORE_ID):
        self._session = session
        self.attribute_id = attribute_id
        self.store_id = store_id

    @abstractmethod
    def get_all_options(self) -> list[dict]:
        """Return [{"value": option_id, "label": text}, …] in display order."""

    @abstractmethod
    def get_index_option_text(self, option_id: Any) -> Optional[str]:
        """Return the display text of an option, or None when unknown."""


class TableOptionSource(OptionSource):
    """
    Options stored in eav_attribute_option / eav_attribute_option_value.

    All labels of the attribute are read in one query the first time
    they are needed; a store without its own label uses the admin one.
    """

    def __init__(self, session: Session, attribute_id: int, store_id: int = ADMIN_STORE_ID):
        super().__init__(session, attribute_id, store_id)
        self._labels: dict[int, str] | None = None

    def _load(self) -> dict[int, str]:
        if self._labels is None:
            rows = (
                self._session.query(
                    EavAttributeOptionValue.option_id,
                    EavAttributeOptionValue.store_id,
                    EavAttributeOptionValue.value,
                )
                .join(EavAttributeOption,
                      EavAttributeOption.option_id == EavAttributeOptionValue.option_id)
                .filter(
                    EavAttributeOption.attribute_id == self.attribute_id,
                    EavAttributeOptionValue.store_id.in_([ADMIN_STORE_ID, self.store_id]),
                )
                .order_by(EavAttributeOption.sort_order, EavAttributeOption.option_id)
                .all()
            )
            labels: dict[int, str] = {}
            for option_id, store_id, value in rows:
                # store label wins over the admin fallback
                if store_id == self.store_id or option_id not in labels:
                    labels[option_id] = value
            self._labels = labels
        return self._labels

    def get_all_options(self) -> list[dict]:
        return [{"value": k, "label": v} for k, v in self._load().items()]

    def get_index_option_text(self, option_id: Any) -> Optional[str]:
        try:
            key = int(option_id)
        except (TypeError, ValueError):
            return None
        return self._load().get(key)


class BooleanOptionSource(OptionSource):
    """Yes / No attributes stored as 1 / 0."""

    OPTIONS = {1: "Yes", 0: "No"}

    def get_all_options(self) -> list[dict]:
        return [{"value": k, "label": v} for k, v in self.OPTIONS.items()]

    def get_index_option_text(self, option_id: Any) -> Optional[str]:
        try:
            return self.OPTIONS.get(int(option_id))
        except (TypeError, ValueError):
            return None


# Registry of available source models
# Maps source_model id to OptionSource class
SOURCE_MODELS: dict[str, type[OptionSource]] = {
    TABLE_SOURCE_MODEL: TableOptionSource,
    BOOLEAN_SOURCE_MODEL: BooleanOptionSource,
}


def register_source_model(source_model: str, source_class: type) -> None:
    """
    Register an OptionSource implementation under a source model id.

    Raises TypeError if source_class is not an OptionSource subclass.
    """
    if not (isinstance(source_class, type) and issubclass(source_class, OptionSource)):
        raise TypeError(
            f"Source class must inherit from OptionSource, got {source_class!r}"
        )
    SOURCE_MODELS[source_model] = source_class


def create_source(
    source_model: Optional[str],
    session: Optional[Session],
    attribute_id: int,
    store_id: int = ADMIN_STORE_ID,
) -> OptionSource:
    """
    Build the option source for an attribute.

    A missing source model means generic table options.
    Raises ValueError for an unregistered source model id.
    """
    source_class = SOURCE_MODELS.get(source_model or TABLE_SOURCE_MODEL)
    if source_class is None:
        available = ", ".join(sorted(SOURCE_MODELS))
        raise ValueError(
            f"Unknown source model: '{source_model}'. "
            f"Available source models: {available}"
        )
    return source_class(session, attribute_id, store_id)
