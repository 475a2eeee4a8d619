"""
catalog.definition - Attribute definition as seen by the mapper.

A definition is a plain snapshot of one eav_attribute row, scoped to a
store (label + option source are localized).  It carries no session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from catalog.sources import OptionSource

SOURCE_INPUTS = frozenset({"select", "multiselect"})


@dataclass
class AttributeDefinition:
    attribute_id: Optional[int] = None
    attribute_code: str = ""
    backend_type: str = "static"           # int, decimal, datetime, varchar, text, static
    frontend_input: str = "text"
    frontend_class: Optional[str] = None   # UI validation hint, e.g. validate-digits
    source_model: Optional[str] = None
    frontend_label: str = ""
    is_searchable: bool = False
    is_filterable: bool = False
    search_weight: float = 1.0
    store_id: int = 0
    source: Optional[OptionSource] = field(default=None, repr=False, compare=False)

    @property
    def uses_source(self) -> bool:
        """True for coded-option attributes (select inputs or an explicit source model)."""
        return self.frontend_input in SOURCE_INPUTS or bool(self.source_model)

    def get_source(self) -> OptionSource:
        if not self.uses_source:
            raise ValueError(f"Attribute '{self.attribute_code}' does not use an option source")
        if self.source is None:
            raise ValueError(f"No option source bound to attribute '{self.attribute_code}'")
        return self.source

    def to_dict(self) -> dict:
        return {
            "attribute_id": self.attribute_id,
            "attribute_code": self.attribute_code,
            "backend_type": self.backend_type,
            "frontend_input": self.frontend_input,
            "frontend_class": self.frontend_class,
            "source_model": self.source_model,
            "frontend_label": self.frontend_label,
            "uses_source": self.uses_source,
            "store_id": self.store_id,
        }
