"""
mapping.field_map - Search index field types and field naming.

Attribute values are indexed under the attribute code.  Coded-option
attributes get a second field holding the localized option labels.
"""

from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    STRING  = "string"
    INTEGER = "integer"
    DOUBLE  = "double"
    BOOLEAN = "boolean"
    DATE    = "date"


# Backend types with a numeric index representation
INT_BACKEND      = "int"
DECIMAL_BACKEND  = "decimal"
DATETIME_BACKEND = "datetime"

# Frontend validation hints that imply a numeric field
DIGITS_CLASS = "validate-digits"
NUMBER_CLASS = "validate-number"

OPTION_TEXT_PREFIX = "option_text"


def get_option_text_field_name(field_name: str) -> str:
    """option_text_<field_name>"""
    return f"{OPTION_TEXT_PREFIX}_{field_name}"
