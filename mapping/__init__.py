"""
mapping - Attribute → search index field mapping.

Public API:
    AttributeMapper                  → field types, field options, index values
    FieldType                        → string / integer / double / boolean / date
    get_option_text_field_name(code) → "option_text_<code>"
"""

from mapping.attribute_mapper import AttributeMapper                       # noqa: F401
from mapping.field_map import FieldType, get_option_text_field_name        # noqa: F401
