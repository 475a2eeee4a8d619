import pytest

from catalog.sources import BOOLEAN_SOURCE_MODEL, TABLE_SOURCE_MODEL
from mapping import AttributeMapper, FieldType


@pytest.mark.parametrize("kwargs, expected", [
    ({"backend_type": "int"}, FieldType.INTEGER),
    ({"backend_type": "varchar", "frontend_class": "validate-digits"}, FieldType.INTEGER),
    ({"backend_type": "decimal"}, FieldType.DOUBLE),
    ({"backend_type": "varchar", "frontend_class": "validate-number"}, FieldType.DOUBLE),
    ({"backend_type": "varchar", "source_model": BOOLEAN_SOURCE_MODEL}, FieldType.BOOLEAN),
    ({"backend_type": "datetime"}, FieldType.DATE),
    ({"backend_type": "varchar", "frontend_input": "multiselect"}, FieldType.INTEGER),
    ({"backend_type": "varchar"}, FieldType.STRING),
    ({"backend_type": "text", "frontend_input": "textarea"}, FieldType.STRING),
])
def test_field_type_rules(make_attribute, kwargs, expected):
    assert AttributeMapper.get_field_type(make_attribute(**kwargs)) is expected


@pytest.mark.parametrize("kwargs, expected", [
    # int backend beats every later rule
    ({"backend_type": "int", "frontend_class": "validate-number"}, FieldType.INTEGER),
    ({"backend_type": "int", "source_model": BOOLEAN_SOURCE_MODEL}, FieldType.INTEGER),
    ({"backend_type": "int", "frontend_input": "select"}, FieldType.INTEGER),
    # validate-digits beats a decimal backend
    ({"backend_type": "decimal", "frontend_class": "validate-digits"}, FieldType.INTEGER),
    ({"backend_type": "decimal", "source_model": BOOLEAN_SOURCE_MODEL}, FieldType.DOUBLE),
    ({"backend_type": "datetime", "source_model": BOOLEAN_SOURCE_MODEL}, FieldType.BOOLEAN),
    ({"backend_type": "datetime", "frontend_input": "select"}, FieldType.DATE),
])
def test_field_type_precedence(make_attribute, kwargs, expected):
    assert AttributeMapper.get_field_type(make_attribute(**kwargs)) is expected


def test_select_with_explicit_source_model_is_string(make_attribute):
    attribute = make_attribute(backend_type="varchar", frontend_input="select",
                               source_model=TABLE_SOURCE_MODEL)
    assert AttributeMapper.get_field_type(attribute) is FieldType.STRING


def test_field_type_values_are_index_type_names():
    assert [t.value for t in FieldType] == ["string", "integer", "double", "boolean", "date"]


def test_mapping_field_options(make_attribute):
    attribute = make_attribute(is_searchable=True, is_filterable=False, search_weight=3)

    options = AttributeMapper.get_mapping_field_options(attribute)

    assert options == {
        "isSearchable": True,
        "isFilterable": False,
        "isFilterableInSearch": False,
        "searchWeight": 3,
    }


def test_filterable_in_search_follows_filterable(make_attribute):
    options = AttributeMapper.get_mapping_field_options(make_attribute(is_filterable=True))
    assert options["isFilterableInSearch"] is True


def test_option_text_field_name():
    assert AttributeMapper.get_option_text_field_name("color") == "option_text_color"
