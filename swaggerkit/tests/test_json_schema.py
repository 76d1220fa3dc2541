"""Test wire fragment encoding."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

import pytest

from swaggerkit.exceptions import UnmappedSchemaError
from swaggerkit.schema import Described, Maybe, Model, PredicateKey, optional_key, set_of
from swaggerkit.transform.json_schema import (
    EncodingOptions,
    properties,
    to_json,
    to_parameter,
)


class Color(Enum):
    RED = 'red'
    BLUE = 'blue'


class Level(Enum):
    LOW = 1
    HIGH = 2


class TestPrimitives:
    """Test encoding of leaf schemas."""

    def test_primitive_types(self):
        assert to_json(str) == {'type': 'string'}
        assert to_json(int) == {'type': 'integer', 'format': 'int64'}
        assert to_json(float) == {'type': 'number', 'format': 'double'}
        assert to_json(Decimal) == {'type': 'number', 'format': 'double'}
        assert to_json(bool) == {'type': 'boolean'}
        assert to_json(datetime) == {'type': 'string', 'format': 'date-time'}
        assert to_json(date) == {'type': 'string', 'format': 'date'}
        assert to_json(UUID) == {'type': 'string', 'format': 'uuid'}

    def test_any(self):
        assert to_json(Any) == {}

    def test_fragments_are_copies(self):
        fragment = to_json(str)
        fragment['description'] = 'changed'
        assert to_json(str) == {'type': 'string'}

    def test_enums(self):
        assert to_json(Color) == {'type': 'string', 'enum': ['red', 'blue']}
        assert to_json(Level) == {'type': 'integer', 'format': 'int64', 'enum': [1, 2]}

    def test_maybe_and_described(self):
        assert to_json(Maybe(str)) == {'type': 'string'}
        assert to_json(Described(int, 'A count')) == {
            'type': 'integer',
            'format': 'int64',
            'description': 'A count',
        }


class TestModelsAndContainers:
    """Test encoding of composite schemas."""

    def test_named_model_is_a_reference(self):
        assert to_json(Model({'a': int}, name='Pet')) == {'$ref': '#/definitions/Pet'}

    def test_named_model_description(self):
        model = Model({}, name='Pet', description='A pet')
        assert to_json(model) == {'$ref': '#/definitions/Pet', 'description': 'A pet'}

    def test_derived_name_is_a_reference(self):
        model = Model({'a': int}, derived_name='RootInner')
        assert to_json(model) == {'$ref': '#/definitions/RootInner'}

    def test_spec_version_1_2_reference(self):
        options = EncodingOptions(spec_version='1.2')
        assert to_json(Model({}, name='Pet'), options) == {'$ref': 'Pet'}

    def test_sequence(self):
        assert to_json([Model({}, name='Pet')]) == {
            'type': 'array',
            'items': {'$ref': '#/definitions/Pet'},
        }

    def test_set(self):
        assert to_json(set_of(str)) == {
            'type': 'array',
            'items': {'type': 'string'},
            'uniqueItems': True,
        }


class TestMissingMappings:
    """Test strict and relaxed handling of unmapped schemas."""

    def test_anonymous_model_strict(self):
        with pytest.raises(UnmappedSchemaError) as exc_info:
            to_json({'a': int}, context='owner')
        assert exc_info.value.context == 'owner'

    def test_unknown_type_strict(self):
        with pytest.raises(UnmappedSchemaError):
            to_json(object)

    def test_relaxed_returns_none(self):
        options = EncodingOptions().relaxed()
        assert to_json({'a': int}, options) is None
        assert to_json(object, options) is None
        assert to_json([{'a': int}], options) is None

    def test_relaxed_and_strict_round_trip(self):
        options = EncodingOptions().relaxed().strict()
        assert options.ignore_missing_mappings is False


class TestProperties:
    """Test properties and parameter helpers."""

    def test_properties_in_declaration_order(self):
        model = Model({'b': str, optional_key('a'): int, PredicateKey(str): Any})
        result = properties(model)
        assert list(result) == ['b', 'a']
        assert result['a'] == {'type': 'integer', 'format': 'int64'}

    def test_relaxed_properties_skip_unmapped(self):
        model = Model({'ok': str, 'nested': {'x': int}, 'weird': object})
        result = properties(model, EncodingOptions().relaxed())
        assert result == {'ok': {'type': 'string'}}

    def test_strict_properties_raise(self):
        with pytest.raises(UnmappedSchemaError):
            properties(Model({'nested': {'x': int}}))

    def test_to_parameter(self):
        base = {'in': 'query', 'name': 'q', 'required': True}
        assert to_parameter(base, {'type': 'string'}) == {
            'in': 'query',
            'name': 'q',
            'required': True,
            'type': 'string',
        }
