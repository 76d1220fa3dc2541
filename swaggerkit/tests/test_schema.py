"""Test schema building blocks."""

from typing import Any

import pytest

from swaggerkit.schema import (
    ANYTHING,
    NOTHING,
    Container,
    Described,
    Maybe,
    Model,
    OptionalKey,
    PredicateKey,
    describe,
    explicit_key,
    is_required_key,
    is_specific_key,
    optional_key,
    required_key,
    schema_name,
    sequence_of,
    set_of,
    to_schema,
)


class TestKeys:
    """Test field key helpers."""

    def test_plain_string_key_is_required(self):
        assert is_specific_key('name') is True
        assert is_required_key('name') is True
        assert explicit_key('name') == 'name'

    def test_explicit_keys(self):
        assert is_required_key(required_key('id')) is True
        assert is_required_key(optional_key('tag')) is False
        assert explicit_key(optional_key('tag')) == 'tag'
        assert explicit_key(required_key('id')) == 'id'

    def test_predicate_keys(self):
        """Test wildcard keys are not specific."""
        assert is_specific_key(PredicateKey(str)) is False
        assert is_specific_key(str) is False
        assert is_required_key(str) is False


class TestToSchema:
    """Test shorthand normalization."""

    def test_dict_becomes_anonymous_model(self):
        schema = to_schema({'a': int})
        assert isinstance(schema, Model)
        assert schema.name is None
        assert schema.fields == {'a': int}

    def test_single_element_list_becomes_sequence(self):
        schema = to_schema([str])
        assert schema == Container('sequence', str)
        assert schema.unique is False

    def test_single_element_set_becomes_set(self):
        schema = to_schema(frozenset({str}))
        assert schema == Container('set', str)
        assert schema.unique is True

    def test_set_shorthand_of_model(self):
        """Test models can be written inside a set literal."""
        pet = Model({'name': str, 'owner': {'name': str}}, name='Pet')
        schema = to_schema({pet})
        assert schema == set_of(pet)
        assert schema.item is pet

    def test_equal_models_hash_equal(self):
        first = Model({'a': {'b': [int]}}, name='A')
        second = Model({'a': {'b': [int]}}, name='A')
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_other_values_unchanged(self):
        assert to_schema(int) is int
        assert to_schema([int, str]) == [int, str]

    def test_nested_values_are_normalized(self):
        model = Model({'inner': {'values': [int]}})
        inner = model.fields['inner']
        assert isinstance(inner, Model)
        assert inner.fields['values'] == sequence_of(int)


class TestModel:
    """Test Model behavior."""

    def test_specific_items_skip_predicates(self):
        model = Model({'a': int, PredicateKey(str): Any, optional_key('b'): str})
        assert [k for k, _ in model.specific_items()] == ['a', OptionalKey('b')]

    def test_required_keys_in_declaration_order(self):
        model = Model({'z': int, optional_key('y'): int, 'a': int})
        assert model.required_keys() == ['z', 'a']

    def test_schema_name_prefers_intrinsic_name(self):
        model = Model({}, name='Pet', derived_name='Other')
        assert model.schema_name == 'Pet'
        assert Model({}, derived_name='Derived').schema_name == 'Derived'
        assert Model({}).schema_name is None

    def test_schema_name_function(self):
        assert schema_name(Model({}, name='Pet')) == 'Pet'
        assert schema_name({'a': int}) is None
        assert schema_name(str) is None

    def test_anything_and_nothing(self):
        assert list(ANYTHING.specific_items()) == []
        assert NOTHING.fields == {}


class TestContainersAndWrappers:
    """Test containers and wrapper schemas."""

    def test_sequence_and_set(self):
        assert sequence_of(int).kind == 'sequence'
        assert set_of(int).kind == 'set'

    def test_unknown_container_kind(self):
        with pytest.raises(ValueError):
            Container('bag', int)

    def test_wrappers_normalize_their_schema(self):
        assert isinstance(Maybe({'a': int}).schema, Model)
        assert isinstance(Described({'a': int}, 'desc').schema, Model)

    def test_describe_model(self):
        model = describe(Model({'a': int}, name='A'), 'An A')
        assert isinstance(model, Model)
        assert model.description == 'An A'
        assert model.name == 'A'

    def test_describe_leaf(self):
        assert describe(int, 'count') == Described(int, 'count')
