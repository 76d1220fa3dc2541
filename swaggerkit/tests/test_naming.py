"""Test derived naming of anonymous models."""

from typing import Any

from swaggerkit.schema import Maybe, Model, PredicateKey, optional_key, set_of
from swaggerkit.transform.naming import (
    PlaceholderNames,
    full_name,
    with_named_sub_schemas,
)


def derived_names(schema) -> list[str]:
    """Collect (path-ordered) names of every model in a tree."""
    names = []

    def walk(node):
        if isinstance(node, Model):
            names.append(node.schema_name)
            for value in node.fields.values():
                walk(value)
        elif hasattr(node, 'item'):
            walk(node.item)
        elif hasattr(node, 'schema'):
            walk(node.schema)

    walk(schema)
    return names


class TestFullName:
    """Test path to name conversion."""

    def test_capitalizes_and_concatenates(self):
        assert full_name(['Root', 'inner', 'value']) == 'RootInnerValue'

    def test_keeps_camel_case(self):
        assert full_name(['pet', 'ownerAddress']) == 'PetOwnerAddress'

    def test_snake_and_kebab_case_segments(self):
        """Test separators inside keys do not leak into names."""
        assert full_name(['Pet', 'owner_address']) == 'PetOwnerAddress'
        assert full_name(['Pet', 'owner-address']) == 'PetOwnerAddress'
        assert full_name(['pet_store', 'mailing address', 'zip.code']) == (
            'PetStoreMailingAddressZipCode'
        )

    def test_separator_only_segment(self):
        assert full_name(['Root', '__', 'x']) == 'RootX'


class TestWithNamedSubSchemas:
    """Test the schema namer."""

    def test_path_naming(self):
        """Test nested anonymous fields are named after their path."""
        named = with_named_sub_schemas({'inner': {'value': int}}, 'Root')
        assert named.derived_name == 'Root'
        assert named.fields['inner'].derived_name == 'RootInner'
        assert named.fields['inner'].fields['value'] is int

    def test_snake_case_keys(self):
        named = with_named_sub_schemas({'owner_address': {'street_name': {'x': int}}}, 'Pet')
        inner = named.fields['owner_address']
        assert inner.derived_name == 'PetOwnerAddress'
        assert inner.fields['street_name'].derived_name == 'PetOwnerAddressStreetName'

    def test_optional_keys_use_raw_name(self):
        named = with_named_sub_schemas({optional_key('inner'): {'value': int}}, 'Root')
        assert named.fields[optional_key('inner')].derived_name == 'RootInner'

    def test_deterministic(self):
        schema = {'b': {'x': int}, 'a': {'y': {'z': str}}, 'c': [{'w': int}]}
        first = with_named_sub_schemas(schema, 'Root')
        second = with_named_sub_schemas(schema, 'Root')
        assert derived_names(first) == derived_names(second)
        assert derived_names(first) == ['Root', 'RootB', 'RootA', 'RootAY', 'RootC']

    def test_container_transparency(self):
        """Test containers add no path segment."""
        in_sequence = with_named_sub_schemas({'items': [{'v': int}]}, 'Root')
        bare = with_named_sub_schemas({'items': {'v': int}}, 'Root')
        assert in_sequence.fields['items'].item.derived_name == 'RootItems'
        assert bare.fields['items'].derived_name == 'RootItems'

    def test_set_and_maybe_transparency(self):
        named = with_named_sub_schemas(
            {'tags': set_of({'v': int}), 'extra': Maybe({'v': int})}, 'Root'
        )
        assert named.fields['tags'].item.derived_name == 'RootTags'
        assert named.fields['extra'].schema.derived_name == 'RootExtra'
        assert named.fields['tags'].kind == 'set'

    def test_named_root_keeps_its_name(self):
        pet = Model({'owner': {'name': str}}, name='pet')
        named = with_named_sub_schemas(pet)
        assert named.name == 'pet'
        assert named.derived_name is None
        assert named.fields['owner'].derived_name == 'PetOwner'

    def test_nested_named_model_is_authoritative(self):
        """Test a nested named model keeps its name and restarts the path."""
        owner = Model({'address': {'street': str}}, name='Owner')
        named = with_named_sub_schemas({'owner': owner}, 'Pet')
        nested = named.fields['owner']
        assert nested.name == 'Owner'
        assert nested.derived_name is None
        assert nested.fields['address'].derived_name == 'OwnerAddress'

    def test_predicate_keys_are_not_named(self):
        value = {'v': int}
        named = with_named_sub_schemas({PredicateKey(str): value, 'a': {'b': int}}, 'Root')
        assert named.fields[PredicateKey(str)].schema_name is None
        assert named.fields['a'].derived_name == 'RootA'

    def test_predicate_only_model_still_named(self):
        named = with_named_sub_schemas({PredicateKey(str): Any}, 'Root')
        assert named.derived_name == 'Root'

    def test_empty_root_gets_a_name(self):
        named = with_named_sub_schemas({}, 'Empty')
        assert named.derived_name == 'Empty'

    def test_anonymous_root_gets_placeholder(self):
        placeholders = PlaceholderNames()
        named = with_named_sub_schemas({'a': {'b': int}}, placeholders=placeholders)
        assert named.derived_name == 'Schema1'
        assert named.fields['a'].derived_name == 'Schema1A'

    def test_input_is_not_modified(self):
        schema = Model({'inner': {'value': int}})
        with_named_sub_schemas(schema, 'Root')
        assert schema.derived_name is None
        assert schema.fields['inner'].derived_name is None

    def test_renaming_is_stable(self):
        once = with_named_sub_schemas({'inner': {'value': int}}, 'Root')
        twice = with_named_sub_schemas(once)
        assert once == twice

    def test_leaf_unchanged(self):
        assert with_named_sub_schemas(int, 'Root') is int


class TestPlaceholderNames:
    """Test placeholder allocation."""

    def test_sequential(self):
        placeholders = PlaceholderNames()
        assert [placeholders.next_name() for _ in range(3)] == [
            'Schema1',
            'Schema2',
            'Schema3',
        ]

    def test_skips_reserved(self):
        placeholders = PlaceholderNames(reserved={'Schema1', 'Schema3'})
        assert placeholders.next_name() == 'Schema2'
        assert placeholders.next_name() == 'Schema4'

    def test_reserve_and_prefix(self):
        placeholders = PlaceholderNames(prefix='Anon')
        placeholders.reserve('Anon1')
        assert placeholders.next_name() == 'Anon2'
