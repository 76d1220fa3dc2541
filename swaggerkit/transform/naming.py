"""Derived names for anonymous models.

Swagger definitions are flat and every nested object must be reachable by
name, so anonymous models found inside a schema tree get a name built from
their path: the root name followed by each field key on the way down, all
turned into PascalCase words and concatenated (``owner_address`` gives
``OwnerAddress``). Containers and wrappers add no segment.

Example:
    >>> named = with_named_sub_schemas({'inner': {'value': int}}, 'Root')
    >>> named.derived_name, named.fields['inner'].derived_name
    ('Root', 'RootInner')
"""

import dataclasses
import itertools
from collections.abc import Iterable
from typing import Any

from swaggerkit.schema import (
    Container,
    Described,
    Maybe,
    Model,
    explicit_key,
    is_specific_key,
    schema_name,
    to_schema,
)
from swaggerkit.transform.utils import pascal_case

__all__ = [
    'PlaceholderNames',
    'assign_names',
    'full_name',
    'with_named_sub_schemas',
]


class PlaceholderNames:
    """Allocates root names for models that have none.

    Names are ``<prefix>1``, ``<prefix>2``, ... in allocation order, skipping
    anything reserved, so a fresh allocator over the same input always hands
    out the same names.

    Example:
        >>> placeholders = PlaceholderNames(reserved={'Schema1'})
        >>> placeholders.next_name()
        'Schema2'
    """

    def __init__(self, prefix: str = 'Schema', reserved: Iterable[str] = ()):
        self.prefix = prefix
        self._reserved = set(reserved)
        self._counter = itertools.count(1)

    def reserve(self, name: str) -> None:
        self._reserved.add(name)

    def next_name(self) -> str:
        while True:
            name = f'{self.prefix}{next(self._counter)}'
            if name not in self._reserved:
                self._reserved.add(name)
                return name


# Process-wide fallback for callers that name a single schema without an
# allocator of their own.
_placeholders = PlaceholderNames()


def full_name(path: list[Any]) -> str:
    return ''.join(pascal_case(str(segment)) for segment in path)


def _name_schemas(path: list[str], schema: Any) -> Any:
    if isinstance(schema, Model):
        if schema.name:
            derived_name = None
            # a named model inside the tree starts a new path
            if len(path) > 1:
                path = [schema.name]
        else:
            derived_name = full_name(path)

        fields = {
            k: _name_schemas(path + [explicit_key(k)], v) if is_specific_key(k) else v
            for k, v in schema.fields.items()
        }
        return dataclasses.replace(schema, fields=fields, derived_name=derived_name)

    if isinstance(schema, Container):
        return dataclasses.replace(schema, item=_name_schemas(path, schema.item))

    if isinstance(schema, (Maybe, Described)):
        return dataclasses.replace(schema, schema=_name_schemas(path, schema.schema))

    return schema


def with_named_sub_schemas(
    schema: Any,
    root_name: str | None = None,
    placeholders: PlaceholderNames | None = None,
) -> Any:
    """Name every anonymous model between the root and any named model.

    Args:
        schema: The schema tree. It is not modified.
        root_name: Name of the root path segment. Defaults to the schema's own
            name, or a placeholder when it has none.
        placeholders: Allocator for placeholder root names.

    Returns:
        A copy of the tree in which every model has a name.
    """
    schema = to_schema(schema)
    if root_name is None:
        root_name = schema_name(schema)
    if root_name is None:
        root_name = (placeholders or _placeholders).next_name()
    return _name_schemas([root_name], schema)


assign_names = with_named_sub_schemas
