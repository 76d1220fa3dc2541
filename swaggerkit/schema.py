"""Schema building blocks for describing API payloads.

A schema is one of three things:

- a keyed composite, :class:`Model`, mapping field keys to sub-schemas;
- a homogeneous container, :class:`Container`, wrapping exactly one item
  schema and tagged as a ``sequence`` or a ``set``;
- a leaf: a Python type such as ``str`` or ``datetime``, an ``Enum``
  subclass, or one of the :class:`Maybe`/:class:`Described` wrappers.

Field keys are plain strings (required fields), :func:`required_key` /
:func:`optional_key` markers, or predicate keys. A predicate key matches any
key of a given schema (``{PredicateKey(str): Any}`` or the shorthand
``{str: Any}``) and never names a concrete field.

Plain ``dict`` values are read as anonymous models and single-element lists
as sequences, so payloads can be written compactly::

    Pet = Model(
        {
            'id': int,
            'name': str,
            optional_key('tags'): [str],
            'owner': {'name': str, 'address': {'street': str}},
        },
        name='Pet',
    )

All schema objects are immutable; transformations derive new values.
"""

import dataclasses
from collections.abc import Iterator, Mapping
from typing import Any, Literal

__all__ = [
    'ANYTHING',
    'NOTHING',
    'Container',
    'Described',
    'Maybe',
    'Model',
    'OptionalKey',
    'PredicateKey',
    'RequiredKey',
    'describe',
    'explicit_key',
    'is_required_key',
    'is_specific_key',
    'optional_key',
    'required_key',
    'schema_name',
    'sequence_of',
    'set_of',
    'to_schema',
]

SEQUENCE = 'sequence'
SET = 'set'


@dataclasses.dataclass(frozen=True)
class RequiredKey:
    name: str


@dataclasses.dataclass(frozen=True)
class OptionalKey:
    name: str


@dataclasses.dataclass(frozen=True)
class PredicateKey:
    """Wildcard key matching any key that conforms to ``schema``."""

    schema: Any


def required_key(name: str) -> RequiredKey:
    return RequiredKey(name)


def optional_key(name: str) -> OptionalKey:
    return OptionalKey(name)


def is_specific_key(key: Any) -> bool:
    """Return True if ``key`` names a concrete field rather than a wildcard."""
    return not isinstance(key, (PredicateKey, type))


def is_required_key(key: Any) -> bool:
    return is_specific_key(key) and not isinstance(key, OptionalKey)


def explicit_key(key: Any) -> str:
    """Return the raw field name carried by a specific key."""
    if isinstance(key, (RequiredKey, OptionalKey)):
        return key.name
    return str(key)


def to_schema(value: Any) -> Any:
    """Normalize the shorthand forms into schema objects.

    ``dict`` becomes an anonymous :class:`Model`, a one-element ``list`` or
    ``tuple`` a sequence and a one-element ``frozenset``/``set`` a set.
    Anything else is returned unchanged.
    """
    if isinstance(value, dict):
        return Model(value)
    if isinstance(value, (list, tuple)) and len(value) == 1:
        return Container(SEQUENCE, value[0])
    if isinstance(value, (set, frozenset)) and len(value) == 1:
        return Container(SET, next(iter(value)))
    return value


@dataclasses.dataclass(frozen=True)
class Model:
    """Keyed composite schema.

    Attributes:
        fields: Mapping of field key to sub-schema, in declaration order.
        name: The intrinsic name given by the schema's author, if any.
        description: Optional human readable description.
        derived_name: Name assigned by the namer to an anonymous model.
    """

    fields: Mapping[Any, Any] = dataclasses.field(default_factory=dict)
    name: str | None = None
    description: str | None = None
    derived_name: str | None = None

    def __post_init__(self):
        object.__setattr__(
            self, 'fields', {k: to_schema(v) for k, v in self.fields.items()}
        )

    @property
    def schema_name(self) -> str | None:
        return self.name or self.derived_name

    def specific_items(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over ``(key, schema)`` pairs, skipping predicate keys."""
        for key, value in self.fields.items():
            if is_specific_key(key):
                yield key, value

    def required_keys(self) -> list[str]:
        return [explicit_key(k) for k, _ in self.specific_items() if is_required_key(k)]

    def __hash__(self) -> int:
        # hashed by content, nested models included, so {Model} works as a set
        fields = tuple(self.fields.items())
        return hash((self.name, self.derived_name, self.description, fields))


@dataclasses.dataclass(frozen=True)
class Container:
    """Homogeneous container of ``item`` schemas."""

    kind: Literal['sequence', 'set']
    item: Any

    def __post_init__(self):
        if self.kind not in (SEQUENCE, SET):
            raise ValueError(f'Unknown container kind: {self.kind!r}')
        object.__setattr__(self, 'item', to_schema(self.item))

    @property
    def unique(self) -> bool:
        return self.kind == SET


@dataclasses.dataclass(frozen=True)
class Maybe:
    """A schema that also accepts ``None``."""

    schema: Any

    def __post_init__(self):
        object.__setattr__(self, 'schema', to_schema(self.schema))


@dataclasses.dataclass(frozen=True)
class Described:
    """A schema annotated with a description."""

    schema: Any
    description: str

    def __post_init__(self):
        object.__setattr__(self, 'schema', to_schema(self.schema))


def sequence_of(item: Any) -> Container:
    return Container(SEQUENCE, item)


def set_of(item: Any) -> Container:
    return Container(SET, item)


def describe(schema: Any, description: str) -> Any:
    """Attach a description to a schema.

    Models keep the description on themselves, other schemas are wrapped
    in :class:`Described`.
    """
    schema = to_schema(schema)
    if isinstance(schema, Model):
        return dataclasses.replace(schema, description=description)
    return Described(schema, description)


def schema_name(schema: Any) -> str | None:
    """Return the intrinsic or derived name of a model, else None."""
    schema = to_schema(schema)
    if isinstance(schema, Model):
        return schema.schema_name
    return None


ANYTHING = Model({PredicateKey(str): Any})
NOTHING = Model({})
