"""Encoding of schemas into Swagger wire fragments.

Leaves map to JSON Schema primitives, named models to ``$ref`` links into the
definitions dictionary and containers to array fragments. Anonymous models
have no fragment of their own: they must be named first (see
:mod:`swaggerkit.transform.naming`) or rendered inline by the caller.

The encoding dialect is carried by an :class:`EncodingOptions` value passed
down every call, never by module state.
"""

import dataclasses
import logging
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Literal
from uuid import UUID

from swaggerkit.exceptions import UnmappedSchemaError
from swaggerkit.schema import Container, Described, Maybe, Model, explicit_key, to_schema

logger = logging.getLogger(__name__)

__all__ = [
    'DEFAULT_OPTIONS',
    'EncodingOptions',
    'properties',
    'to_json',
    'to_parameter',
]

_PRIMITIVE_TYPE_MAP = {
    str: {'type': 'string'},
    int: {'type': 'integer', 'format': 'int64'},
    float: {'type': 'number', 'format': 'double'},
    Decimal: {'type': 'number', 'format': 'double'},
    bool: {'type': 'boolean'},
    datetime: {'type': 'string', 'format': 'date-time'},
    date: {'type': 'string', 'format': 'date'},
    time: {'type': 'string', 'format': 'time'},
    UUID: {'type': 'string', 'format': 'uuid'},
    bytes: {'type': 'string', 'format': 'byte'},
}


@dataclasses.dataclass(frozen=True)
class EncodingOptions:
    """Dialect switches for one encoding run.

    Attributes:
        spec_version: Target Swagger version. ``'2.0'`` links models with
            ``#/definitions/<Name>``, ``'1.2'`` with the bare model name.
        ignore_missing_mappings: When True, schemas without a mapping encode
            to None instead of raising :class:`UnmappedSchemaError`.
    """

    spec_version: Literal['1.2', '2.0'] = '2.0'
    ignore_missing_mappings: bool = False

    def relaxed(self) -> 'EncodingOptions':
        return dataclasses.replace(self, ignore_missing_mappings=True)

    def strict(self) -> 'EncodingOptions':
        return dataclasses.replace(self, ignore_missing_mappings=False)

    def reference(self, name: str) -> str:
        if self.spec_version == '2.0':
            return f'#/definitions/{name}'
        return name


DEFAULT_OPTIONS = EncodingOptions()


def _missing(schema: Any, options: EncodingOptions, context: str | None) -> None:
    if options.ignore_missing_mappings:
        logger.debug(f'Ignoring schema without a mapping: {schema!r} ({context})')
        return None
    raise UnmappedSchemaError(schema, context)


def _enum_json(enum_type: type[Enum]) -> dict:
    values = [member.value for member in enum_type]
    fragment = {}
    if values:
        fragment.update(_PRIMITIVE_TYPE_MAP.get(type(values[0]), {}))
    fragment['enum'] = values
    return fragment


def to_json(
    schema: Any,
    options: EncodingOptions = DEFAULT_OPTIONS,
    context: str | None = None,
) -> dict | None:
    """Encode a schema into its wire fragment.

    Args:
        schema: The schema to encode.
        options: Encoding dialect.
        context: Location of the schema, used in error messages.

    Returns:
        The wire fragment, or None for an unmapped schema in relaxed mode.

    Raises:
        UnmappedSchemaError: If the schema has no mapping in strict mode.
    """
    schema = to_schema(schema)

    if isinstance(schema, Model):
        name = schema.schema_name
        if not name:
            return _missing(schema, options, context)
        fragment = {'$ref': options.reference(name)}
        if schema.description:
            fragment['description'] = schema.description
        return fragment

    if isinstance(schema, Container):
        items = to_json(schema.item, options, context)
        if items is None:
            return None
        fragment = {'type': 'array', 'items': items}
        if schema.unique:
            fragment['uniqueItems'] = True
        return fragment

    if isinstance(schema, Maybe):
        return to_json(schema.schema, options, context)

    if isinstance(schema, Described):
        fragment = to_json(schema.schema, options, context)
        if fragment is None:
            return None
        return {**fragment, 'description': schema.description}

    if schema is Any:
        return {}

    if isinstance(schema, type):
        if issubclass(schema, Enum):
            return _enum_json(schema)
        if schema in _PRIMITIVE_TYPE_MAP:
            return dict(_PRIMITIVE_TYPE_MAP[schema])

    return _missing(schema, options, context)


def properties(model: Model, options: EncodingOptions = DEFAULT_OPTIONS) -> dict:
    """Encode every specific field of a model, keyed by field name.

    Fields that encode to None (relaxed mode only) are left out.
    """
    result = {}
    for key, value in model.specific_items():
        name = explicit_key(key)
        fragment = to_json(value, options, context=name)
        if fragment is not None:
            result[name] = fragment
    return result


def to_parameter(base: dict, fragment: dict) -> dict:
    """Merge a field's wire fragment into a non-body parameter object."""
    return {**base, **fragment}
