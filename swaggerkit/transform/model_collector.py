"""Model collection and rendering for the definitions dictionary.

This module gathers every model reachable from the body and response schemas
of an API surface, names the anonymous ones, deduplicates them by name and
renders each into its Swagger definitions form.

Two models sharing a name are assumed identical. When they are not, the one
seen last wins; no collision is reported.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from swaggerkit.routes import ApiSurface, as_surface
from swaggerkit.schema import Container, Described, Maybe, Model, schema_name, to_schema
from swaggerkit.transform.json_schema import DEFAULT_OPTIONS, EncodingOptions, properties
from swaggerkit.transform.naming import PlaceholderNames, with_named_sub_schemas
from swaggerkit.transform.utils import remove_empty_keys

__all__ = [
    'collect_models',
    'extract_models',
    'transform',
    'transform_models',
]


def _surface_schemas(surface: ApiSurface) -> list[Any]:
    """Body schemas of all operations first, then all response schemas."""
    operations = list(surface.operations())
    bodies = [
        op.parameters.body
        for op in operations
        if op.parameters is not None and op.parameters.body is not None
    ]
    responses = [
        response.schema_
        for op in operations
        for response in op.responses.values()
        if response.schema_ is not None
    ]
    return bodies + responses


def extract_models(api: ApiSurface | Mapping[str, Any]) -> list[Model]:
    """Name and deduplicate the root models of every body and response.

    Containers are unwrapped one level, so a ``[Pet]`` response contributes
    ``Pet``. Anonymous roots get placeholder names from an allocator local to
    this call, so extracting the same surface twice yields the same names.

    Args:
        api: The API surface or a raw mapping of it.

    Returns:
        The named root models, one per name, the last one seen winning.
    """
    schemas = []
    for schema in _surface_schemas(as_surface(api)):
        schema = to_schema(schema)
        if isinstance(schema, Container):
            schema = schema.item
        schemas.append(schema)

    placeholders = PlaceholderNames(reserved=collect_models(schemas))

    models: dict[str, Model] = {}
    for schema in schemas:
        if not isinstance(schema, Model):
            continue
        named = with_named_sub_schemas(schema, placeholders=placeholders)
        models[schema_name(named)] = named
    return list(models.values())


def collect_models(x: Any) -> dict[str, Model]:
    """Collect every named model nested anywhere in ``x``.

    ``x`` can be a schema or any structure of mappings, sequences, sets and
    pydantic models holding schemas. Models are visited parent first and a
    later model overwrites an earlier one of the same name.

    Returns:
        Mapping of model name to model.
    """
    schemas: dict[str, Model] = {}

    def walk(node: Any) -> None:
        if isinstance(node, Model):
            name = node.schema_name
            if name:
                schemas[name] = node
            for value in node.fields.values():
                walk(value)
        elif isinstance(node, Container):
            walk(node.item)
        elif isinstance(node, (Maybe, Described)):
            walk(node.schema)
        elif isinstance(node, BaseModel):
            for _, value in node:
                walk(value)
        elif isinstance(node, Mapping):
            for value in node.values():
                walk(value)
        elif isinstance(node, (list, tuple, set, frozenset)):
            for value in node:
                walk(value)

    walk(x)
    return schemas


def transform(model: Any, options: EncodingOptions = DEFAULT_OPTIONS) -> dict:
    """Render a model into its definitions form.

    Known limitation: in relaxed mode a field whose schema has no mapping is
    left out of ``properties`` but still listed in ``required`` when it is a
    required key, so an inline response can require a property it does not
    describe.

    Returns:
        A dict with ``properties``, ``required`` (field names in declaration
        order) and ``description``, each left out when empty.
    """
    model = to_schema(model)
    return remove_empty_keys(
        {
            'description': model.description,
            'properties': properties(model, options),
            'required': model.required_keys(),
        }
    )


def transform_models(
    schemas: Iterable[Any], options: EncodingOptions = DEFAULT_OPTIONS
) -> dict[str, dict]:
    """Render every model nested in ``schemas``, keyed by model name."""
    models: dict[str, Model] = {}
    for schema in schemas:
        models.update(collect_models(schema))
    return {name: transform(model, options) for name, model in models.items()}
