"""Input surface: the route table handed over by the route-registration layer.

An API surface is a mapping with a ``paths`` route table plus any top-level
Swagger fields (``info``, ``basePath``, ``tags``, ...)::

    api = {
        'info': {'title': 'Petstore', 'version': '1.0.0'},
        'paths': {
            '/pets/:id': {
                'get': {
                    'summary': 'Get a pet',
                    'parameters': {'path': {'id': int}},
                    'responses': {200: {'description': 'The pet', 'schema': Pet}},
                },
            },
        },
    }

Schemas sit in ``parameters`` and in each response's ``schema`` and are kept
as given (after shorthand normalization); every other operation field passes
through to the document untouched.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swaggerkit.openapi.v2.v2 import (
    ClosedModel,
    ExternalDocs,
    Info,
    SchemeType,
    SecurityScheme,
    Tag,
)
from swaggerkit.schema import to_schema

__all__ = [
    'ApiSurface',
    'Operation',
    'Parameters',
    'Response',
    'as_surface',
    'surface_mapping',
]

PARAMETER_LOCATIONS = ('body', 'query', 'path', 'header', 'formData')


class Parameters(BaseModel):
    """Per-location parameter schemas of one operation."""

    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    body: Any = None
    query: Any = None
    path: Any = None
    header: Any = None
    form_data: Any = Field(None, alias='formData')

    @field_validator('body', 'query', 'path', 'header', 'form_data')
    @classmethod
    def normalize_schema(cls, value: Any) -> Any:
        return None if value is None else to_schema(value)

    def locations(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(location, schema)`` for every location that is present."""
        values = (self.body, self.query, self.path, self.header, self.form_data)
        for location, schema in zip(PARAMETER_LOCATIONS, values):
            if schema is not None:
                yield location, schema


class Response(ClosedModel):
    description: str = ''
    schema_: Any = Field(None, alias='schema')
    headers: dict[str, Any] | None = None
    examples: dict[str, Any] | None = None

    @field_validator('schema_')
    @classmethod
    def normalize_schema(cls, value: Any) -> Any:
        return None if value is None else to_schema(value)


class Operation(ClosedModel):
    """One HTTP method on a route.

    Only ``parameters`` and ``responses`` are transformed, the remaining
    Swagger operation fields are copied to the document as they are.
    """

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = Field(None, alias='externalDocs')
    operation_id: str | None = Field(None, alias='operationId')
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: Parameters | None = None
    responses: dict[int | str, Response] = Field(default_factory=dict)
    schemes: list[SchemeType] | None = None
    deprecated: bool | None = None
    security: list[dict[str, list[str]]] | None = None

    def metadata(self) -> dict[str, Any]:
        """Return the pass-through fields in wire form."""
        return self.model_dump(
            mode='json',
            by_alias=True,
            exclude_none=True,
            exclude={'parameters', 'responses'},
        )


class ApiSurface(ClosedModel):
    """A route table plus the caller's top-level document fields."""

    swagger: Literal['2.0'] = '2.0'
    info: Info | None = None
    host: str | None = Field(None, pattern=r'^[^{}/ :\\]+(?::\d+)?$')
    base_path: str | None = Field(None, alias='basePath', pattern=r'^/')
    schemes: list[SchemeType] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    paths: dict[str, dict[str, Operation]] = Field(default_factory=dict)
    security_definitions: dict[str, SecurityScheme] | None = Field(
        None, alias='securityDefinitions'
    )
    security: list[dict[str, list[str]]] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = Field(None, alias='externalDocs')

    def operations(self) -> Iterator[Operation]:
        for methods in self.paths.values():
            yield from methods.values()

    def top_level(self) -> dict[str, Any]:
        """Return the caller-supplied top-level fields, excluding ``paths``."""
        return self.model_dump(
            mode='json',
            by_alias=True,
            exclude_none=True,
            exclude_unset=True,
            exclude={'paths'},
        )


def surface_mapping(api: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``api`` as a surface mapping.

    A mapping without a ``paths`` key whose keys are all URL templates is read
    as a bare route table.
    """
    if 'paths' not in api and api and all(str(k).startswith('/') for k in api):
        return {'paths': dict(api)}
    return dict(api)


def as_surface(api: ApiSurface | Mapping[str, Any]) -> ApiSurface:
    """Validate a raw mapping into an :class:`ApiSurface`."""
    if isinstance(api, ApiSurface):
        return api
    return ApiSurface.model_validate(surface_mapping(api))
