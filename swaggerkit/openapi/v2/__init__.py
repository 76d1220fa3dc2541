"""Swagger 2.0 document models."""

from swaggerkit.openapi.v2.v2 import (
    BodyParameter,
    Info,
    JsonReference,
    NonBodyParameter,
    Operation,
    Parameter,
    PathItem,
    Response,
    Schema,
    SecurityScheme,
    Swagger,
    Tag,
)

__all__ = [
    'Swagger',
    'Info',
    'Tag',
    'Schema',
    'Parameter',
    'BodyParameter',
    'NonBodyParameter',
    'Response',
    'Operation',
    'PathItem',
    'SecurityScheme',
    'JsonReference',
]
