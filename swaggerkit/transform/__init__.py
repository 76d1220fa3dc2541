"""Transformation of API surfaces into Swagger 2.0 documents.

The pipeline, leaves first:

- :mod:`~swaggerkit.transform.json_schema` encodes single schemas;
- :mod:`~swaggerkit.transform.naming` names anonymous nested models;
- :mod:`~swaggerkit.transform.model_collector` gathers, deduplicates and
  renders the definitions;
- :mod:`~swaggerkit.transform.processors` converts parameters and responses;
- :mod:`~swaggerkit.transform.swagger2` assembles the document.
"""

from swaggerkit.transform.json_schema import EncodingOptions, to_json
from swaggerkit.transform.model_collector import (
    collect_models,
    extract_models,
    transform,
    transform_models,
)
from swaggerkit.transform.naming import assign_names, with_named_sub_schemas
from swaggerkit.transform.swagger2 import (
    SchemaViolation,
    SwaggerGenerator,
    swagger_json,
    validate,
    validate_document,
)

__all__ = [
    'EncodingOptions',
    'SchemaViolation',
    'SwaggerGenerator',
    'assign_names',
    'collect_models',
    'extract_models',
    'swagger_json',
    'to_json',
    'transform',
    'transform_models',
    'validate',
    'validate_document',
    'with_named_sub_schemas',
]
