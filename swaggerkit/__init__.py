"""swaggerkit - Generate Swagger 2.0 documents from Python API descriptions.

swaggerkit turns routes whose parameters and responses are described with
composable schema objects into a Swagger 2.0 document. Anonymous nested
objects get deterministic names derived from their path and every model ends
up once in the document's ``definitions``.

Quick Start:
    >>> from swaggerkit import Model, optional_key, swagger_json
    >>>
    >>> Pet = Model({'id': int, 'name': str, optional_key('tag'): str}, name='Pet')
    >>> api = {
    ...     'info': {'title': 'Petstore', 'version': '1.0.0'},
    ...     'paths': {
    ...         '/pets/:id': {
    ...             'get': {
    ...                 'parameters': {'path': {'id': int}},
    ...                 'responses': {200: {'description': 'A pet', 'schema': Pet}},
    ...             },
    ...         },
    ...     },
    ... }
    >>> document = swagger_json(api)
    >>> sorted(document['definitions'])
    ['Pet']

CLI Usage:
    $ swaggerkit generate myapp.api:routes -o swagger.json
    $ swaggerkit validate ./swagger.json
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

from swaggerkit.config import SwaggerConfig, get_config
from swaggerkit.exceptions import (
    ConfigurationError,
    OutputError,
    SchemaError,
    SchemaLoadError,
    SchemaValidationError,
    SwaggerKitError,
    UnmappedSchemaError,
)
from swaggerkit.schema import (
    ANYTHING,
    NOTHING,
    Container,
    Described,
    Maybe,
    Model,
    PredicateKey,
    describe,
    optional_key,
    required_key,
    sequence_of,
    set_of,
)
from swaggerkit.transform import (
    EncodingOptions,
    SchemaViolation,
    SwaggerGenerator,
    collect_models,
    extract_models,
    swagger_json,
    transform_models,
    validate,
    validate_document,
    with_named_sub_schemas,
)

__all__ = [
    # Schemas
    'Model',
    'Container',
    'Maybe',
    'Described',
    'PredicateKey',
    'ANYTHING',
    'NOTHING',
    'describe',
    'optional_key',
    'required_key',
    'sequence_of',
    'set_of',
    # Transformation
    'EncodingOptions',
    'SwaggerGenerator',
    'SchemaViolation',
    'collect_models',
    'extract_models',
    'swagger_json',
    'transform_models',
    'validate',
    'validate_document',
    'with_named_sub_schemas',
    # Configuration
    'SwaggerConfig',
    'get_config',
    # Exceptions
    'SwaggerKitError',
    'SchemaError',
    'UnmappedSchemaError',
    'SchemaLoadError',
    'SchemaValidationError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = _package_version('swaggerkit')
except PackageNotFoundError:
    __version__ = 'unknown'
