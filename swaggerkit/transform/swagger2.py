"""Swagger 2.0 document assembly.

This module provides the SwaggerGenerator class that turns an API surface
into a Swagger 2.0 document, plus module-level shortcuts for the common
calls and the pure validation entry points.
"""

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from swaggerkit.config import SwaggerConfig
from swaggerkit.openapi.v2 import Swagger
from swaggerkit.routes import ApiSurface, Operation, as_surface, surface_mapping
from swaggerkit.transform.json_schema import EncodingOptions
from swaggerkit.transform.model_collector import extract_models, transform_models
from swaggerkit.transform.processors import ParameterProcessor, ResponseProcessor
from swaggerkit.transform.utils import swagger_path

logger = logging.getLogger(__name__)

__all__ = [
    'SWAGGER_DEFAULTS',
    'SchemaViolation',
    'SwaggerGenerator',
    'extract_paths_and_definitions',
    'swagger_json',
    'transform_operation',
    'validate',
    'validate_document',
]

SWAGGER_DEFAULTS = {
    'swagger': '2.0',
    'info': {'title': 'Swagger API', 'version': '0.0.1'},
    'produces': ['application/json'],
    'consumes': ['application/json'],
}


@dataclasses.dataclass(frozen=True)
class SchemaViolation:
    """One structural problem found by validation.

    Attributes:
        location: Dotted path of the offending value, e.g. ``paths./pets.get``.
        message: Human readable description of the problem.
        type: Machine readable error type.
    """

    location: str
    message: str
    type: str

    def __str__(self) -> str:
        return f'{self.location}: {self.message}' if self.location else self.message


def _violations(error: ValidationError) -> list[SchemaViolation]:
    return [
        SchemaViolation(
            location='.'.join(str(part) for part in e['loc']),
            message=e['msg'],
            type=e['type'],
        )
        for e in error.errors()
    ]


class SwaggerGenerator:
    """Assembles Swagger 2.0 documents from API surfaces.

    Every call works on the 2.0 encoding dialect; the options are fixed on
    the generator and passed down explicitly.

    Attributes:
        config: Document defaults.
        options: Encoding options used for every conversion.

    Example:
        >>> generator = SwaggerGenerator()
        >>> document = generator.generate({'paths': {'/pets': {'get': {...}}}})
        >>> document['paths']['/pets']['get']['responses']['200']
    """

    def __init__(self, config: SwaggerConfig | None = None):
        self.config = config or SwaggerConfig()
        self.options = EncodingOptions(spec_version='2.0')
        self.parameter_processor = ParameterProcessor(self.options)
        self.response_processor = ResponseProcessor(self.options)

    def transform_operation(self, operations: Mapping[str, Operation]) -> dict[str, dict]:
        """Return the wire form of every method of one route.

        ``parameters`` and ``responses`` are dropped when they convert to
        nothing.
        """
        result = {}
        for method, operation in operations.items():
            if not isinstance(operation, Operation):
                operation = Operation.model_validate(operation)

            wire = operation.metadata()
            parameters = self.parameter_processor.convert_parameters(operation.parameters)
            if parameters:
                wire['parameters'] = parameters
            responses = self.response_processor.convert_responses(operation.responses)
            if responses:
                wire['responses'] = responses
            result[method] = wire
        return result

    def extract_paths_and_definitions(
        self, api: ApiSurface | Mapping[str, Any]
    ) -> tuple[dict[str, dict], dict[str, dict]]:
        surface = as_surface(api)
        paths = {
            swagger_path(uri): self.transform_operation(operations)
            for uri, operations in surface.paths.items()
        }
        definitions = transform_models(extract_models(surface), self.options)
        logger.debug(f'Assembled {len(paths)} paths and {len(definitions)} definitions')
        return paths, definitions

    def generate(self, api: ApiSurface | Mapping[str, Any]) -> dict[str, Any]:
        """Produce the Swagger document for an API surface.

        The configured defaults are merged with the caller's top-level fields,
        the caller's values taking precedence, then ``paths`` and
        ``definitions`` are added.

        Raises:
            UnmappedSchemaError: If a parameter or a model field has no wire
                mapping.
        """
        surface = as_surface(api)
        paths, definitions = self.extract_paths_and_definitions(surface)
        return {
            **self.config.document_defaults(),
            **surface.top_level(),
            'paths': paths,
            'definitions': definitions,
        }


def transform_operation(operations: Mapping[str, Operation]) -> dict[str, dict]:
    return SwaggerGenerator().transform_operation(operations)


def extract_paths_and_definitions(
    api: ApiSurface | Mapping[str, Any],
) -> tuple[dict[str, dict], dict[str, dict]]:
    return SwaggerGenerator().extract_paths_and_definitions(api)


def swagger_json(
    api: ApiSurface | Mapping[str, Any], config: SwaggerConfig | None = None
) -> dict[str, Any]:
    """Produce the Swagger 2.0 document for an API surface."""
    return SwaggerGenerator(config).generate(api)


def validate(api: ApiSurface | Mapping[str, Any]) -> list[SchemaViolation] | None:
    """Check an API surface, merged with the defaults, against the input models.

    Returns:
        None if the surface is valid, else the list of violations.
    """
    if isinstance(api, ApiSurface):
        return None
    try:
        ApiSurface.model_validate({**SWAGGER_DEFAULTS, **surface_mapping(api)})
    except ValidationError as e:
        return _violations(e)
    return None


def validate_document(document: Mapping[str, Any]) -> list[SchemaViolation] | None:
    """Check an assembled document against the Swagger 2.0 models.

    Returns:
        None if the document is valid, else the list of violations.
    """
    try:
        Swagger.model_validate(dict(document))
    except ValidationError as e:
        return _violations(e)
    return None
