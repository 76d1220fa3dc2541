"""Response conversion for Swagger operations."""

import logging
from collections.abc import Mapping
from typing import Any

from swaggerkit.routes import Response
from swaggerkit.schema import Model, to_schema
from swaggerkit.transform.json_schema import DEFAULT_OPTIONS, EncodingOptions, to_json
from swaggerkit.transform.model_collector import transform

logger = logging.getLogger(__name__)

__all__ = ['ResponseProcessor']


class ResponseProcessor:
    """Converts per-status responses into Swagger response objects.

    Responses only document an API, so conversion is relaxed: schemas
    without a wire mapping are left out instead of failing the document.

    Example:
        >>> processor = ResponseProcessor()
        >>> processor.convert_responses({200: {'description': 'OK', 'schema': [Pet]}})
        {'200': {'description': 'OK', 'schema': {'type': 'array', 'items': {'$ref': '#/definitions/Pet'}}}}
    """

    def __init__(self, options: EncodingOptions = DEFAULT_OPTIONS):
        self.options = options.relaxed()

    def convert_responses(self, responses: Mapping[Any, Any]) -> dict[str, dict]:
        """Convert responses, keyed by status code as a string."""
        converted = {}
        for status, response in responses.items():
            if not isinstance(response, Response):
                response = Response.model_validate(response)

            wire = response.model_dump(
                mode='json', by_alias=True, exclude_none=True, exclude={'schema_'}
            )
            if response.schema_ is not None:
                schema = self.response_schema(response.schema_)
                if schema:
                    wire['schema'] = schema
            converted[str(status)] = wire
        return converted

    def response_schema(self, schema: Any) -> dict | None:
        """Encode a response schema, rendering anonymous models inline."""
        fragment = to_json(schema, self.options)
        if fragment is not None:
            return fragment

        schema = to_schema(schema)
        if isinstance(schema, Model):
            return transform(schema, self.options)

        logger.debug(f'Leaving out response schema without a mapping: {schema!r}')
        return None
