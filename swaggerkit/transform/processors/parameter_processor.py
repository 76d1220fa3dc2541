"""Parameter conversion for Swagger operations.

This module provides the ParameterProcessor class that turns the per-location
parameter schemas of an operation into the Swagger parameter object list.
"""

import logging
from enum import Enum
from typing import Any

from swaggerkit.exceptions import UnmappedSchemaError
from swaggerkit.routes import Parameters
from swaggerkit.schema import (
    Container,
    Model,
    explicit_key,
    is_required_key,
    schema_name,
    to_schema,
)
from swaggerkit.transform.json_schema import (
    DEFAULT_OPTIONS,
    EncodingOptions,
    to_json,
    to_parameter,
)
from swaggerkit.transform.utils import remove_empty_keys

logger = logging.getLogger(__name__)

__all__ = ['BodyShape', 'ParameterProcessor', 'classify_body']


class BodyShape(str, Enum):
    """Shape of a body parameter schema."""

    SEQUENCE = 'sequence'
    SET = 'set'
    SINGLE = 'single'


def classify_body(schema: Any) -> tuple[BodyShape, Any]:
    """Split a body schema into its shape and the model it carries."""
    schema = to_schema(schema)
    if isinstance(schema, Container):
        shape = BodyShape.SET if schema.unique else BodyShape.SEQUENCE
        return shape, schema.item
    return BodyShape.SINGLE, schema


class ParameterProcessor:
    """Converts operation parameters into Swagger parameter objects.

    The body is emitted as a single ``in: body`` parameter referencing its
    model. Every other location is read as a model whose fields each become
    one parameter. Conversion is strict: a field without a wire mapping
    raises :class:`UnmappedSchemaError`.

    Example:
        >>> processor = ParameterProcessor()
        >>> processor.convert_parameters({'query': {optional_key('limit'): int}})
        [{'in': 'query', 'name': 'limit', 'required': False, 'type': 'integer', 'format': 'int64'}]
    """

    def __init__(self, options: EncodingOptions = DEFAULT_OPTIONS):
        self.options = options.strict()

    def convert_parameters(self, parameters: Parameters | dict | None) -> list[dict]:
        """Convert all parameter locations of an operation.

        Args:
            parameters: The operation's parameters, by location.

        Returns:
            Swagger parameter objects, body first, then query, path, header
            and formData fields in declaration order.
        """
        if parameters is None:
            return []
        if not isinstance(parameters, Parameters):
            parameters = Parameters.model_validate(parameters)

        result = []
        for location, schema in parameters.locations():
            if location == 'body':
                result.extend(self.extract_body_parameter(schema))
            else:
                result.extend(self.extract_parameter(location, schema))
        return result

    def extract_body_parameter(self, schema: Any) -> list[dict]:
        """Build the body parameter for a model, a sequence or a set of models.

        A model without a name cannot be referenced and yields no parameter.
        """
        shape, model = classify_body(schema)
        name = schema_name(model)
        if not name:
            logger.debug(f'Dropping body parameter without a model name: {model!r}')
            return []

        fragment = dict(to_json(model, self.options, context='body'))
        description = fragment.pop('description', None)

        if shape is BodyShape.SINGLE:
            body_schema = fragment
        else:
            body_schema = {'type': 'array', 'items': fragment}
            if shape is BodyShape.SET:
                body_schema['uniqueItems'] = True

        return [
            remove_empty_keys(
                {
                    'in': 'body',
                    'name': name,
                    'description': description,
                    'required': True,
                    'schema': body_schema,
                }
            )
        ]

    def extract_parameter(self, location: str, schema: Any) -> list[dict]:
        """Build one parameter per field of a non-body location's model."""
        model = to_schema(schema)
        if not isinstance(model, Model):
            raise UnmappedSchemaError(schema, context=location)

        params = []
        for key, value in model.specific_items():
            name = explicit_key(key)
            fragment = to_json(value, self.options, context=f'{location}.{name}')
            params.append(
                to_parameter(
                    {'in': location, 'name': name, 'required': is_required_key(key)},
                    fragment,
                )
            )
        return params
