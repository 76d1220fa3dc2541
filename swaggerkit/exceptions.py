"""Custom exceptions for swaggerkit.

This module defines the hierarchy of exceptions raised while turning an API
surface into a Swagger document, so callers can tell a broken schema apart
from a broken configuration or an unwritable output location.
"""

from typing import Any


class SwaggerKitError(Exception):
    """Base exception for all swaggerkit errors.

    Example:
        try:
            swagger_json(api)
        except SwaggerKitError as e:
            print(f"swaggerkit error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(SwaggerKitError):
    """Base exception for schema-related errors."""

    pass


class UnmappedSchemaError(SchemaError):
    """A schema has no wire-format mapping.

    Raised in strict contexts (body parameters, non-body parameter fields,
    model properties) when the encoder meets a schema it cannot express, or
    an anonymous model where only a ``$ref`` is allowed.

    Attributes:
        schema: The schema that could not be mapped.
        context: Where the schema was met, e.g. a field or parameter name.
    """

    def __init__(self, schema: Any, context: str | None = None):
        self.schema = schema
        self.context = context
        message = f"Don't know how to convert {schema!r} into a Swagger schema"
        if context:
            message += f" (at '{context}')"
        super().__init__(message)


class SchemaLoadError(SchemaError):
    """Failed to load an API surface or a document from a source.

    Attributes:
        source: The import path or file path that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """A document failed Swagger 2.0 structural validation.

    Attributes:
        source: The source of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Swagger validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ConfigurationError(SwaggerKitError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(SwaggerKitError):
    """Error writing the generated document.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
