"""
Pydantic V2 models of the Swagger 2.0 document.

Based on the JSON Schema at: http://swagger.io/v2/schema.json

These models are the structural check run against generated documents:

    from swaggerkit.openapi.v2 import Swagger

    Swagger.model_validate(document)

Vendor extensions (``x-*`` keys) are accepted everywhere; any other unknown
key is rejected on the objects Swagger 2.0 closes.
"""

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator, model_validator


# ============================================================================
# Enums
# ============================================================================


class SchemeType(str, Enum):
    """Transfer protocol schemes."""

    HTTP = 'http'
    HTTPS = 'https'
    WS = 'ws'
    WSS = 'wss'


class ParameterLocation(str, Enum):
    QUERY = 'query'
    HEADER = 'header'
    PATH = 'path'
    FORM_DATA = 'formData'
    BODY = 'body'


class PrimitiveType(str, Enum):
    """Types allowed on non-body parameters and headers."""

    STRING = 'string'
    NUMBER = 'number'
    INTEGER = 'integer'
    BOOLEAN = 'boolean'
    ARRAY = 'array'
    FILE = 'file'


class CollectionFormat(str, Enum):
    CSV = 'csv'
    SSV = 'ssv'
    TSV = 'tsv'
    PIPES = 'pipes'
    MULTI = 'multi'


class SecuritySchemeType(str, Enum):
    BASIC = 'basic'
    API_KEY = 'apiKey'
    OAUTH2 = 'oauth2'


class OAuth2Flow(str, Enum):
    IMPLICIT = 'implicit'
    PASSWORD = 'password'
    APPLICATION = 'application'
    ACCESS_CODE = 'accessCode'


# ============================================================================
# Base Models
# ============================================================================


class VendorExtensible(BaseModel):
    """Base model that allows vendor extensions (x- fields)."""

    model_config = ConfigDict(extra='allow', populate_by_name=True)


class ClosedModel(VendorExtensible):
    """Base model that only allows vendor extensions as extra fields."""

    @model_validator(mode='after')
    def reject_unknown_fields(self):
        unknown = [k for k in self.__pydantic_extra__ or {} if not k.startswith('x-')]
        if unknown:
            raise ValueError(f'Unknown fields: {", ".join(sorted(unknown))}')
        return self


class JsonReference(BaseModel):
    """JSON Reference object."""

    ref: str = Field(..., alias='$ref')

    model_config = ConfigDict(extra='forbid', populate_by_name=True)


# ============================================================================
# Info Models
# ============================================================================


class Contact(VendorExtensible):
    name: str | None = None
    url: HttpUrl | None = None
    email: str | None = None


class License(VendorExtensible):
    name: str
    url: HttpUrl | None = None


class Info(ClosedModel):
    """General information about the API."""

    title: str
    version: str
    description: str | None = None
    terms_of_service: str | None = Field(None, alias='termsOfService')
    contact: Contact | None = None
    license: License | None = None


class ExternalDocs(VendorExtensible):
    url: HttpUrl
    description: str | None = None


class Tag(VendorExtensible):
    name: str
    description: str | None = None
    external_docs: ExternalDocs | None = Field(None, alias='externalDocs')


# ============================================================================
# Schema Models
# ============================================================================


class Schema(VendorExtensible):
    """JSON Schema object as restricted by Swagger 2.0.

    Only the keywords this library emits or commonly meets are typed; other
    JSON Schema keywords pass through as extras.
    """

    ref: str | None = Field(None, alias='$ref')
    format: str | None = None
    title: str | None = None
    description: str | None = None
    default: Any | None = None
    required: list[str] | None = Field(None, min_length=1)
    enum: list[Any] | None = None
    type: str | list[str] | None = None
    items: Union['Schema', list['Schema']] | None = None
    unique_items: bool | None = Field(None, alias='uniqueItems')
    all_of: list['Schema'] | None = Field(None, alias='allOf')
    properties: dict[str, 'Schema'] | None = None
    additional_properties: Union['Schema', bool] | None = Field(
        None, alias='additionalProperties'
    )
    discriminator: str | None = None
    read_only: bool = Field(False, alias='readOnly')
    example: Any | None = None


# ============================================================================
# Parameter Models
# ============================================================================


class PrimitivesItems(VendorExtensible):
    type: PrimitiveType | None = None
    format: str | None = None
    items: Union['PrimitivesItems', None] = None
    collection_format: CollectionFormat | None = Field(None, alias='collectionFormat')
    enum: list[Any] | None = None
    unique_items: bool | None = Field(None, alias='uniqueItems')


class BodyParameter(ClosedModel):
    name: str
    in_: Literal['body'] = Field(..., alias='in')
    description: str | None = None
    required: bool = False
    schema_: Schema = Field(..., alias='schema')


class NonBodyParameter(ClosedModel):
    """Query, header, path or formData parameter."""

    name: str
    in_: Literal['query', 'header', 'path', 'formData'] = Field(..., alias='in')
    description: str | None = None
    required: bool = False
    type: PrimitiveType
    format: str | None = None
    allow_empty_value: bool | None = Field(None, alias='allowEmptyValue')
    items: PrimitivesItems | None = None
    collection_format: CollectionFormat | None = Field(None, alias='collectionFormat')
    default: Any | None = None
    enum: list[Any] | None = None
    unique_items: bool | None = Field(None, alias='uniqueItems')

    @model_validator(mode='after')
    def validate_path_required(self) -> 'NonBodyParameter':
        """Path parameters must be required."""
        if self.in_ == ParameterLocation.PATH.value and not self.required:
            raise ValueError('Path parameters must have required=True')
        return self


Parameter = Union[BodyParameter, NonBodyParameter, JsonReference]


# ============================================================================
# Response Models
# ============================================================================


class Header(VendorExtensible):
    type: PrimitiveType
    format: str | None = None
    items: PrimitivesItems | None = None
    description: str | None = None


class Response(ClosedModel):
    description: str
    schema_: Schema | None = Field(None, alias='schema')
    headers: dict[str, Header] | None = None
    examples: dict[str, Any] | None = None


# ============================================================================
# Operation Models
# ============================================================================


class Operation(ClosedModel):
    """Operation (HTTP method) on a path."""

    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocs | None = Field(None, alias='externalDocs')
    operation_id: str | None = Field(None, alias='operationId')
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[Parameter] | None = None
    responses: dict[str, Response | JsonReference] = Field(..., min_length=1)
    schemes: list[SchemeType] | None = None
    deprecated: bool = False
    security: list[dict[str, list[str]]] | None = None

    @field_validator('responses')
    @classmethod
    def validate_status_codes(cls, responses: dict) -> dict:
        for key in responses:
            if key.startswith('x-') or key == 'default':
                continue
            if not (key.isdigit() and len(key) == 3):
                raise ValueError(
                    f"Response key must be a 3-digit status code or 'default', got: {key}"
                )
        return responses


class PathItem(ClosedModel):
    ref: str | None = Field(None, alias='$ref')
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[Parameter] | None = None


# ============================================================================
# Security Models
# ============================================================================


class SecurityScheme(VendorExtensible):
    """Security scheme; required fields depend on ``type`` and ``flow``."""

    type: SecuritySchemeType
    description: str | None = None
    name: str | None = None
    in_: Literal['header', 'query'] | None = Field(None, alias='in')
    flow: OAuth2Flow | None = None
    authorization_url: HttpUrl | None = Field(None, alias='authorizationUrl')
    token_url: HttpUrl | None = Field(None, alias='tokenUrl')
    scopes: dict[str, str] | None = None

    @model_validator(mode='after')
    def validate_scheme_fields(self) -> 'SecurityScheme':
        if self.type == SecuritySchemeType.API_KEY and not (self.name and self.in_):
            raise ValueError("apiKey security requires 'name' and 'in'")
        if self.type == SecuritySchemeType.OAUTH2 and self.flow is None:
            raise ValueError("oauth2 security requires 'flow'")
        return self


# ============================================================================
# Main Swagger Model
# ============================================================================


class Swagger(ClosedModel):
    """Root Swagger 2.0 document."""

    swagger: Literal['2.0']
    info: Info
    host: str | None = Field(None, pattern=r'^[^{}/ :\\]+(?::\d+)?$')
    base_path: str | None = Field(None, alias='basePath', pattern=r'^/')
    schemes: list[SchemeType] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    paths: dict[str, PathItem]
    definitions: dict[str, Schema] | None = None
    parameters: dict[str, Parameter] | None = None
    responses: dict[str, Response] | None = None
    security_definitions: dict[str, SecurityScheme] | None = Field(
        None, alias='securityDefinitions'
    )
    security: list[dict[str, list[str]]] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocs | None = Field(None, alias='externalDocs')

    @field_validator('paths')
    @classmethod
    def validate_path_keys(cls, paths: dict) -> dict:
        for key in paths:
            if not key.startswith('/'):
                raise ValueError(f"Path must start with '/', got: {key}")
        return paths
