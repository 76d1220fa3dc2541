"""Loading of API surfaces and Swagger documents.

This module provides utilities for:
- Importing an API surface from a ``module:attribute`` path
- Loading existing Swagger documents from URLs or local files (JSON/YAML)
"""

import importlib
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
import yaml

from swaggerkit.exceptions import SchemaLoadError
from swaggerkit.routes import ApiSurface
from swaggerkit.transform.utils import is_url

logger = logging.getLogger(__name__)

__all__ = [
    'DocumentLoader',
    'load_api',
]


def load_api(target: str) -> ApiSurface | Mapping[str, Any]:
    """Import an API surface from ``package.module:attribute``.

    A callable attribute is called without arguments and its result used,
    so factories work as well as module-level values.

    Raises:
        SchemaLoadError: If the target cannot be imported or does not hold
            an API surface.
    """
    module_name, sep, attribute = target.partition(':')
    if not sep or not module_name or not attribute:
        raise SchemaLoadError(
            target, cause=ValueError("expected the form 'package.module:attribute'")
        )

    try:
        value: Any = importlib.import_module(module_name)
        for part in attribute.split('.'):
            value = getattr(value, part)
        if callable(value) and not isinstance(value, type):
            value = value()
    except Exception as e:
        raise SchemaLoadError(target, cause=e)

    if not isinstance(value, (ApiSurface, Mapping)):
        raise SchemaLoadError(
            target, cause=TypeError(f'expected a mapping, got {type(value).__name__}')
        )
    logger.debug(f'Loaded API surface from {target}')
    return value


class DocumentLoader:
    """Loads Swagger documents from URLs or file paths.

    Example:
        >>> loader = DocumentLoader()
        >>> document = loader.load('https://petstore.swagger.io/v2/swagger.json')
        >>> # or
        >>> document = loader.load('./swagger.yaml')
    """

    def __init__(self, http_client: httpx.Client | None = None):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used.
        """
        self._http_client = http_client

    def load(self, source: str) -> dict:
        """Load a document from a URL or a file path.

        Raises:
            SchemaLoadError: If the document cannot be read or parsed.
        """
        if is_url(source):
            document = self._load_from_url(source)
        else:
            document = self._load_from_file(source)

        if not isinstance(document, dict):
            raise SchemaLoadError(source, cause=ValueError('document is not a mapping'))
        return document

    def _load_from_url(self, url: str) -> Any:
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            content = response.text

            if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
                return yaml.safe_load(content)
            return json.loads(content)

        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> Any:
        path = Path(file_path)

        if not path.exists():
            raise SchemaLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(str(file_path), cause=e)
