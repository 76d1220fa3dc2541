import re
import unicodedata
from typing import Any
from urllib.parse import urlparse

__all__ = ('is_url', 'pascal_case', 'remove_empty_keys', 'swagger_path')

_PATH_PARAMETER = re.compile(r':([^/]+)')
_WORD_SEPARATOR = re.compile(r'[^A-Za-z0-9]+')


def pascal_case(segment: str) -> str:
    """Join the words of a field key into one PascalCase word.

    Words are split on any run of non-alphanumeric characters, so snake_case,
    kebab-case and dotted keys all collapse. Inner capitals are kept.

    Example:
        >>> pascal_case('owner_address'), pascal_case('ownerAddress')
        ('OwnerAddress', 'OwnerAddress')
    """
    nfkd_form = unicodedata.normalize('NFKD', segment)
    plain = ''.join(c for c in nfkd_form if not unicodedata.combining(c))
    words = [word for word in _WORD_SEPARATOR.split(plain) if word]
    return ''.join(word[0].upper() + word[1:] for word in words)


def is_url(text):
    try:
        result = urlparse(text)
        return result.scheme in ('http', 'https') and bool(result.netloc)
    except (TypeError, ValueError):
        return False


def remove_empty_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None or an empty collection.

    ``False`` and ``0`` are meaningful values and are kept.
    """
    return {
        k: v
        for k, v in data.items()
        if v is not None and not (isinstance(v, (dict, list, str)) and not v)
    }


def swagger_path(uri: str) -> str:
    """Convert colon path parameters into Swagger brace templates.

    Example:
        >>> swagger_path('/pets/:id/owner/:ownerId')
        '/pets/{id}/owner/{ownerId}'
    """
    return _PATH_PARAMETER.sub(r'{\1}', uri)
