import os
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from swaggerkit.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['swaggerkit.yaml', 'swaggerkit.yml']


class SwaggerConfig(BaseSettings):
    """Document defaults and generation settings.

    Every field can also be set from the environment with the
    ``SWAGGERKIT_`` prefix, e.g. ``SWAGGERKIT_TITLE``.
    """

    model_config = SettingsConfigDict(env_prefix='SWAGGERKIT_')

    title: str = Field('Swagger API', description='Default info.title of the document.')

    api_version: str = Field('0.0.1', description='Default info.version of the document.')

    produces: list[str] = Field(
        default_factory=lambda: ['application/json'],
        description='Default media types the API produces.',
    )

    consumes: list[str] = Field(
        default_factory=lambda: ['application/json'],
        description='Default media types the API consumes.',
    )

    validate_output: bool = Field(
        False, description='Whether to validate generated documents against Swagger 2.0.'
    )

    output_format: Literal['json', 'yaml'] = Field(
        'json', description='Serialization format of written documents.'
    )

    def document_defaults(self) -> dict[str, Any]:
        """Top-level fields every generated document starts from."""
        return {
            'swagger': '2.0',
            'info': {'title': self.title, 'version': self.api_version},
            'produces': list(self.produces),
            'consumes': list(self.consumes),
        }


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.safe_load(Path(path).read_text()) or {}


def _from_mapping(data: dict, config_path: str) -> SwaggerConfig:
    try:
        return SwaggerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(str(e), config_path=config_path)


def get_config(path: str | None = None) -> SwaggerConfig:
    """Load configuration from a file, the project or the environment.

    Looks at, in order: the given path, ``swaggerkit.yaml``/``swaggerkit.yml``
    in the working directory, and ``[tool.swaggerkit]`` in ``pyproject.toml``.
    Falls back to defaults (plus environment variables) when none is found.

    Raises:
        ConfigurationError: If the given file is missing or invalid.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _from_mapping(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _from_mapping(load_yaml(candidate), str(candidate))

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        import tomllib

        pyproject = tomllib.loads(candidate.read_text())
        tools = pyproject.get('tool', {})

        if 'swaggerkit' in tools:
            return _from_mapping(tools['swaggerkit'], str(candidate))

    return SwaggerConfig()
