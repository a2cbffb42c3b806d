import json
import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from elmapi.codegen.options import ElmExportOptions, ElmOptions
from elmapi.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['elmapi.yaml', 'elmapi.yml']

_ENV_VAR_RE = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}')


class DocumentConfig(BaseModel):
    """Represents a single routes document to be processed."""

    source: str = Field(..., description='Path or URL to the routes document.')

    output: str = Field(..., description='Output directory for the generated code.')

    module: str = Field(
        'Generated.Api', description='Dotted name of the generated Elm module.'
    )

    url_prefix: str | None = Field(
        None, description='Optional URL prefix overriding the global one.'
    )


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='ELMAPI_')

    documents: list[DocumentConfig] = Field(
        ..., description='List of routes documents to process.'
    )

    url_prefix: str = Field('', description='URL prefix for all documents.')

    empty_response_types: list[str] = Field(
        ['NoContent'], description='Types that represent an empty HTTP response.'
    )

    string_types: list[str] = Field(
        ['String'], description='Types that represent an Elm String.'
    )

    decoder_prefix: str = Field('decode')

    encoder_prefix: str = Field('encode')

    def to_options(self, document: DocumentConfig | None = None) -> ElmOptions:
        """Build generator options, letting the document override the prefix."""
        url_prefix = self.url_prefix
        if document is not None and document.url_prefix is not None:
            url_prefix = document.url_prefix

        try:
            return ElmOptions(
                url_prefix=url_prefix,
                export_options=ElmExportOptions(
                    decoder_prefix=self.decoder_prefix,
                    encoder_prefix=self.encoder_prefix,
                ),
                empty_response_types=self.empty_response_types,
                string_types=self.string_types,
            )
        except ValidationError as e:
            raise ConfigurationError(f'Invalid generator options: {e}') from e


def _expand_env_vars(value: str) -> str:
    """Expand ``${VAR}`` and ``${VAR:-default}`` references in a string."""

    def replace(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        if name in os.environ:
            return os.environ[name]
        if default is not None:
            return default
        raise ConfigurationError(
            f'Environment variable {name} is not set', field=name
        )

    return _ENV_VAR_RE.sub(replace, value)


def _expand_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return _expand_env_vars(data)
    if isinstance(data, dict):
        return {k: _expand_env_vars_recursive(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars_recursive(item) for item in data]
    return data


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.safe_load(Path(path).read_text())


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _validate(data: Any, config_path: str) -> CodegenConfig:
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', config_path)
    try:
        return CodegenConfig.model_validate(_expand_env_vars_recursive(data))
    except ValidationError as e:
        raise ConfigurationError(f'Invalid configuration: {e}', config_path) from e


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file or from the current directory."""
    if path:
        loader = load_json if Path(path).suffix.lower() == '.json' else load_yaml
        return _validate(loader(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _validate(load_yaml(path), str(path))

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        pyproject = tomllib.loads(path.read_text())
        tools = pyproject.get('tool', {})

        if 'elmapi' in tools:
            return _validate(tools['elmapi'], str(path))

    raise FileNotFoundError('config not found')


def create_default_config(path: str | Path = 'elmapi.yaml') -> Path:
    """Write a starter configuration file and return its path."""
    import yaml

    path = Path(path)
    if path.exists():
        raise ConfigurationError('Configuration file already exists', str(path))

    content = {
        'documents': [
            {
                'source': './routes.yaml',
                'output': './src',
                'module': 'Generated.Api',
            }
        ],
        'url_prefix': '',
        'empty_response_types': ['NoContent'],
        'string_types': ['String'],
    }
    path.write_text(yaml.safe_dump(content, sort_keys=False))
    return path
