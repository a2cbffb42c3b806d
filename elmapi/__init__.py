"""elmapi - Generate typed Elm HTTP clients from endpoint declarations.

elmapi turns a list of endpoint descriptions (method, path with captures,
query parameters, request body and response type) into Elm functions that
build the request, send it and decode the response.

Quick Start:
    >>> from elmapi import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(
    ...     source="./routes.yaml",
    ...     output="./src",
    ...     module="Generated.Api",
    ... )
    >>> codegen = Codegen(config)
    >>> codegen.generate()

CLI Usage:
    $ elmapi generate --config elmapi.yaml
    $ elmapi init  # Create a configuration file
    $ elmapi validate ./routes.yaml  # Validate a routes document
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

from elmapi.codegen.codegen import Codegen
from elmapi.codegen.generator import generate_elm_for_api
from elmapi.codegen.endpoints import generate_elm_for_request
from elmapi.codegen.emitter import DEFAULT_ELM_IMPORTS
from elmapi.codegen.options import DEFAULT_OPTIONS, ElmExportOptions, ElmOptions
from elmapi.config import CodegenConfig, DocumentConfig, get_config
from elmapi.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    ElmAPIError,
    EndpointGenerationError,
    MissingResponseTypeError,
    OutputError,
    RoutesError,
    RoutesLoadError,
    RoutesValidationError,
    TypeParseError,
)
from elmapi.routes import RouteLoader, RoutesDocument

__all__ = [
    # Main classes
    'Codegen',
    'RouteLoader',
    'RoutesDocument',
    'generate_elm_for_api',
    'generate_elm_for_request',
    'DEFAULT_ELM_IMPORTS',
    # Configuration
    'ElmOptions',
    'ElmExportOptions',
    'DEFAULT_OPTIONS',
    'CodegenConfig',
    'DocumentConfig',
    'get_config',
    # Exceptions
    'ElmAPIError',
    'RoutesError',
    'RoutesLoadError',
    'RoutesValidationError',
    'TypeParseError',
    'CodeGenerationError',
    'MissingResponseTypeError',
    'EndpointGenerationError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = _package_version('elmapi')
except PackageNotFoundError:
    __version__ = 'unknown'
