"""Loading of routes documents.

A routes document declares the endpoints of an API in YAML or JSON:

    module: Generated.BooksApi
    routes:
      - method: GET
        path: /books/{id:Int}
        response: Book
      - method: GET
        path: /books
        query:
          - {name: published, kind: flag}
          - {name: sort, type: String}
          - {name: filters, type: Maybe Bool, kind: list}
        response: List Book

Captures are written ``{name:Type}`` (``{name}`` means a String capture).
Function names are derived from the method and the path unless given.
"""

import http
import json
import logging
import re
from pathlib import Path
from typing import Any, Literal

import httpx
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from elmapi.codegen.response_strategy import HELPER_NAMES
from elmapi.codegen.types import (
    BOOL,
    Arg,
    Capture,
    Endpoint,
    QueryArg,
    QueryArgKind,
    Static,
    list_of,
    parse_type,
)
from elmapi.codegen.utils import ELM_KEYWORDS, camel_case, is_url
from elmapi.exceptions import RoutesLoadError, RoutesValidationError, TypeParseError

__all__ = ['QueryArgSpec', 'RouteSpec', 'RoutesDocument', 'RouteLoader', 'parse_path']

logger = logging.getLogger(__name__)

HTTP_METHODS = {method.value for method in http.HTTPMethod}

_CAPTURE_RE = re.compile(r'^\{\s*([^:}\s]+)\s*(?::\s*([^}]+?)\s*)?\}$')
_IDENTIFIER_RE = re.compile(r'^[a-z][A-Za-z0-9_]*$')


def _check_type(value: str | None) -> str | None:
    if value is not None:
        try:
            parse_type(value)
        except TypeParseError as e:
            raise ValueError(str(e)) from e
    return value


def _check_identifier(name: str) -> str:
    if not _IDENTIFIER_RE.match(name) or name in ELM_KEYWORDS:
        raise ValueError(f'{name!r} is not a valid Elm argument name')
    return name


def parse_path(path: str) -> tuple:
    """Split a path template into Static and Capture segments.

    Raises:
        ValueError: If a capture is malformed.
    """
    segments = []
    for part in path.strip('/').split('/'):
        if not part:
            continue
        if part.startswith('{'):
            match = _CAPTURE_RE.match(part)
            if not match:
                raise ValueError(f'Malformed capture {part!r} in path {path!r}')
            name = _check_identifier(match.group(1))
            type_text = _check_type(match.group(2)) or 'String'
            segments.append(Capture(Arg(name, parse_type(type_text))))
        else:
            segments.append(Static(part))
    return tuple(segments)


class QueryArgSpec(BaseModel):
    name: str = Field(..., description='Name of the query parameter and argument.')
    type: str | None = Field(
        None, description='Elm type; element type for list parameters.'
    )
    kind: Literal['normal', 'flag', 'list'] = 'normal'

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str) -> str:
        return _check_identifier(value)

    @field_validator('type')
    @classmethod
    def validate_type(cls, value: str | None) -> str | None:
        return _check_type(value)

    @model_validator(mode='after')
    def require_type(self):
        if self.kind != 'flag' and self.type is None:
            raise ValueError(f"Query parameter '{self.name}' needs a type")
        return self

    def to_query_arg(self) -> QueryArg:
        kind = QueryArgKind(self.kind)
        if kind is QueryArgKind.FLAG:
            arg_type = BOOL
        elif kind is QueryArgKind.LIST:
            arg_type = list_of(parse_type(self.type))
        else:
            arg_type = parse_type(self.type)
        return QueryArg(Arg(self.name, arg_type), kind)


class RouteSpec(BaseModel):
    method: str = Field(..., description='HTTP method.')
    path: str = Field(..., description='Path template, e.g. /books/{id:Int}.')
    query: list[QueryArgSpec] = Field(default_factory=list)
    body: str | None = Field(None, description='Elm type of the JSON request body.')
    response: str = Field(..., description='Elm type of the response.')
    name: str | None = Field(None, description='Name of the generated function.')

    @field_validator('name')
    @classmethod
    def validate_name(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if value in HELPER_NAMES:
            raise ValueError(f'{value!r} is reserved for a generated helper')
        return _check_identifier(value)

    @field_validator('body', 'response')
    @classmethod
    def validate_types(cls, value: str | None) -> str | None:
        return _check_type(value)

    @field_validator('method')
    @classmethod
    def validate_method(cls, value: str) -> str:
        method = value.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f'Unknown HTTP method {value!r}')
        return method

    @field_validator('path')
    @classmethod
    def validate_path(cls, value: str) -> str:
        parse_path(value)
        return value

    @model_validator(mode='after')
    def check_argument_names(self):
        names = [s.arg.name for s in parse_path(self.path) if isinstance(s, Capture)]
        names.extend(q.name for q in self.query)
        if self.body is not None:
            names.append('body')
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f'Duplicate argument names: {", ".join(duplicates)}')
        return self

    def function_name(self) -> str:
        """The given name, or one derived like ``getBooksById``."""
        if self.name:
            return self.name

        parts = [self.method.lower()]
        for segment in parse_path(self.path):
            if isinstance(segment, Static):
                parts.append(segment.text)
            else:
                parts.extend(['by', segment.arg.name])
        return camel_case(parts)

    def to_endpoint(self) -> Endpoint:
        return Endpoint(
            function_name=self.function_name(),
            method=self.method,
            path=parse_path(self.path),
            query=tuple(q.to_query_arg() for q in self.query),
            body=parse_type(self.body) if self.body is not None else None,
            return_type=parse_type(self.response),
        )


class RoutesDocument(BaseModel):
    module: str | None = Field(None, description='Dotted Elm module name.')
    url_prefix: str | None = Field(None, description='URL prefix for all routes.')
    routes: list[RouteSpec] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_unique_names(self):
        names = [route.function_name() for route in self.routes]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f'Duplicate function names: {", ".join(duplicates)}')
        return self

    def to_endpoints(self) -> list[Endpoint]:
        return [route.to_endpoint() for route in self.routes]


class RouteLoader:
    """Loads routes documents from URLs or file paths.

    Example:
        >>> loader = RouteLoader()
        >>> document = loader.load('./routes.yaml')
        >>> endpoints = document.to_endpoints()
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
            base_path: Base path for relative file paths. Defaults to the
                current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> RoutesDocument:
        """Load and validate a routes document.

        Raises:
            RoutesLoadError: If the document cannot be read or parsed.
            RoutesValidationError: If the document is not a valid routes document.
        """
        if is_url(source):
            content = self._load_from_url(source)
        else:
            content = self._load_from_file(source)

        return self._validate(content, source)

    def load_endpoints(self, source: str) -> list[Endpoint]:
        return self.load(source).to_endpoints()

    def _load_from_url(self, url: str) -> Any:
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            content = response.text

            if 'json' in content_type or url.endswith('.json'):
                return json.loads(content)
            return yaml.safe_load(content)

        except httpx.HTTPError as e:
            raise RoutesLoadError(url, cause=e) from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise RoutesLoadError(url, cause=e) from e

    def _load_from_file(self, file_path: str) -> Any:
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise RoutesLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() == '.json':
                return json.loads(content)
            return yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise RoutesLoadError(str(file_path), cause=e) from e
        except OSError as e:
            raise RoutesLoadError(str(file_path), cause=e) from e

    def _validate(self, content: Any, source: str) -> RoutesDocument:
        if not isinstance(content, dict):
            raise RoutesValidationError(source, errors=['document must be a mapping'])

        try:
            document = RoutesDocument.model_validate(content)
        except ValidationError as e:
            errors = [
                f'{".".join(str(part) for part in error["loc"]) or "document"}: {error["msg"]}'
                for error in e.errors()
            ]
            raise RoutesValidationError(source, errors=errors) from e

        logger.debug(f'Loaded {len(document.routes)} routes from {source}')
        return document
