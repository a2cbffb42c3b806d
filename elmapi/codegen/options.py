"""Generator options shared by every builder."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from elmapi.codegen.types import NO_CONTENT, STRING, ElmPrimitive, ElmRef, parse_type
from elmapi.exceptions import TypeParseError

__all__ = ['ElmExportOptions', 'ElmOptions', 'DEFAULT_OPTIONS']


class ElmExportOptions(BaseModel):
    """Naming options handed to the type resolver."""

    model_config = ConfigDict(frozen=True)

    decoder_prefix: str = Field(
        'decode', description='Prefix of the JSON decoder for a named type.'
    )
    encoder_prefix: str = Field(
        'encode', description='Prefix of the JSON encoder for a named type.'
    )


class ElmOptions(BaseModel):
    """Options that control how Elm code is generated.

    Type tags may be given as ElmDatatype values or as type expressions
    such as ``'NoContent'`` or ``'String'``.
    """

    model_config = ConfigDict(frozen=True)

    url_prefix: str = Field(
        '',
        description='Protocol, host and path prefix used as the base for all '
        'requests, e.g. "https://mydomain.com/api/v1".',
    )
    export_options: ElmExportOptions = Field(default_factory=ElmExportOptions)
    empty_response_types: tuple[Any, ...] = Field(
        (NO_CONTENT,), description='Types that represent an empty HTTP response.'
    )
    string_types: tuple[Any, ...] = Field(
        (STRING,), description='Types that represent an Elm String.'
    )

    @field_validator('empty_response_types', 'string_types', mode='before')
    @classmethod
    def parse_type_tags(cls, value):
        if isinstance(value, (str, ElmPrimitive, ElmRef)):
            value = [value]

        tags = []
        for item in value:
            if isinstance(item, str):
                try:
                    item = parse_type(item)
                except TypeParseError as e:
                    raise ValueError(str(e)) from e
            if not isinstance(item, (ElmPrimitive, ElmRef)):
                raise ValueError(f'Not an Elm type: {item!r}')
            tags.append(item)
        return tuple(tags)

    def is_empty_type(self, elm_type) -> bool:
        """Whether an endpoint returning this type expects an empty body."""
        return elm_type in self.empty_response_types

    def is_string_type(self, elm_type) -> bool:
        """Whether values of this type are already Elm Strings."""
        return elm_type in self.string_types


DEFAULT_OPTIONS = ElmOptions()
