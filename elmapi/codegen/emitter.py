"""Code emitter interfaces and implementations for generated Elm modules.

This module provides the ElmModuleEmitter interface and concrete
implementations for emitting a generated Elm module to disk or to a string.
The generator itself produces bare declarations; the emitter adds the module
header and the import preamble the declarations rely on.
"""

import dataclasses
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path

from upath import UPath

from elmapi.exceptions import OutputError

__all__ = [
    'DEFAULT_ELM_IMPORTS',
    'ElmSpec',
    'ElmModuleEmitter',
    'FileEmitter',
    'StringEmitter',
    'render_module',
    'validate_module_name',
]

logger = logging.getLogger(__name__)

DEFAULT_ELM_IMPORTS = '\n'.join(
    [
        'import Json.Decode exposing (..)',
        'import Json.Decode.Pipeline exposing (..)',
        'import Json.Encode',
        'import Http',
        'import String',
        'import Task',
    ]
)

_MODULE_SEGMENT_RE = re.compile(r'^[A-Z][A-Za-z0-9_]*$')


@dataclasses.dataclass(frozen=True)
class ElmSpec:
    """A module to emit: its namespace and its declarations.

    Attributes:
        namespace: Module path segments, e.g. ('Generated', 'BooksApi').
        declarations: Declarations in output order.
        imports: Import preamble placed after the module header.
    """

    namespace: tuple[str, ...]
    declarations: tuple[str, ...]
    imports: str = DEFAULT_ELM_IMPORTS

    @classmethod
    def from_module_name(
        cls, module_name: str, declarations: list[str], imports: str = DEFAULT_ELM_IMPORTS
    ) -> 'ElmSpec':
        return cls(
            namespace=validate_module_name(module_name),
            declarations=tuple(declarations),
            imports=imports,
        )

    @property
    def module_name(self) -> str:
        return '.'.join(self.namespace)

    @property
    def relative_path(self) -> str:
        return '/'.join(self.namespace) + '.elm'


def validate_module_name(module_name: str) -> tuple[str, ...]:
    """Split a dotted Elm module name and check every segment.

    Raises:
        OutputError: If a segment is not a capitalised Elm identifier.
    """
    segments = tuple(module_name.split('.'))
    for segment in segments:
        if not _MODULE_SEGMENT_RE.match(segment):
            raise OutputError(
                module_name,
                cause=ValueError(f'Invalid Elm module name segment: {segment!r}'),
            )
    return segments


def render_module(spec: ElmSpec) -> str:
    """Render the full source of a module."""
    parts = [f'module {spec.module_name} exposing (..)']
    if spec.imports:
        parts.append(spec.imports)
    parts.extend(spec.declarations)
    return '\n\n'.join(parts) + '\n'


class ElmModuleEmitter(ABC):
    """Abstract base class for module emitters."""

    @abstractmethod
    def emit(self, spec: ElmSpec) -> str:
        """Emit a module.

        Returns:
            The path of the written file, or the source code, depending
            on the implementation.
        """
        pass


class FileEmitter(ElmModuleEmitter):
    """Writes modules below an output directory.

    ``Generated.BooksApi`` is written to ``<output_dir>/Generated/BooksApi.elm``.
    Any filesystem supported by universal-pathlib can be targeted.
    """

    def __init__(self, output_dir: str | Path | UPath):
        self.output_dir = UPath(output_dir)
        self._written_files: list[str] = []

    def emit(self, spec: ElmSpec) -> str:
        file_path = self.output_dir / spec.relative_path
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(render_module(spec), encoding='utf-8')
        except OSError as e:
            raise OutputError(str(file_path), cause=e) from e

        logger.info(f'Wrote {spec.module_name} to {file_path}')
        self._written_files.append(str(file_path))
        return str(file_path)

    def get_written_files(self) -> list[str]:
        return self._written_files.copy()


class StringEmitter(ElmModuleEmitter):
    """Keeps emitted modules in memory, keyed by module name."""

    def __init__(self):
        self._modules: dict[str, str] = {}

    def emit(self, spec: ElmSpec) -> str:
        source = render_module(spec)
        self._modules[spec.module_name] = source
        return source

    def get_module(self, name: str) -> str | None:
        return self._modules.get(name)

    def get_all_modules(self) -> dict[str, str]:
        return self._modules.copy()
