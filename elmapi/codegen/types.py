"""Type tags and endpoint descriptors for elmapi code generation.

This module provides:
- ElmDatatype, a hashable tagged variant describing an Elm type
- parse_type for reading type expressions out of routes documents
- Arg, Static, Capture, QueryArg and Endpoint, the language-agnostic
  description of one HTTP endpoint
"""

import dataclasses
import enum
import re
from typing import Union

from elmapi.exceptions import TypeParseError

__all__ = [
    'ElmPrimitive',
    'ElmRef',
    'ElmDatatype',
    'INT',
    'BOOL',
    'CHAR',
    'FLOAT',
    'STRING',
    'DATE',
    'UNIT',
    'NO_CONTENT',
    'list_of',
    'maybe',
    'tuple2',
    'dict_of',
    'ref',
    'parse_type',
    'Arg',
    'Static',
    'Capture',
    'Segment',
    'QueryArgKind',
    'QueryArg',
    'Endpoint',
]


@dataclasses.dataclass(frozen=True)
class ElmPrimitive:
    """A built-in Elm type, optionally parameterised by element types."""

    kind: str
    args: tuple['ElmDatatype', ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.kind
        return f'{self.kind}({", ".join(str(a) for a in self.args)})'


@dataclasses.dataclass(frozen=True)
class ElmRef:
    """A user-declared Elm type such as a record or a union."""

    name: str

    def __str__(self) -> str:
        return self.name


ElmDatatype = Union[ElmPrimitive, ElmRef]

SCALAR_KINDS = ('Int', 'Bool', 'Char', 'Float', 'String', 'Date', 'Unit')
CONTAINER_ARITY = {'List': 1, 'Maybe': 1, 'Tuple2': 2, 'Dict': 2}

INT = ElmPrimitive('Int')
BOOL = ElmPrimitive('Bool')
CHAR = ElmPrimitive('Char')
FLOAT = ElmPrimitive('Float')
STRING = ElmPrimitive('String')
DATE = ElmPrimitive('Date')
UNIT = ElmPrimitive('Unit')
NO_CONTENT = ElmRef('NoContent')


def list_of(item: ElmDatatype) -> ElmPrimitive:
    # Elm strings are lists of characters
    if item == CHAR:
        return STRING
    return ElmPrimitive('List', (item,))


def maybe(item: ElmDatatype) -> ElmPrimitive:
    return ElmPrimitive('Maybe', (item,))


def tuple2(first: ElmDatatype, second: ElmDatatype) -> ElmPrimitive:
    return ElmPrimitive('Tuple2', (first, second))


def dict_of(key: ElmDatatype, value: ElmDatatype) -> ElmPrimitive:
    return ElmPrimitive('Dict', (key, value))


def ref(name: str) -> ElmRef:
    return ElmRef(name)


_TOKEN_RE = re.compile(r'\s*(?:([A-Z][A-Za-z0-9_.]*)|(\()|(\))|(,))')


class _TypeParser:
    """Recursive-descent parser for Elm type expressions.

    Grammar:
        type   := app
        app    := NAME atom* | atom
        atom   := NAME | '(' ')' | '(' type ')' | '(' type ',' type ')'
    """

    def __init__(self, text: str):
        self.text = text
        self.tokens = self._tokenize(text)
        self.pos = 0

    def _tokenize(self, text: str) -> list[str]:
        tokens = []
        pos = 0
        while pos < len(text):
            if text[pos:].strip() == '':
                break
            match = _TOKEN_RE.match(text, pos)
            if not match:
                raise TypeParseError(text, f'unexpected character at {pos}')
            tokens.append(match.group(match.lastindex))
            pos = match.end()
        return tokens

    def _peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            raise TypeParseError(self.text, 'unexpected end of input')
        self.pos += 1
        return token

    def _expect(self, token: str) -> None:
        found = self._next()
        if found != token:
            raise TypeParseError(self.text, f"expected '{token}', found '{found}'")

    def parse(self) -> ElmDatatype:
        if not self.tokens:
            raise TypeParseError(self.text, 'empty type')
        result = self._app()
        if self._peek() is not None:
            raise TypeParseError(self.text, f"unexpected '{self._peek()}'")
        return result

    def _app(self) -> ElmDatatype:
        token = self._peek()
        if token is None or token in (')', ','):
            raise TypeParseError(self.text, 'expected a type')
        if token == '(':
            return self._atom()

        name = self._next()
        args = []
        while self._peek() not in (None, ')', ','):
            args.append(self._atom())
        return self._construct(name, args)

    def _atom(self) -> ElmDatatype:
        token = self._next()
        if token == '(':
            if self._peek() == ')':
                self._next()
                return UNIT
            first = self._app()
            if self._peek() == ',':
                self._next()
                second = self._app()
                self._expect(')')
                return tuple2(first, second)
            self._expect(')')
            return first
        if token in (')', ','):
            raise TypeParseError(self.text, f"unexpected '{token}'")
        return self._construct(token, [])

    def _construct(self, name: str, args: list[ElmDatatype]) -> ElmDatatype:
        if name in SCALAR_KINDS:
            if args:
                raise TypeParseError(self.text, f'{name} takes no arguments')
            return ElmPrimitive(name)
        if name in CONTAINER_ARITY:
            if len(args) != CONTAINER_ARITY[name]:
                raise TypeParseError(
                    self.text,
                    f'{name} takes {CONTAINER_ARITY[name]} argument(s), got {len(args)}',
                )
            if name == 'List':
                return list_of(args[0])
            return ElmPrimitive(name, tuple(args))
        if args:
            raise TypeParseError(self.text, f'unknown type constructor {name}')
        return ElmRef(name)


def parse_type(text: str) -> ElmDatatype:
    """Parse an Elm type expression such as ``List (Maybe Int)``.

    Unknown capitalised names are treated as user-declared types.

    Raises:
        TypeParseError: If the expression is malformed.
    """
    return _TypeParser(text).parse()


@dataclasses.dataclass(frozen=True)
class Arg:
    name: str
    type: ElmDatatype


@dataclasses.dataclass(frozen=True)
class Static:
    text: str


@dataclasses.dataclass(frozen=True)
class Capture:
    arg: Arg


Segment = Union[Static, Capture]


class QueryArgKind(enum.Enum):
    NORMAL = 'normal'
    FLAG = 'flag'
    LIST = 'list'


@dataclasses.dataclass(frozen=True)
class QueryArg:
    arg: Arg
    kind: QueryArgKind = QueryArgKind.NORMAL

    @property
    def name(self) -> str:
        return self.arg.name


@dataclasses.dataclass(frozen=True)
class Endpoint:
    """One HTTP endpoint, as handed over by route loading.

    Attributes:
        function_name: Camel-cased name of the generated function.
        method: HTTP verb, e.g. 'GET'.
        path: URL segments in concatenation order.
        query: Query arguments in declaration order.
        body: Type of the JSON request body, if any.
        return_type: Type of the response. Required for generation.
    """

    function_name: str
    method: str
    path: tuple[Segment, ...] = ()
    query: tuple[QueryArg, ...] = ()
    body: ElmDatatype | None = None
    return_type: ElmDatatype | None = None

    @property
    def captures(self) -> list[Arg]:
        return [segment.arg for segment in self.path if isinstance(segment, Capture)]

    @property
    def arg_names(self) -> list[str]:
        """Function argument names: captures, query params, then body."""
        names = [arg.name for arg in self.captures]
        names.extend(query_arg.name for query_arg in self.query)
        if self.body is not None:
            names.append('body')
        return names

    @property
    def path_template(self) -> str:
        parts = []
        for segment in self.path:
            if isinstance(segment, Static):
                parts.append(segment.text)
            else:
                parts.append(f'{{{segment.arg.name}}}')
        return '/' + '/'.join(parts)
