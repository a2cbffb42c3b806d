"""Resolution of Elm type tags to type, decoder and encoder references.

The builders never render types themselves. They ask a TypeResolver, so a
project with its own naming scheme for decoders and encoders can plug in a
different resolver without touching the generator.
"""

from abc import ABC, abstractmethod

from elmapi.codegen.options import ElmExportOptions
from elmapi.codegen.types import CHAR, ElmDatatype, ElmPrimitive, ElmRef

__all__ = ['TypeResolver', 'ElmTypeResolver', 'DEFAULT_RESOLVER']

_SCALAR_REFS = {
    'Int': 'Int',
    'Bool': 'Bool',
    'Char': 'Char',
    'Float': 'Float',
    'String': 'String',
    'Date': 'Date',
    'Unit': '()',
}

_SCALAR_DECODERS = {
    'Int': 'int',
    'Bool': 'bool',
    'Char': 'char',
    'Float': 'float',
    'String': 'string',
    'Date': '(customDecoder string Date.fromString)',
    'Unit': '(succeed ())',
}

_SCALAR_ENCODERS = {
    'Int': 'Json.Encode.int',
    'Bool': 'Json.Encode.bool',
    'Char': '(Json.Encode.string << String.fromChar)',
    'Float': 'Json.Encode.float',
    'String': 'Json.Encode.string',
    'Date': '(Json.Encode.string << toString)',
    'Unit': '(always Json.Encode.null)',
}


class TypeResolver(ABC):
    """Maps an Elm type tag to the names used in generated code.

    Implementations must be total over every ElmDatatype they can be handed.
    """

    @abstractmethod
    def type_ref(self, elm_type: ElmDatatype, options: ElmExportOptions) -> str:
        """Return the Elm type reference, e.g. ``List (Book)``."""

    @abstractmethod
    def decoder_ref(self, elm_type: ElmDatatype, options: ElmExportOptions) -> str:
        """Return an expression decoding JSON into the type."""

    @abstractmethod
    def encoder_ref(self, elm_type: ElmDatatype, options: ElmExportOptions) -> str:
        """Return an expression encoding the type as a JSON value."""


def _is_string_list(elm_type: ElmPrimitive) -> bool:
    return elm_type.kind == 'List' and elm_type.args[0] == CHAR


class ElmTypeResolver(TypeResolver):
    """Default resolver following the elm-export conventions.

    Named types are referenced by name and get their decoder and encoder
    from the configured prefixes: ``Book`` is decoded by ``decodeBook`` and
    encoded by ``encodeBook``.
    """

    def type_ref(self, elm_type: ElmDatatype, options: ElmExportOptions) -> str:
        if isinstance(elm_type, ElmRef):
            return elm_type.name

        if elm_type.kind in _SCALAR_REFS:
            return _SCALAR_REFS[elm_type.kind]
        if _is_string_list(elm_type):
            return 'String'

        args = [self.type_ref(arg, options) for arg in elm_type.args]
        if elm_type.kind == 'Tuple2':
            return f'({args[0]}, {args[1]})'
        return ' '.join([elm_type.kind] + [f'({arg})' for arg in args])

    def decoder_ref(self, elm_type: ElmDatatype, options: ElmExportOptions) -> str:
        if isinstance(elm_type, ElmRef):
            return f'{options.decoder_prefix}{elm_type.name}'

        if elm_type.kind in _SCALAR_DECODERS:
            return _SCALAR_DECODERS[elm_type.kind]
        if _is_string_list(elm_type):
            return 'string'

        args = [self.decoder_ref(arg, options) for arg in elm_type.args]
        if elm_type.kind == 'List':
            return f'(list {args[0]})'
        if elm_type.kind == 'Maybe':
            return f'(maybe {args[0]})'
        if elm_type.kind == 'Tuple2':
            return f'(tuple2 (,) {args[0]} {args[1]})'
        if elm_type.kind == 'Dict':
            return f'(map Dict.fromList (list (tuple2 (,) {args[0]} {args[1]})))'
        raise ValueError(f'Unknown Elm type: {elm_type}')

    def encoder_ref(self, elm_type: ElmDatatype, options: ElmExportOptions) -> str:
        if isinstance(elm_type, ElmRef):
            return f'{options.encoder_prefix}{elm_type.name}'

        if elm_type.kind in _SCALAR_ENCODERS:
            return _SCALAR_ENCODERS[elm_type.kind]
        if _is_string_list(elm_type):
            return 'Json.Encode.string'

        args = [self.encoder_ref(arg, options) for arg in elm_type.args]
        if elm_type.kind == 'List':
            return f'(Json.Encode.list << List.map {args[0]})'
        if elm_type.kind == 'Maybe':
            return f'(Maybe.withDefault Json.Encode.null << Maybe.map {args[0]})'
        if elm_type.kind == 'Tuple2':
            return f'(\\(a, b) -> Json.Encode.list [ {args[0]} a, {args[1]} b ])'
        if elm_type.kind == 'Dict':
            return (
                f'(Json.Encode.object << List.map (\\(k, v) -> (k, {args[1]} v))'
                ' << Dict.toList)'
            )
        raise ValueError(f'Unknown Elm type: {elm_type}')


DEFAULT_RESOLVER = ElmTypeResolver()
