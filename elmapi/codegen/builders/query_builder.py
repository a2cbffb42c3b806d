"""Query string building.

Query parameters are collected into a ``params`` list in a let binding.
Each parameter renders to a ``name=value`` token or to the empty string
when it is absent at call time; empty tokens are filtered out. Whether a
``?`` suffix is appended is decided when the generated function runs.
"""

from elmapi.codegen.options import ElmOptions
from elmapi.codegen.types import Endpoint, QueryArg, QueryArgKind

__all__ = ['QueryBuilder', 'build_let_params', 'build_query_suffix', 'param_to_str']

_PARAM_LINE_SEPARATOR = '\n          '


class QueryBuilder:
    """Renders query parameters of one endpoint.

    Example:
        >>> builder = QueryBuilder(options)
        >>> builder.param_to_str(QueryArg(Arg('published', BOOL), QueryArgKind.FLAG))
        'if published then\\n            "published="\\n          else\\n            ""'
    """

    def __init__(self, options: ElmOptions):
        self._options = options

    def param_to_str(self, query_arg: QueryArg) -> str:
        name = query_arg.name

        if query_arg.kind is QueryArgKind.NORMAL:
            # toString on a String would add extra quotes
            to_string_src = (
                ''
                if self._options.is_string_type(query_arg.arg.type)
                else 'toString >> '
            )
            lines = [
                name,
                f'  |> Maybe.map ({to_string_src}Http.uriEncode >> (++) "{name}=")',
                '  |> Maybe.withDefault ""',
            ]
        elif query_arg.kind is QueryArgKind.FLAG:
            lines = [
                f'if {name} then',
                f'  "{name}="',
                'else',
                '  ""',
            ]
        elif query_arg.kind is QueryArgKind.LIST:
            lines = [
                name,
                f'  |> List.map (\\val -> "{name}[]=" ++ (val |> toString |> Http.uriEncode))',
                '  |> String.join "&"',
            ]
        else:
            raise ValueError(f'Unknown query argument kind: {query_arg.kind}')

        return _PARAM_LINE_SEPARATOR.join(lines)

    def let_params(self, indent: str, query: tuple[QueryArg, ...]) -> list[str]:
        """Lines of the ``params`` let binding, or nothing without query params."""
        if not query:
            return []

        params = [self.param_to_str(query_arg) for query_arg in query]
        lines = [
            'params =',
            '  List.filter (not << String.isEmpty)',
            '    [ ' + f'\n{indent}    , '.join(params),
            '    ]',
        ]
        return [indent + line for line in lines]

    @staticmethod
    def query_suffix(indent: str, query: tuple[QueryArg, ...]) -> list[str]:
        """Lines appending ``?``-joined params to the URL when any are present."""
        if not query:
            return []

        lines = [
            '++ if List.isEmpty params then',
            '     ""',
            '   else',
            '     "?" ++ String.join "&" params',
        ]
        return [indent + line for line in lines]


def param_to_str(options: ElmOptions, query_arg: QueryArg) -> str:
    return QueryBuilder(options).param_to_str(query_arg)


def build_let_params(indent: str, options: ElmOptions, endpoint: Endpoint) -> list[str]:
    return QueryBuilder(options).let_params(indent, endpoint.query)


def build_query_suffix(indent: str, endpoint: Endpoint) -> list[str]:
    return QueryBuilder.query_suffix(indent, endpoint.query)
