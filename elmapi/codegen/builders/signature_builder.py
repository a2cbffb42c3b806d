"""Type signature building for generated Elm functions.

The signature lists one type per function argument, in argument order
(captures, query params, body), followed by the task type of the result.
"""

from typing import Self

from elmapi.codegen.options import ElmOptions
from elmapi.codegen.type_resolver import DEFAULT_RESOLVER, TypeResolver
from elmapi.codegen.types import Arg, ElmDatatype, Endpoint, QueryArg, QueryArgKind, maybe
from elmapi.exceptions import MissingResponseTypeError

__all__ = ['TypeSignatureBuilder', 'build_type_signature', 'build_args_list']


class TypeSignatureBuilder:
    """Builder for the type signature of one endpoint function.

    Example:
        >>> signature = (
        ...     TypeSignatureBuilder(options)
        ...     .add_captures(endpoint.captures)
        ...     .add_query_args(endpoint.query)
        ...     .add_body(endpoint.body)
        ...     .add_return_type(endpoint.return_type, endpoint.function_name)
        ...     .build()
        ... )
        >>> # 'Int -> Task.Task Http.Error (Book)'
    """

    def __init__(self, options: ElmOptions, resolver: TypeResolver = DEFAULT_RESOLVER):
        self._options = options
        self._resolver = resolver
        self._types: list[str] = []

    def _ref(self, elm_type: ElmDatatype) -> str:
        return self._resolver.type_ref(elm_type, self._options.export_options)

    def add_captures(self, captures: list[Arg]) -> Self:
        for arg in captures:
            self._types.append(self._ref(arg.type))
        return self

    def add_query_args(self, query: tuple[QueryArg, ...]) -> Self:
        """Add query parameter types.

        Normal parameters may be left out at call time, so they are
        wrapped in Maybe. Flags and lists keep their declared type.
        """
        for query_arg in query:
            if query_arg.kind is QueryArgKind.NORMAL:
                self._types.append(self._ref(maybe(query_arg.arg.type)))
            else:
                self._types.append(self._ref(query_arg.arg.type))
        return self

    def add_body(self, body: ElmDatatype | None) -> Self:
        if body is not None:
            self._types.append(self._ref(body))
        return self

    def add_return_type(self, return_type: ElmDatatype | None, function_name: str) -> Self:
        """Add the result type wrapped in ``Task.Task Http.Error``.

        Raises:
            MissingResponseTypeError: If no return type is declared.
        """
        if return_type is None:
            raise MissingResponseTypeError(function_name)
        self._types.append(f'Task.Task Http.Error ({self._ref(return_type)})')
        return self

    def build(self) -> str:
        return ' -> '.join(self._types)


def build_type_signature(
    options: ElmOptions,
    endpoint: Endpoint,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> str:
    """Build the type signature (without the function name) for an endpoint."""
    return (
        TypeSignatureBuilder(options, resolver)
        .add_captures(endpoint.captures)
        .add_query_args(endpoint.query)
        .add_body(endpoint.body)
        .add_return_type(endpoint.return_type, endpoint.function_name)
        .build()
    )


def build_args_list(endpoint: Endpoint) -> list[str]:
    return endpoint.arg_names
