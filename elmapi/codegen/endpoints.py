"""Generation of one Elm function per endpoint."""

import dataclasses

from elmapi.codegen.builders import (
    build_args_list,
    build_let_params,
    build_let_request,
    build_type_signature,
)
from elmapi.codegen.options import ElmOptions
from elmapi.codegen.response_strategy import build_http_request
from elmapi.codegen.type_resolver import DEFAULT_RESOLVER, TypeResolver
from elmapi.codegen.types import Endpoint

__all__ = ['GeneratedFunction', 'emit_function', 'generate_elm_for_request']

LET_INDENT = '    '


@dataclasses.dataclass(frozen=True)
class GeneratedFunction:
    """The text of one endpoint function and the helpers it depends on."""

    name: str
    source: str
    supporting_definitions: tuple[str, ...] = ()

    def to_blocks(self) -> list[str]:
        return list(self.supporting_definitions) + [self.source]


def emit_function(
    options: ElmOptions,
    endpoint: Endpoint,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> GeneratedFunction:
    """Build the Elm function for an endpoint.

    The function consists of its type signature, the ``name args =`` header,
    a let block binding ``params`` (only with query parameters) and
    ``request``, and the lines sending the request.

    Raises:
        MissingResponseTypeError: If the endpoint declares no response type.
    """
    fn_name = endpoint.function_name
    type_signature = build_type_signature(options, endpoint, resolver)
    fn_name_args = ' '.join([fn_name] + build_args_list(endpoint))

    let_params = build_let_params(LET_INDENT, options, endpoint)
    let_request = build_let_request(LET_INDENT, options, endpoint, resolver)
    http_request, supporting = build_http_request(
        LET_INDENT, options, endpoint, resolver
    )

    lines = [
        f'{fn_name} : {type_signature}',
        f'{fn_name_args} =',
        '  let',
        *let_params,
        *let_request,
        '  in',
        *http_request,
    ]
    source = '\n'.join(line for line in lines if line)

    return GeneratedFunction(
        name=fn_name,
        source=source,
        supporting_definitions=tuple(supporting),
    )


def generate_elm_for_request(
    options: ElmOptions,
    endpoint: Endpoint,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> list[str]:
    """Generate an Elm function for one endpoint.

    Returns a list because the function may require supporting definitions,
    which come first.
    """
    return emit_function(options, endpoint, resolver).to_blocks()
