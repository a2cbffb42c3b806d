"""Response handling for generated Elm functions.

If the return type has a decoder, the request is sent with ``Http.fromJson``.
If the return type is registered as an empty response, the generated code
instead checks for an empty body, which needs three helper functions that
are emitted once per module.
"""

import enum
import logging

from elmapi.codegen.options import ElmOptions
from elmapi.codegen.type_resolver import DEFAULT_RESOLVER, TypeResolver
from elmapi.codegen.types import ElmDatatype, Endpoint
from elmapi.exceptions import MissingResponseTypeError

__all__ = [
    'ResponseStrategy',
    'EMPTY_RESPONSE_HANDLER_SRC',
    'HANDLE_RESPONSE_SRC',
    'PROMOTE_ERROR_SRC',
    'SUPPORTING_DEFINITIONS',
    'HELPER_NAMES',
    'select_response_strategy',
    'build_http_request',
]

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_HANDLER_SRC = '\n'.join(
    [
        'emptyResponseHandler : a -> String -> Task.Task Http.Error a',
        'emptyResponseHandler x str =',
        '  if String.isEmpty str then',
        '    Task.succeed x',
        '  else',
        '    Task.fail (Http.UnexpectedPayload str)',
    ]
)

HANDLE_RESPONSE_SRC = '\n'.join(
    [
        'handleResponse : (String -> Task.Task Http.Error a) -> Http.Response -> Task.Task Http.Error a',
        'handleResponse handle response =',
        '  if 200 <= response.status && response.status < 300 then',
        '    case response.value of',
        '      Http.Text str ->',
        '        handle str',
        '      _ ->',
        '        Task.fail (Http.UnexpectedPayload "Response body is a blob, expecting a string.")',
        '  else',
        '    Task.fail (Http.BadResponse response.status response.statusText)',
    ]
)

PROMOTE_ERROR_SRC = '\n'.join(
    [
        'promoteError : Http.RawError -> Http.Error',
        'promoteError rawError =',
        '  case rawError of',
        '    Http.RawTimeout -> Http.Timeout',
        '    Http.RawNetworkError -> Http.NetworkError',
    ]
)

SUPPORTING_DEFINITIONS = (
    EMPTY_RESPONSE_HANDLER_SRC,
    HANDLE_RESPONSE_SRC,
    PROMOTE_ERROR_SRC,
)

HELPER_NAMES = frozenset(src.split(' ', 1)[0] for src in SUPPORTING_DEFINITIONS)


class ResponseStrategy(enum.Enum):
    DECODABLE = 'decodable'
    EMPTY_RESPONSE = 'empty_response'
    INVALID = 'invalid'


def select_response_strategy(
    options: ElmOptions, return_type: ElmDatatype | None
) -> ResponseStrategy:
    """Decide how the response of an endpoint is handled.

    Membership in ``options.empty_response_types`` is tested by value, so
    two separately built tags for the same type both count.
    """
    if return_type is None:
        return ResponseStrategy.INVALID
    if options.is_empty_type(return_type):
        return ResponseStrategy.EMPTY_RESPONSE
    return ResponseStrategy.DECODABLE


def _json_request(decoder: str) -> list[str]:
    return [
        'Http.fromJson',
        '  ' + decoder,
        '  (Http.send Http.defaultSettings request)',
    ]


def _empty_response_request(elm_type: str) -> list[str]:
    return [
        'Task.mapError promoteError',
        '  (Http.send Http.defaultSettings request)',
        '    `Task.andThen`',
        '      handleResponse (emptyResponseHandler ' + elm_type + ')',
    ]


def build_http_request(
    indent: str,
    options: ElmOptions,
    endpoint: Endpoint,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> tuple[list[str], list[str]]:
    """Build the lines that send the request and handle its response.

    Returns:
        A tuple of (lines, supporting_definitions). The lines are prefixed
        by indent. Supporting definitions are the helper functions the
        lines refer to, empty for decodable responses.

    Raises:
        MissingResponseTypeError: If the endpoint declares no response type.
    """
    strategy = select_response_strategy(options, endpoint.return_type)
    logger.debug(
        f'Response strategy for {endpoint.function_name}: {strategy.value}'
    )

    if strategy is ResponseStrategy.INVALID:
        raise MissingResponseTypeError(endpoint.function_name)

    if strategy is ResponseStrategy.EMPTY_RESPONSE:
        elm_type = resolver.type_ref(endpoint.return_type, options.export_options)
        lines = _empty_response_request(elm_type)
        supporting = list(SUPPORTING_DEFINITIONS)
    else:
        decoder = resolver.decoder_ref(endpoint.return_type, options.export_options)
        lines = _json_request(decoder)
        supporting = []

    return [indent + line for line in lines], supporting
