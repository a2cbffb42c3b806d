"""Builders package for the parts of a generated Elm function.

Each builder renders one part of the function text: the type signature,
the URL expression, the query parameters and the request record.
"""

from elmapi.codegen.builders.query_builder import (
    QueryBuilder,
    build_let_params,
    build_query_suffix,
    param_to_str,
)
from elmapi.codegen.builders.request_builder import (
    EMPTY_BODY,
    JSON_HEADERS,
    build_body_expr,
    build_let_request,
)
from elmapi.codegen.builders.signature_builder import (
    TypeSignatureBuilder,
    build_args_list,
    build_type_signature,
)
from elmapi.codegen.builders.url_builder import (
    URL_TERM_SEPARATOR,
    build_url,
    segment_to_str,
)

__all__ = [
    # Signature building
    'TypeSignatureBuilder',
    'build_type_signature',
    'build_args_list',
    # URL building
    'URL_TERM_SEPARATOR',
    'build_url',
    'segment_to_str',
    # Query building
    'QueryBuilder',
    'build_let_params',
    'build_query_suffix',
    'param_to_str',
    # Request building
    'EMPTY_BODY',
    'JSON_HEADERS',
    'build_body_expr',
    'build_let_request',
]
