"""Request record building.

Assembles the ``request`` let binding passed to ``Http.send``: verb,
headers, URL (including the query suffix) and body.
"""

from elmapi.codegen.builders.query_builder import build_query_suffix
from elmapi.codegen.builders.url_builder import build_url
from elmapi.codegen.options import ElmOptions
from elmapi.codegen.type_resolver import DEFAULT_RESOLVER, TypeResolver
from elmapi.codegen.types import ElmDatatype, Endpoint
from elmapi.codegen.utils import quote

__all__ = ['EMPTY_BODY', 'JSON_HEADERS', 'build_body_expr', 'build_let_request']

EMPTY_BODY = 'Http.empty'

JSON_HEADERS = '[("Content-Type", "application/json")]'


def build_body_expr(
    options: ElmOptions,
    body: ElmDatatype | None,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> str:
    """Build the body field: empty, or the ``body`` argument as compact JSON."""
    if body is None:
        return EMPTY_BODY

    encoder = resolver.encoder_ref(body, options.export_options)
    return f'Http.string (Json.Encode.encode 0 ({encoder} body))'


def build_let_request(
    indent: str,
    options: ElmOptions,
    endpoint: Endpoint,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> list[str]:
    """Build the lines of the ``request`` let binding, each prefixed by indent."""
    url = build_url(options, endpoint.path)
    body = build_body_expr(options, endpoint.body, resolver)

    lines = [
        'request =',
        '  { verb =',
        '      ' + quote(endpoint.method),
        '  , headers =',
        '      ' + JSON_HEADERS,
        '  , url =',
        '      ' + url,
    ]
    lines.extend(build_query_suffix('      ', endpoint))
    lines.extend(
        [
            '  , body =',
            '      ' + body,
            '  }',
        ]
    )
    return [indent + line for line in lines]
