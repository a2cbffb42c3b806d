"""URL expression building.

Produces the Elm expression that concatenates the URL prefix and the path
segments of an endpoint at run time. The term order is the URL order.
"""

import logging

from elmapi.codegen.options import ElmOptions
from elmapi.codegen.types import Segment, Static
from elmapi.codegen.utils import quote

__all__ = ['URL_TERM_SEPARATOR', 'build_url', 'segment_to_str']

logger = logging.getLogger(__name__)

URL_TERM_SEPARATOR = '\n          ++ '


def segment_to_str(options: ElmOptions, segment: Segment) -> str:
    """Render one path segment as an Elm string expression.

    Static text becomes a literal. Captures are converted with ``toString``
    (skipped for String types, which would otherwise gain quotes) and
    percent-encoded.
    """
    if isinstance(segment, Static):
        return quote(segment.text)

    arg = segment.arg
    to_string_src = '' if options.is_string_type(arg.type) else ' |> toString'
    return f'({arg.name}{to_string_src} |> Http.uriEncode)'


def build_url(options: ElmOptions, segments: tuple[Segment, ...]) -> str:
    """Build the URL expression for the given path segments.

    Example:
        >>> build_url(options, (Static('books'), Capture(Arg('id', INT))))
        '"/" ++ "books"\\n          ++ "/" ++ (id |> toString |> Http.uriEncode)'
    """
    terms = []

    if options.url_prefix:
        terms.append(quote(options.url_prefix))

    if segments:
        terms.append(
            '"/" ++ '
            + (URL_TERM_SEPARATOR + '"/" ++ ').join(
                segment_to_str(options, segment) for segment in segments
            )
        )

    if not terms:
        logger.debug('URL prefix and path are both empty, URL expression is empty')

    return URL_TERM_SEPARATOR.join(terms)

