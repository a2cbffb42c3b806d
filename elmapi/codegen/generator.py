"""Generation of all Elm functions for an API.

This is the entry point of the core: it turns the ordered list of endpoints
into the ordered list of Elm declarations for one module.
"""

import logging
from collections.abc import Iterable

from elmapi.codegen.endpoints import emit_function
from elmapi.codegen.options import DEFAULT_OPTIONS, ElmOptions
from elmapi.codegen.type_resolver import DEFAULT_RESOLVER, TypeResolver
from elmapi.codegen.types import Endpoint
from elmapi.codegen.utils import dedupe
from elmapi.exceptions import EndpointGenerationError, MissingResponseTypeError

__all__ = ['generate_elm_for_api']

logger = logging.getLogger(__name__)


def generate_elm_for_api(
    endpoints: Iterable[Endpoint],
    options: ElmOptions = DEFAULT_OPTIONS,
    resolver: TypeResolver = DEFAULT_RESOLVER,
) -> list[str]:
    """Generate Elm code for every endpoint of an API.

    Declarations are returned in endpoint order. Supporting definitions
    shared by several endpoints are kept only where they first appear.

    Args:
        endpoints: Endpoints in the order their functions should appear.
        options: Generator options.
        resolver: Resolver for type, decoder and encoder references.

    Returns:
        List of Elm declarations, each a complete block of source text.

    Raises:
        MissingResponseTypeError: If any endpoint has no response type.
        EndpointGenerationError: If any other failure occurs for an endpoint.
    """
    blocks: list[str] = []

    for endpoint in endpoints:
        try:
            generated = emit_function(options, endpoint, resolver)
        except MissingResponseTypeError:
            raise
        except Exception as e:
            raise EndpointGenerationError(
                endpoint.function_name,
                method=endpoint.method,
                path=endpoint.path_template,
                cause=e,
            ) from e

        logger.debug(
            f'Generated {generated.name} '
            f'({len(generated.supporting_definitions)} supporting definitions)'
        )
        blocks.extend(generated.to_blocks())

    return dedupe(blocks)
