"""Code generation module for elmapi.

This module provides the main Codegen class that orchestrates the generation
of an Elm client module from a routes document.
"""

import logging

from elmapi.codegen.emitter import ElmModuleEmitter, ElmSpec, FileEmitter
from elmapi.codegen.generator import generate_elm_for_api
from elmapi.codegen.options import ElmOptions
from elmapi.codegen.type_resolver import DEFAULT_RESOLVER, TypeResolver
from elmapi.config import DocumentConfig
from elmapi.routes import RouteLoader, RoutesDocument


class Codegen:
    """Main code generator for creating Elm clients from routes documents.

    This class orchestrates the generation process:
    - Loading and validating the routes document
    - Generating one Elm function per endpoint
    - Writing the module with its header and imports

    Attributes:
        config: The DocumentConfig containing source and output settings.
        options: Generator options; the document may override the URL prefix.

    Example:
        >>> from elmapi.config import DocumentConfig
        >>> from elmapi.codegen.codegen import Codegen
        >>>
        >>> config = DocumentConfig(source="./routes.yaml", output="./src")
        >>> codegen = Codegen(config)
        >>> codegen.generate()
        # Creates ./src/Generated/Api.elm
    """

    def __init__(
        self,
        config: DocumentConfig,
        options: ElmOptions | None = None,
        loader: RouteLoader | None = None,
        emitter: ElmModuleEmitter | None = None,
        resolver: TypeResolver = DEFAULT_RESOLVER,
    ):
        """Initialize the code generator.

        Args:
            config: Configuration specifying the routes source and output.
            options: Generator options. Defaults to ElmOptions() with the
                URL prefix of the document config, if set.
            loader: Optional custom routes loader.
            emitter: Optional custom emitter. Defaults to a FileEmitter
                writing below config.output.
            resolver: Resolver for type, decoder and encoder references.
        """
        self.config = config
        self.options = options or ElmOptions(url_prefix=config.url_prefix or '')
        self.document: RoutesDocument | None = None
        self._loader = loader or RouteLoader()
        self._emitter = emitter or FileEmitter(config.output)
        self._resolver = resolver

    def _load_routes(self) -> RoutesDocument:
        """Load the routes document from the configured source.

        Raises:
            RoutesLoadError: If the document cannot be loaded.
            RoutesValidationError: If the document is invalid.
        """
        self.document = self._loader.load(self.config.source)
        return self.document

    def _effective_options(self, document: RoutesDocument) -> ElmOptions:
        if self.config.url_prefix is None and document.url_prefix is not None:
            return self.options.model_copy(update={'url_prefix': document.url_prefix})
        return self.options

    def _module_name(self, document: RoutesDocument) -> str:
        if 'module' in self.config.model_fields_set or document.module is None:
            return self.config.module
        return document.module

    def build_spec(self) -> ElmSpec:
        """Load the routes and generate the module without writing it."""
        document = self._load_routes()
        options = self._effective_options(document)
        endpoints = document.to_endpoints()

        logging.info(
            f'Generating {len(endpoints)} endpoint functions from {self.config.source}'
        )
        declarations = generate_elm_for_api(endpoints, options, self._resolver)

        return ElmSpec.from_module_name(self._module_name(document), declarations)

    def generate(self) -> str:
        """Generate the module and emit it.

        Returns:
            Whatever the emitter returns: the written path for the
            FileEmitter, the source for the StringEmitter.
        """
        return self._emitter.emit(self.build_spec())
