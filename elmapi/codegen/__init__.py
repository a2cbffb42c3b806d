"""Code generation module for elmapi.

This module provides the core code generation functionality for creating
Elm client functions from endpoint descriptions.

Main Components:
    - generate_elm_for_api: Generates all declarations of a module
    - generate_elm_for_request: Generates the function for one endpoint
    - ElmOptions: Options controlling the generated code
    - TypeResolver: Maps Elm type tags to type, decoder and encoder names
    - ElmModuleEmitter: Handles output of generated modules

Example:
    >>> from elmapi.codegen import Endpoint, Static, INT, generate_elm_for_api
    >>>
    >>> endpoint = Endpoint('getOne', 'GET', path=(Static('one'),), return_type=INT)
    >>> for declaration in generate_elm_for_api([endpoint]):
    ...     print(declaration)
"""

from elmapi.codegen.emitter import (
    DEFAULT_ELM_IMPORTS,
    ElmModuleEmitter,
    ElmSpec,
    FileEmitter,
    StringEmitter,
    render_module,
)
from elmapi.codegen.endpoints import (
    GeneratedFunction,
    emit_function,
    generate_elm_for_request,
)
from elmapi.codegen.generator import generate_elm_for_api
from elmapi.codegen.options import DEFAULT_OPTIONS, ElmExportOptions, ElmOptions
from elmapi.codegen.response_strategy import ResponseStrategy, select_response_strategy
from elmapi.codegen.type_resolver import DEFAULT_RESOLVER, ElmTypeResolver, TypeResolver
from elmapi.codegen.types import (
    BOOL,
    CHAR,
    DATE,
    FLOAT,
    INT,
    NO_CONTENT,
    STRING,
    UNIT,
    Arg,
    Capture,
    ElmDatatype,
    ElmPrimitive,
    ElmRef,
    Endpoint,
    QueryArg,
    QueryArgKind,
    Static,
    dict_of,
    list_of,
    maybe,
    parse_type,
    ref,
    tuple2,
)

__all__ = [
    # Generation
    'generate_elm_for_api',
    'generate_elm_for_request',
    'emit_function',
    'GeneratedFunction',
    'ResponseStrategy',
    'select_response_strategy',
    # Options
    'ElmOptions',
    'ElmExportOptions',
    'DEFAULT_OPTIONS',
    # Type resolution
    'TypeResolver',
    'ElmTypeResolver',
    'DEFAULT_RESOLVER',
    # Endpoint and type model
    'Endpoint',
    'Arg',
    'Static',
    'Capture',
    'QueryArg',
    'QueryArgKind',
    'ElmDatatype',
    'ElmPrimitive',
    'ElmRef',
    'INT',
    'BOOL',
    'CHAR',
    'FLOAT',
    'STRING',
    'DATE',
    'UNIT',
    'NO_CONTENT',
    'list_of',
    'maybe',
    'tuple2',
    'dict_of',
    'ref',
    'parse_type',
    # Code emission
    'DEFAULT_ELM_IMPORTS',
    'ElmSpec',
    'ElmModuleEmitter',
    'FileEmitter',
    'StringEmitter',
    'render_module',
]
