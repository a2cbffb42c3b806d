"""Custom exceptions for elmapi.

Every error raised by elmapi derives from ElmAPIError. Route loading,
code generation, configuration and output each have their own branch, so
callers can tell a bad routes document from a failed write.
"""


class ElmAPIError(Exception):
    """Base exception for all elmapi errors.

    All exceptions raised by elmapi inherit from this class, making it easy
    to catch all elmapi-related errors with a single except clause.

    Example:
        try:
            codegen.generate()
        except ElmAPIError as e:
            print(f"elmapi error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class RoutesError(ElmAPIError):
    """Base exception for errors in routes documents."""

    pass


class RoutesLoadError(RoutesError):
    """Failed to load a routes document from a source.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load routes from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class RoutesValidationError(RoutesError):
    """A routes document does not describe a valid set of endpoints.

    Attributes:
        source: The source path or URL of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Routes validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class TypeParseError(RoutesError):
    """A textual Elm type expression could not be parsed.

    Attributes:
        text: The type expression that failed to parse.
        reason: Explanation of what went wrong.
    """

    def __init__(self, text: str, reason: str | None = None):
        self.text = text
        self.reason = reason
        message = f"Invalid type expression '{text}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class CodeGenerationError(ElmAPIError):
    """Error during code generation.

    Attributes:
        context: Additional context about what was being generated.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while generating {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class MissingResponseTypeError(CodeGenerationError):
    """An endpoint was handed to the generator without a response type.

    There is no sensible default for what an endpoint returns, so this
    aborts the whole generation run instead of skipping the endpoint.

    Attributes:
        function_name: Name of the function that was being generated.
    """

    def __init__(self, function_name: str):
        self.function_name = function_name
        super().__init__(
            f"Endpoint '{function_name}' has no response type",
            context=function_name,
        )


class EndpointGenerationError(CodeGenerationError):
    """Error generating an endpoint function.

    Attributes:
        function_name: The name of the generated function.
        method: The HTTP method of the endpoint.
        path: The URL path of the endpoint.
    """

    def __init__(
        self,
        function_name: str,
        method: str | None = None,
        path: str | None = None,
        cause: Exception | None = None,
    ):
        self.function_name = function_name
        self.method = method
        self.path = path
        message = f"Failed to generate endpoint '{function_name}'"
        if method and path:
            message += f' ({method.upper()} {path})'
        super().__init__(message, context=function_name, cause=cause)


class ConfigurationError(ElmAPIError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(ElmAPIError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Cannot emit Elm module to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
