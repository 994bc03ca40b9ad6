"""Custom exception classes for the schematic command line tool."""

from __future__ import annotations


class SchematicError(Exception):
    """Base exception for schematic errors.

    Every error that ends a run inherits from this class. ``exit_code_name``
    names the field of ``ExitCodesConfig`` used as the process exit status.
    """

    exit_code_name = "error_runtime_fault"


class UsageError(SchematicError):
    """Error raised when the tool is invoked with the wrong arguments."""

    exit_code_name = "error_usage"

    def __init__(self, message: str = "schematic: missing schema file") -> None:
        super().__init__(message)


class SchemaFileError(SchematicError):
    """Error opening or reading the schema file.

    The message is the text of the underlying OS error, unchanged.

    Args:
        path: The path that could not be read
        cause: The underlying OSError
    """

    exit_code_name = "error_file_not_found"

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(str(cause))


class SchemaDecodeError(SchematicError):
    """Error decoding the schema document.

    Raised for malformed JSON and for documents whose structure does not fit
    the schema model.
    """

    exit_code_name = "error_invalid_schema"

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class GenerationError(SchematicError):
    """Error reported by a code generator.

    Generators raise this to signal a schema they cannot handle. The message
    reaches the user exactly as given.
    """

    exit_code_name = "error_generation_failed"


class RuntimeFault(SchematicError):
    """An unexpected exception caught at the top-level fault barrier.

    Args:
        cause: The exception that escaped the pipeline
    """

    exit_code_name = "error_runtime_fault"

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


class ConfigurationError(SchematicError):
    """Error in application configuration.

    Raised when a configuration value is invalid or when no code generator
    can be resolved.

    Args:
        variable_name: The environment variable that caused the error
        detail: Optional description of what is wrong with it
    """

    exit_code_name = "error_configuration"

    def __init__(self, variable_name: str, detail: str | None = None) -> None:
        self.variable_name = variable_name
        self.detail = detail
        if detail:
            message = f"Invalid configuration variable '{variable_name}': {detail}"
        else:
            message = f"Required configuration variable '{variable_name}' is not set"
        super().__init__(message)
