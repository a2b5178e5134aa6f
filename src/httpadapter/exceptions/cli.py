"""
CLI-related exceptions.
"""

from .base import ExceptionContext, HttpAdapterError
from .templates import ErrorCodes, ErrorMessageTemplates


class CLIError(HttpAdapterError):
    """Raised when command-line usage is invalid."""

    def __init__(self, message: str, command: str = "fetch"):
        context = ExceptionContext(
            help_text=f"Use 'httpadapter {command} --help' for correct usage",
            error_code=ErrorCodes.CLI_ERROR,
        )
        super().__init__(ErrorMessageTemplates.CLI_ERROR.format(message=message), context)
