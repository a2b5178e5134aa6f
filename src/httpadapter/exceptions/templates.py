"""
Standardized error message templates and error codes.

Keeps the wording of transport, redirect and configuration failures
consistent across every transport backend.
"""

from typing import List


class ErrorMessageTemplates:
    """Standardized error message templates for consistent formatting."""

    # Transport error templates
    CANNOT_FETCH_URL = 'An error occurred when fetching the URL "{url}" with the adapter "{adapter}" ("{error}").'

    # Redirect error templates
    MAX_REDIRECTS_EXCEEDED = 'An error occurred when fetching the URL "{url}" with the adapter "{adapter}" ("Max redirects exceeded ({max_redirects})").'

    # Configuration error templates
    CONFIG_INVALID = "Invalid configuration for '{field}': got {value!r}, expected {expected}"

    # CLI error templates
    CLI_ERROR = "Command error: {message}"


class ErrorCodes:
    """Error codes for programmatic handling."""

    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    MAX_REDIRECTS_EXCEEDED = "MAX_REDIRECTS_EXCEEDED"
    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_VALIDATION = "CONFIG_VALIDATION"
    CLI_ERROR = "CLI_ERROR"


class RecoverySuggestions:
    """Standard recovery suggestions for common error scenarios."""

    @staticmethod
    def for_transport_failure(adapter: str) -> List[str]:
        """Get recovery suggestions for transport failures."""
        return [
            "Check your network connection and the target host",
            f"Increase the timeout configured for the '{adapter}' transport",
            "Try another transport backend with --transport",
        ]

    @staticmethod
    def for_redirect_limit(max_redirects: int) -> List[str]:
        """Get recovery suggestions for redirect loops."""
        return [
            f"Raise max_redirects above {max_redirects} if the chain is legitimate",
            "Check the target for a redirect loop",
            "Disable throw_exception to receive the last response instead",
        ]
