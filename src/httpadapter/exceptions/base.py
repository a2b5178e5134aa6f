"""
Base exception classes for httpadapter.

Every error raised by the package derives from HttpAdapterError, which
carries user-facing guidance and a short correlation id that also appears
in the logs.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class ExceptionContext:
    """Context information for httpadapter exceptions."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    user_action: Optional[str] = None
    technical_details: Optional[str] = None
    correlation_id: Optional[str] = None


class HttpAdapterError(Exception):
    """Base exception for all httpadapter errors.

    Attributes:
        message: The error message
        help_text: Optional actionable guidance for the user
        error_code: Optional error code for programmatic handling
        correlation_id: Unique ID for tracking this error across logs
        context: Additional context information
        user_action: Suggested user action to resolve the issue
        technical_details: Technical information for debugging
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = dict(context.context)
        self.user_action = context.user_action
        self.technical_details = context.technical_details
        self.correlation_id = context.correlation_id or uuid.uuid4().hex[:8]
        self.timestamp = datetime.now()
        super().__init__(message)

    def __str__(self) -> str:
        sections: List[str] = [self.message]
        if self.help_text:
            sections.append(f"Help: {self.help_text}")
        if self.user_action:
            sections.append(f"Action: {self.user_action}")

        details = ", ".join(f"{k}: {v}" for k, v in self.context.items() if v is not None)
        if details:
            sections.append(f"Context: {details}")

        sections.append(f"Error ID: {self.correlation_id}")
        return "\n\n".join(sections)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
            "help_text": self.help_text,
            "user_action": self.user_action,
            "technical_details": self.technical_details,
        }

    def add_context(self, **kwargs) -> "HttpAdapterError":
        """Add additional context to the exception."""
        self.context.update(kwargs)
        return self
