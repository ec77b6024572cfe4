"""
Shared error handling for the transition engine.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field

from shared.logging import get_run_id


class ErrorResponse(BaseModel):
    """Standard error payload."""

    run_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class EngineError(Exception):
    """Base exception for caller-facing failures around the engine."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            run_id=get_run_id(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class ValidationError(EngineError):
    """Invalid caller input, e.g. a bad initial state configuration."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class ConfigurationError(EngineError):
    """Invalid settings."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
