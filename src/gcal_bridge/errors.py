from __future__ import annotations


class CalendarBridgeError(RuntimeError):
    """Base class for failures surfaced to the HTTP and MCP front-ends."""


class NotAuthenticatedError(CalendarBridgeError):
    """Raised when a calendar call is attempted before the OAuth exchange."""


class ExternalServiceError(CalendarBridgeError):
    """Raised when Google Calendar or the language model rejects a request."""


class BadRequestError(CalendarBridgeError, ValueError):
    """Raised when a caller omits or malforms a required field."""


class ConfigurationError(CalendarBridgeError):
    """Raised when required environment configuration is missing."""


__all__ = [
    "BadRequestError",
    "CalendarBridgeError",
    "ConfigurationError",
    "ExternalServiceError",
    "NotAuthenticatedError",
]
