"""
Domain exceptions for the intake router.

All application errors should inherit from IntakeRouterError.
"""


class IntakeRouterError(Exception):
    """Base class for all intake router exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class InvalidSpecError(IntakeRouterError):
    """Raised when a structured spec violates the caller contract (e.g. no data classification)."""

    pass


class ConfigurationError(IntakeRouterError):
    """Raised when routing configuration is invalid or corrupt."""

    pass
