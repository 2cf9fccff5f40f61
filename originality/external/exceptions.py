class ExternalToolError(Exception):
    """Raised when the external similarity tool cannot produce results."""


class ExternalToolTimeout(ExternalToolError):
    """Raised when the external tool exceeds its wall-clock limit and is killed."""
