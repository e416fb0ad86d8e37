class InvocationError(Exception):
    """Raised when a vision model call does not produce a usable completion."""


class InvocationNetworkError(InvocationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
