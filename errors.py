"""
Fast Music Generator - Errors
Error taxonomy for a single generation attempt.
"""


class GenerationError(Exception):
    """Base exception for generation failures."""
    pass


class ValidationError(GenerationError):
    """Missing prompt or key. Raised before any network call."""
    pass


class ApiError(GenerationError):
    """The generation endpoint answered with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(
            f"API Error: {status_code}. Please check your API key and try again."
        )
        self.status_code = status_code


class TransportError(GenerationError):
    """The request never reached the generation endpoint."""
    pass


class GenerationInProgressError(GenerationError):
    """A generation is already running for this session."""
    pass
