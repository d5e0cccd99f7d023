"""LLM-related exception classes.

Contains all exception classes for summarization calls:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when API key is not set
- EmptyResponseError: Raised when the endpoint returns no content
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the endpoint answers without any message content."""

    pass
