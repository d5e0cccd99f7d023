"""LLM provider module for describe.

This module provides a unified interface to the summarization providers.
The active provider comes from the resolved RunConfig.
"""

from loguru import logger

from describe.config import LLMProvider, RunConfig
from describe.llm.base import BaseLLMProvider, LLMResult, build_prompt
from describe.llm.exceptions import EmptyResponseError, LLMError, MissingAPIKeyError


def get_provider(config: RunConfig) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        config: The run configuration naming the provider, model and endpoint.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if config.provider == LLMProvider.OLLAMA:
        from describe.llm.ollama_provider import OllamaProvider

        return OllamaProvider(config)

    elif config.provider == LLMProvider.OPENROUTER:
        from describe.llm.openrouter_provider import OpenRouterProvider

        return OpenRouterProvider(config)

    else:
        raise ValueError(f"Unsupported provider: {config.provider}")


def describe_changes(changes: str, config: RunConfig) -> LLMResult:
    """Ask the configured provider to describe the staged diff.

    This is the main entry point for generating commit messages.

    Args:
        changes: The rendered staged diff.
        config: The run configuration.

    Returns:
        An LLMResult containing the description and token usage.

    Raises:
        MissingAPIKeyError: If the API key is not set.
        EmptyResponseError: If the provider returns no content.
        LLMError: For other LLM-related errors.
    """
    provider = get_provider(config)
    logger.debug(f"Calling {config.provider.value} API")
    return provider.generate(changes)


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "EmptyResponseError",
    "LLMResult",
    "build_prompt",
    "get_provider",
    "describe_changes",
]
