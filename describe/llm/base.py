"""Base classes and shared utilities for LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from loguru import logger

from describe.config import RunConfig


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    description: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


# Prompt sent as a single user message (shared across all providers)
USER_PROMPT_TEMPLATE = """You are a helpful assistant that writes git commit messages.
Based on the following staged changes, generate a properly formatted git commit message.

Format requirements:
- First line: Short summary (50-72 chars) describing WHAT changed and WHY
- Second line: Blank line
- Following lines: More detailed explanation of the changes, their purpose and impact

Staged changes:
{changes}

Generate the commit message:"""


def build_prompt(changes: str) -> str:
    """Embed the staged diff in the commit message prompt.

    Args:
        changes: The rendered staged diff.

    Returns:
        The full prompt text.
    """
    return USER_PROMPT_TEMPLATE.format(changes=changes)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    name = "LLM"

    def __init__(self, config: RunConfig):
        self.config = config
        self.model = config.model
        self.endpoint = config.api_endpoint.rstrip("/")
        self.timeout = config.timeout

    @abstractmethod
    def generate(self, changes: str) -> LLMResult:
        """Generate a commit message describing the staged diff.

        Args:
            changes: The rendered staged diff.

        Returns:
            An LLMResult containing the description and metadata.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            EmptyResponseError: If the endpoint returns no content.
            LLMError: For other LLM-related errors.
        """
        pass

    def build_messages(self, changes: str) -> list[dict[str, str]]:
        """Build the chat messages for ``changes`` and log the prompt when debugging."""
        prompt = build_prompt(changes)
        if self.config.debug:
            logger.debug("=== Full prompt being sent to LLM ===")
            logger.debug(prompt)
            logger.debug("=== End of prompt ===")
        return [{"role": "user", "content": prompt}]
