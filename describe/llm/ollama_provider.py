"""Ollama provider implementation.

Talks to a local (or remote) Ollama server through its native
``/api/chat`` endpoint with streaming disabled.
"""

import json

import httpx
from loguru import logger

from describe.llm.base import BaseLLMProvider, LLMResult
from describe.llm.exceptions import EmptyResponseError, LLMError


class OllamaProvider(BaseLLMProvider):
    """Ollama LLM provider (local models)."""

    name = "Ollama"

    def generate(self, changes: str) -> LLMResult:
        """Generate a commit message using Ollama.

        Args:
            changes: The rendered staged diff.

        Returns:
            An LLMResult containing the description and token usage.

        Raises:
            EmptyResponseError: If the reply has no message content.
            LLMError: If the request fails or the reply cannot be decoded.
        """
        body = {
            "model": self.model,
            "messages": self.build_messages(changes),
            "stream": False,
        }
        logger.debug(f"Sending request to Ollama API (payload size: {len(json.dumps(body))} bytes)")

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(f"{self.endpoint}/api/chat", json=body)
        except httpx.ConnectError as e:
            raise LLMError(
                f"Cannot connect to Ollama at {self.endpoint}. "
                f"Make sure Ollama is running: {e}"
            )
        except httpx.HTTPError as e:
            raise LLMError(f"Failed to send request: {e}")

        logger.debug(f"Received response with status: {response.status_code}")
        if response.status_code != httpx.codes.OK:
            logger.debug(f"API error response: {response.text}")
            raise LLMError(f"API request failed with status {response.status_code}: {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise LLMError(f"Failed to decode response: {e}")

        content = (data.get("message") or {}).get("content") or ""
        if not content:
            logger.debug("API returned empty message content")
            raise EmptyResponseError("no response from API")

        logger.debug("Successfully decoded API response")
        return LLMResult(
            description=content.strip(),
            model=data.get("model") or self.model,
            input_tokens=data.get("prompt_eval_count", 0),
            output_tokens=data.get("eval_count", 0),
        )
