"""OpenRouter provider implementation.

OpenRouter provides unified access to many models through a single API.
It uses an OpenAI-compatible API format.
"""

from loguru import logger
from openai import APIConnectionError, APIStatusError, OpenAI, OpenAIError

from describe.config import API_KEY_ENV_VARS, LLMProvider
from describe.llm.base import BaseLLMProvider, LLMResult
from describe.llm.exceptions import EmptyResponseError, LLMError, MissingAPIKeyError


class OpenRouterProvider(BaseLLMProvider):
    """OpenRouter LLM provider (unified access to hosted models)."""

    name = "OpenRouter"

    def get_api_key(self) -> str:
        """Get the OpenRouter API key resolved into the run configuration.

        Raises:
            MissingAPIKeyError: If no key was configured.
        """
        if not self.config.api_key:
            env_var = API_KEY_ENV_VARS[LLMProvider.OPENROUTER]
            raise MissingAPIKeyError(
                f"OpenRouter API key not found. Set it using:\n"
                f"  1. Environment variable: export {env_var}=your_key_here\n"
                f"  2. api_key in the describe config file"
            )
        return self.config.api_key

    def generate(self, changes: str) -> LLMResult:
        """Generate a commit message using OpenRouter.

        Args:
            changes: The rendered staged diff.

        Returns:
            An LLMResult containing the description and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            EmptyResponseError: If the reply has no choices.
            LLMError: For other API failures.
        """
        api_key = self.get_api_key()

        # Create an OpenAI client pointing to OpenRouter
        client = OpenAI(
            api_key=api_key,
            base_url=self.endpoint,
            timeout=self.timeout,
        )

        messages = self.build_messages(changes)
        logger.debug(f"Sending request to OpenRouter API (model: {self.model})")

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=messages,
                extra_headers={
                    "HTTP-Referer": "https://github.com/describe",
                    "X-Title": "describe",
                },
            )
        except APIStatusError as e:
            logger.debug(f"API error response: {e.response.text}")
            raise LLMError(f"API request failed with status {e.status_code}: {e.message}")
        except APIConnectionError as e:
            raise LLMError(f"Failed to send request: {e}")
        except OpenAIError as e:
            raise LLMError(f"OpenRouter API call failed: {e}")

        if not response.choices:
            logger.debug("API returned empty choices array")
            raise EmptyResponseError("no response from API")

        content = response.choices[0].message.content or ""
        usage = response.usage

        logger.debug("Successfully decoded API response")
        return LLMResult(
            description=content.strip(),
            model=response.model or self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
