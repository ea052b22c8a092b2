"""Claude (Anthropic) API Client"""

import os

from aicommit.llm.base import Backend, LLMClient, LLMError, LLMResponse


class ClaudeClient(LLMClient):
    """Claude API client. Requires ANTHROPIC_API_KEY env var."""

    backend = Backend.API

    DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
    TEMPERATURE = 0.3

    def __init__(self, api_key: str | None = None, model: str | None = None):
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.model = model or self.DEFAULT_MODEL

        if not self.api_key:
            raise LLMError("ANTHROPIC_API_KEY not found", key="apiKeyNotFound")

        try:
            from anthropic import Anthropic
            self._client = Anthropic(api_key=self.api_key)
        except ImportError:
            raise LLMError(
                "Anthropic SDK not installed. Run:\n"
                "  pip install anthropic",
                key="sdkLoadError",
            )

    @property
    def name(self) -> str:
        return f"Claude API ({self.model})"

    def generate(self, prompt: str, max_tokens: int = 500) -> LLMResponse:
        from anthropic import APIError, AuthenticationError

        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=self.TEMPERATURE,
                messages=[{"role": "user", "content": prompt}]
            )
        except AuthenticationError:
            raise LLMError("Invalid API key. Check your ANTHROPIC_API_KEY.")
        except APIError as e:
            raise LLMError(f"Claude API error: {e.message}")

        content = None
        for block in response.content or []:
            if getattr(block, "type", None) == "text":
                content = block.text.strip()
                break

        if not content:
            raise LLMError("Claude API returned no text")

        usage = getattr(response, "usage", None)
        tokens = (usage.input_tokens + usage.output_tokens) if usage else 0
        return LLMResponse(
            content=content,
            model=self.model,
            backend=self.backend,
            tokens_used=tokens,
        )
