"""Message Generator - draft and revise commit messages with whichever backend is usable."""

from typing import Callable

from aicommit.git import ChangeSet
from aicommit.llm.agent import AgentClient
from aicommit.llm.base import (
    Backend, BackendAvailability, LLMClient, LLMError, LLMResponse,
    NoBackendAvailable, select_backend,
)
from aicommit.llm.claude import ClaudeClient
from aicommit.prompts import PromptBuilder

ClientFactory = Callable[[], LLMClient]


class MessageGenerator:
    """Applies the API-then-agent policy to generation and refinement prompts.

    Availability is passed into every call rather than read from the
    environment here, so callers (and tests) decide what is reachable.
    """

    GENERATE_MAX_TOKENS = 500
    REFINE_MAX_TOKENS = 300

    def __init__(self, prompt_builder: PromptBuilder | None = None,
                 model: str | None = None,
                 agent_command: str | None = None,
                 agent_timeout: int | None = None,
                 api_factory: ClientFactory | None = None,
                 agent_factory: ClientFactory | None = None):
        self.prompts = prompt_builder or PromptBuilder()
        self._api_factory = api_factory or (lambda: ClaudeClient(model=model))
        self._agent_factory = agent_factory or (
            lambda: AgentClient(command=agent_command, timeout=agent_timeout)
        )

    def generate(self, changes: ChangeSet, language: str,
                 availability: BackendAvailability) -> LLMResponse:
        prompt = self.prompts.build_generation(changes, language)
        return self._invoke(prompt, availability, self.GENERATE_MAX_TOKENS)

    def refine(self, original_message: str, feedback: str, language: str,
               availability: BackendAvailability) -> LLMResponse:
        prompt = self.prompts.build_refinement(original_message, feedback, language)
        return self._invoke(prompt, availability, self.REFINE_MAX_TOKENS)

    def _invoke(self, prompt: str, availability: BackendAvailability,
                max_tokens: int) -> LLMResponse:
        backend = select_backend(availability)

        if backend is Backend.NONE:
            raise NoBackendAvailable("No method available for generating commit message")

        if backend is Backend.CLI:
            return self._agent_factory().generate(prompt, max_tokens)

        try:
            return self._api_factory().generate(prompt, max_tokens)
        except LLMError as e:
            if not availability.agent_available:
                raise NoBackendAvailable(str(e), key=e.key) from e
            api_error = e

        # One fallback attempt, no retries
        try:
            response = self._agent_factory().generate(prompt, max_tokens)
        except LLMError as e:
            raise e from api_error
        response.fallback_reason = str(api_error)
        response.fallback_key = api_error.key
        return response
