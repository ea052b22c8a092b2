"""LLM Base Classes and Backend Selection"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from aicommit.git import GitAdapter


class Backend(Enum):
    """Where a commit message comes from."""
    API = "api"
    CLI = "cli"
    NONE = "none"


@dataclass(frozen=True)
class BackendAvailability:
    """What can generate a message right now. Computed per call, passed in."""
    api_key_present: bool
    agent_available: bool

    @classmethod
    def detect(cls, adapter: GitAdapter, agent_command: str = "claude",
               environ: dict | None = None) -> 'BackendAvailability':
        env = os.environ if environ is None else environ
        return cls(
            api_key_present=bool(env.get("ANTHROPIC_API_KEY")),
            agent_available=adapter.has_local_agent(agent_command),
        )


def select_backend(availability: BackendAvailability) -> Backend:
    """API first, local agent second."""
    if availability.api_key_present:
        return Backend.API
    if availability.agent_available:
        return Backend.CLI
    return Backend.NONE


@dataclass
class LLMResponse:
    """Structured response from any backend."""
    content: str
    model: str = ""
    backend: Backend = Backend.NONE
    tokens_used: int = 0
    # Set when the API failed and the local agent answered instead
    fallback_reason: str | None = None
    fallback_key: str | None = None
    degraded: bool = False


class LLMError(Exception):
    """Raised when a backend call fails.

    key names a localized message for the failure when there is one.
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class NoBackendAvailable(LLMError):
    """Raised when neither the API nor the local agent can be used."""
    pass


class LLMClient(ABC):
    """Abstract base for backend clients."""

    backend: Backend = Backend.NONE

    @abstractmethod
    def generate(self, prompt: str, max_tokens: int) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
