"""LLM Backend Package"""

from aicommit.llm.base import (
    Backend,
    BackendAvailability,
    LLMClient,
    LLMError,
    LLMResponse,
    NoBackendAvailable,
    select_backend,
)
from aicommit.llm.agent import AgentClient
from aicommit.llm.claude import ClaudeClient
from aicommit.llm.generator import MessageGenerator
from aicommit.llm.parser import FALLBACK_MESSAGE, parse_agent_response, parse_agent_response_detailed

__all__ = [
    "Backend",
    "BackendAvailability",
    "LLMClient",
    "LLMError",
    "LLMResponse",
    "NoBackendAvailable",
    "select_backend",
    "AgentClient",
    "ClaudeClient",
    "MessageGenerator",
    "FALLBACK_MESSAGE",
    "parse_agent_response",
    "parse_agent_response_detailed",
]
