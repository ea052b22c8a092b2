"""Local CLI agent client (Claude Code by default)."""

import os
import subprocess

from aicommit.llm.base import Backend, LLMClient, LLMError, LLMResponse
from aicommit.llm.parser import parse_agent_response_detailed


class AgentClient(LLMClient):
    """Runs the agent once per prompt: prompt on stdin, answer on stdout."""

    backend = Backend.CLI

    DEFAULT_COMMAND = "claude"
    DEFAULT_TIMEOUT = 300
    MAX_OUTPUT_BYTES = 10 * 1024 * 1024

    def __init__(self, command: str | None = None, timeout: int | None = None):
        self.command = command or os.environ.get("COMMIT_AGENT") or self.DEFAULT_COMMAND
        self.timeout = timeout or self.DEFAULT_TIMEOUT

    @property
    def name(self) -> str:
        return f"{self.command} CLI"

    def _run(self, prompt: str) -> str:
        try:
            result = subprocess.run(
                [self.command],
                input=prompt,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise LLMError(f"'{self.command}' not found in PATH")
        except subprocess.TimeoutExpired:
            raise LLMError(f"'{self.command}' timed out after {self.timeout}s")
        except OSError as e:
            raise LLMError(f"Could not run '{self.command}': {e}")

        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            raise LLMError(f"'{self.command}' exited with code {result.returncode}: {detail}")

        if len(result.stdout.encode('utf-8', errors='replace')) > self.MAX_OUTPUT_BYTES:
            raise LLMError(f"'{self.command}' output exceeded {self.MAX_OUTPUT_BYTES} bytes")

        return result.stdout

    def generate(self, prompt: str, max_tokens: int = 0) -> LLMResponse:
        # max_tokens is an API concept; the agent decides its own length
        output = self._run(prompt)
        content, degraded = parse_agent_response_detailed(output)
        return LLMResponse(
            content=content,
            model=self.command,
            backend=self.backend,
            degraded=degraded,
        )
