"""Pull a single conventional-commit line out of free-form agent output."""

import re

from aicommit import COMMIT_TYPE_NAMES

FALLBACK_MESSAGE = "chore: update code"

CONVENTIONAL_COMMIT_RE = re.compile(
    rf'^({"|".join(COMMIT_TYPE_NAMES)})(\([^)]+\))?:.+'
)


def parse_agent_response_detailed(text: str) -> tuple[str, bool]:
    """Return (line, degraded).

    Agents print banners and reasoning before the answer, so lines are
    scanned from the end. degraded is True when no line had the
    conventional-commit shape and a fallback was used.
    """
    lines = [line.strip() for line in (text or "").split('\n')]
    lines = [line for line in lines if line]

    for line in reversed(lines):
        if CONVENTIONAL_COMMIT_RE.match(line):
            return line, False

    if lines:
        return lines[-1], True
    return FALLBACK_MESSAGE, True


def parse_agent_response(text: str) -> str:
    """Last conventional-commit line, else last non-empty line, else the fallback."""
    return parse_agent_response_detailed(text)[0]
