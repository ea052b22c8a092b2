"""Accept / edit / cancel loop around a drafted commit message."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from aicommit.cli.terminal import Choice
from aicommit.llm import LLMError, NoBackendAvailable


class Action(Enum):
    COMMIT = "commit"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Outcome:
    """Terminal result of the loop."""
    action: Action
    message: Optional[str] = None
    interrupted: bool = False

    @classmethod
    def commit(cls, message: str) -> 'Outcome':
        return cls(Action.COMMIT, message)

    @classmethod
    def cancel(cls, interrupted: bool = False) -> 'Outcome':
        return cls(Action.CANCEL, None, interrupted)

    @property
    def committed(self) -> bool:
        return self.action is Action.COMMIT


def _ignore(*args) -> None:
    pass


class ConfirmationLoop:
    """Presents a candidate until the user accepts or cancels.

    All I/O is injected:
        read_choice()             -> Choice
        ask_feedback(candidate)   -> str   (empty keeps the candidate)
        ask_manual()              -> str   (used when refinement fails)
        refine(candidate, text)   -> str   (may raise LLMError)
        commit(message)                    (called once, only after ACCEPT)
        present(candidate)
        notify(level, key, detail)         level is 'info', 'warning' or 'error'

    KeyboardInterrupt from any prompt resolves to a cancelled outcome.
    """

    def __init__(self,
                 read_choice: Callable[[], Choice],
                 ask_feedback: Callable[[str], str],
                 ask_manual: Callable[[], str],
                 refine: Callable[[str, str], str],
                 commit: Callable[[str], object],
                 present: Callable[[str], None] = _ignore,
                 notify: Callable[[str, str, Optional[str]], None] = _ignore):
        self._read_choice = read_choice
        self._ask_feedback = ask_feedback
        self._ask_manual = ask_manual
        self._refine = refine
        self._commit = commit
        self._present = present
        self._notify = notify

    def run(self, candidate: str) -> Outcome:
        try:
            outcome = self._decide(candidate)
        except KeyboardInterrupt:
            outcome = Outcome.cancel(interrupted=True)

        if outcome.committed:
            self._commit(outcome.message)
        return outcome

    def _decide(self, candidate: str) -> Outcome:
        while True:
            self._present(candidate)
            choice = self._read_choice()

            if choice is Choice.ACCEPT:
                return Outcome.commit(candidate)
            if choice is Choice.EDIT:
                candidate = self._edit(candidate)
                continue
            return Outcome.cancel(interrupted=choice is Choice.INTERRUPT)

    def _edit(self, candidate: str) -> str:
        feedback = (self._ask_feedback(candidate) or "").strip()
        if not feedback:
            return candidate

        self._notify('info', 'editingMessage', None)
        try:
            revised = self._refine(candidate, feedback)
        except NoBackendAvailable:
            self._notify('warning', 'aiUnavailable', None)
            return self._manual(candidate)
        except LLMError as e:
            self._notify('error', 'editError', str(e))
            return self._manual(candidate)

        return (revised or "").strip() or candidate

    def _manual(self, candidate: str) -> str:
        message = (self._ask_manual() or "").strip()
        return message or candidate
