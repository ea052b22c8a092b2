"""Git Adapter - Read staged changes and create commits."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from aicommit import DEFAULT_MAX_DIFF_CHARS


@dataclass(frozen=True)
class ChangeSet:
    """Staged changes as handed to the model. Read once per run."""
    status_text: str
    diff_text: str


class GitError(Exception):
    """Raised when git operations fail."""

    def __init__(self, message: str, command: str = "", detail: str = ""):
        super().__init__(message)
        self.command = command
        # git's own stderr, e.g. the reason a hook gave
        self.detail = detail


class NoStagedChanges(GitError):
    """Raised when the index holds nothing to commit."""
    pass


class GitAdapter:
    """Runs git in a repository directory (cwd by default)."""

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = str(cwd) if cwd is not None else None

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or e.stdout or "").strip()
            command = ' '.join(args)
            raise GitError(f"Git command failed: git {command}\n{detail}", command=command, detail=detail)
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH", command=' '.join(args))

    def get_staged_summary(self) -> str | None:
        """Stat of staged changes, or None when nothing is staged."""
        output = self._run_git('diff', '--cached', '--stat')
        return output.strip() or None

    def get_staged_diff(self, max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
        """Staged diff cut to the first max_chars characters.

        The cut is blind to diff structure and may land mid-hunk.
        """
        diff = self._run_git('diff', '--cached', '--unified=1')
        return diff[:max_chars]

    def get_change_set(self, max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> ChangeSet:
        """Status and truncated diff in one value."""
        status = self.get_staged_summary()
        if status is None:
            raise NoStagedChanges("No staged changes", command='diff')
        return ChangeSet(status_text=status, diff_text=self.get_staged_diff(max_chars))

    def commit(self, message: str) -> str:
        """Create a commit with the message exactly as given.

        The message travels as a single argv element, so quotes and other
        shell metacharacters need no escaping.
        """
        return self._run_git('commit', '-m', message).strip()

    def has_local_agent(self, command: str = "claude") -> bool:
        """True when the agent executable is found on PATH."""
        try:
            return shutil.which(command) is not None
        except (OSError, ValueError):
            return False
