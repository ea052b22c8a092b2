"""Git Operations Package"""

from aicommit.git.adapter import ChangeSet, GitAdapter, GitError, NoStagedChanges

__all__ = [
    "ChangeSet",
    "GitAdapter",
    "GitError",
    "NoStagedChanges",
]
