"""Git Operations Package"""

from aicommit.git.repository import GitRepository, GitError, FileChange, IndexSnapshot

__all__ = [
    "GitRepository",
    "GitError",
    "FileChange",
    "IndexSnapshot",
]
