"""Git Repository - Staging, diffing, and committing through git."""

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from aicommit.runner import CommandRunner, CommandResult, SubprocessRunner

logger = logging.getLogger(__name__)


@dataclass
class FileChange:
    """One staged file as reported by --numstat."""
    path: str
    additions: int
    deletions: int


@dataclass
class IndexSnapshot:
    """A byte copy of the index file, or None for backup when there was no index yet."""
    index_path: Path
    backup_path: Path | None


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepository:
    """The repository a run operates on.

    Every git call goes through the injected runner with an explicit working
    directory, so nothing depends on the process's current directory once
    the repository has been constructed.
    """

    def __init__(self, runner: CommandRunner | None = None, path: Path | str | None = None):
        self.runner = runner or SubprocessRunner()
        self.path = Path(path) if path is not None else Path.cwd()

    def _run_git(self, *args: str) -> CommandResult:
        try:
            return self.runner.run(['git', *args], cwd=self.path)
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git: {e}")

    def _git_exit_code(self, *args: str) -> int:
        try:
            return self.runner.check(['git', *args], cwd=self.path)
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git: {e}")

    def _git_output(self, *args: str) -> str:
        """Run a git command and return stdout, raising on failure."""
        result = self._run_git(*args)
        if not result.ok:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{result.stderr.strip()}")
        return result.stdout

    def verify(self) -> None:
        """Fail fast if we're not in a git repository."""
        if self._git_exit_code('rev-parse', '--git-dir') != 0:
            raise GitError("Not inside a git repository")

    def short_status(self) -> str:
        return self._git_output('status', '--short')

    def stage_all(self) -> None:
        self._git_output('add', '.')

    def has_staged_changes(self) -> bool:
        """True when the index differs from HEAD."""
        code = self._git_exit_code('diff', '--cached', '--quiet')
        if code == 0:
            return False
        if code == 1:
            return True
        raise GitError(f"Could not inspect staged changes (git exited with {code})")

    def staged_diff(self) -> str:
        return self._git_output('diff', '--cached')

    def staged_files(self) -> list[FileChange]:
        """Parse 'git diff --cached --numstat' output."""
        output = self._git_output('diff', '--cached', '--numstat')

        files = []
        for line in output.strip().split('\n'):
            parts = line.split('\t')
            if len(parts) >= 3:
                # Binary files report '-' for both counts
                additions = int(parts[0]) if parts[0] != '-' else 0
                deletions = int(parts[1]) if parts[1] != '-' else 0
                files.append(FileChange(path=parts[2], additions=additions, deletions=deletions))
        return files

    def index_path(self) -> Path:
        """Location of the index file, honouring GIT_INDEX_FILE and worktrees."""
        return self.path / self._git_output('rev-parse', '--git-path', 'index').strip()

    def snapshot_index(self) -> IndexSnapshot:
        """Copy the index file aside, unmerged entries and all."""
        index = self.index_path()
        if not index.exists():
            return IndexSnapshot(index_path=index, backup_path=None)

        fd, backup = tempfile.mkstemp(prefix='aicommit-index-')
        os.close(fd)
        try:
            shutil.copyfile(index, backup)
        except OSError as e:
            os.unlink(backup)
            raise GitError(f"Could not back up the index {index}: {e}")
        logger.debug("Copied index %s to %s", index, backup)
        return IndexSnapshot(index_path=index, backup_path=Path(backup))

    def restore_index(self, snapshot: IndexSnapshot) -> None:
        """Put the index back exactly as snapshot_index() found it.

        Only the index is touched; working tree files stay as they are.
        """
        logger.debug("Restoring index %s", snapshot.index_path)
        try:
            if snapshot.backup_path is None:
                snapshot.index_path.unlink(missing_ok=True)
            else:
                shutil.copyfile(snapshot.backup_path, snapshot.index_path)
        except OSError as e:
            raise GitError(f"Could not restore the index {snapshot.index_path}: {e}")

    def discard_snapshot(self, snapshot: IndexSnapshot) -> None:
        if snapshot.backup_path is not None:
            snapshot.backup_path.unlink(missing_ok=True)

    def commit(self, message: str) -> str:
        """Create a commit with message used as-is. Returns git's summary output."""
        result = self._run_git('commit', '-m', message)
        if not result.ok:
            detail = (result.stderr or result.stdout).strip()
            raise GitError(f"git commit failed\n{detail}" if detail else "git commit failed")
        return result.stdout
