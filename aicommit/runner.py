"""Command Runner - the one place that shells out to external programs."""

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

# Longest argument echoed in debug logs (prompts contain the whole diff)
_MAX_LOGGED_ARG = 60


@dataclass
class CommandResult:
    """Outcome of a finished process."""
    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _describe(args: Sequence[str]) -> str:
    shown = []
    for arg in args:
        if len(arg) > _MAX_LOGGED_ARG:
            arg = f"{arg[:_MAX_LOGGED_ARG]}... ({len(arg)} chars)"
        shown.append(arg)
    return ' '.join(shown)


class CommandRunner(ABC):
    """Runs external commands. Swap in a fake to test without subprocesses."""

    @abstractmethod
    def run(self, args: Sequence[str], cwd: Path | None = None, timeout: float | None = None) -> CommandResult:
        """Run a command to completion and capture its output.

        Raises:
            FileNotFoundError: the executable does not exist
            subprocess.TimeoutExpired: the timeout elapsed
        """

    @abstractmethod
    def which(self, name: str) -> str | None:
        """Resolve an executable on PATH, or None."""

    def check(self, args: Sequence[str], cwd: Path | None = None) -> int:
        """Run a command for its exit code only."""
        return self.run(args, cwd=cwd).returncode


class SubprocessRunner(CommandRunner):
    """Real runner backed by subprocess.run."""

    def run(self, args: Sequence[str], cwd: Path | None = None, timeout: float | None = None) -> CommandResult:
        logger.debug("$ %s", _describe(args))
        completed = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            timeout=timeout,
        )
        logger.debug("exit %d (%d bytes stdout)", completed.returncode, len(completed.stdout or ''))
        return CommandResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def which(self, name: str) -> str | None:
        return shutil.which(name)
