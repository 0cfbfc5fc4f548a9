"""Generator backed by an AI command-line tool such as gemini."""

import logging
import subprocess

from aicommit.llm.base import Generator, GenerationError, EmptyResultError, ToolNotFoundError
from aicommit.runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


class CLIToolGenerator(Generator):
    """Runs `<command> [extra_args...] <prompt_flag> <prompt>` and reads stdout.

    Authentication is left to the tool itself (API keys, login state).
    """

    DEFAULT_COMMAND = "gemini"
    DEFAULT_PROMPT_FLAG = "-p"

    def __init__(
        self,
        command: str | None = None,
        prompt_flag: str | None = None,
        extra_args: list[str] | None = None,
        timeout: float | None = None,
        runner: CommandRunner | None = None,
        cwd=None,
    ):
        self.command = command or self.DEFAULT_COMMAND
        self.prompt_flag = self.DEFAULT_PROMPT_FLAG if prompt_flag is None else prompt_flag
        self.extra_args = list(extra_args or [])
        self.timeout = timeout
        self.runner = runner or SubprocessRunner()
        self.cwd = cwd

    @property
    def name(self) -> str:
        return self.command

    def ensure_available(self) -> None:
        if self.runner.which(self.command) is None:
            raise ToolNotFoundError(
                f"The '{self.command}' command-line tool is not installed or not in your PATH.\n"
                "Please install it to use this tool.\n"
                f"You can check this by running: command -v {self.command}"
            )

    def build_args(self, prompt: str) -> list[str]:
        args = [self.command, *self.extra_args]
        if self.prompt_flag:
            args.append(self.prompt_flag)
        args.append(prompt)
        return args

    def generate(self, prompt: str) -> str:
        try:
            result = self.runner.run(self.build_args(prompt), cwd=self.cwd, timeout=self.timeout)
        except FileNotFoundError:
            raise ToolNotFoundError(f"The '{self.command}' command-line tool could not be started.")
        except subprocess.TimeoutExpired:
            raise GenerationError(
                f"The '{self.command}' command timed out after {self.timeout:g}s.\n"
                "Increase the timeout with --timeout or AICOMMIT_TIMEOUT."
            )
        except OSError as e:
            raise GenerationError(f"The '{self.command}' command could not be run: {e}")

        if not result.ok:
            logger.debug("%s stderr:\n%s", self.command, result.stderr)
            raise GenerationError(
                f"The '{self.command}' command failed to execute (exit code {result.returncode}).\n"
                "Please check your API key, network connection, or run the command manually to see the full error."
            )

        message = result.stdout.strip()
        if not message:
            raise EmptyResultError(f"'{self.command}' returned an empty message, but the command succeeded.")
        return message
