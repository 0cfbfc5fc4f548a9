"""Commit Message Generators"""

from aicommit.llm.base import (
    Generator,
    GeneratorError,
    ToolNotFoundError,
    GenerationError,
    EmptyResultError,
)
from aicommit.llm.cli_tool import CLIToolGenerator


def get_generator(config, runner=None, cwd=None) -> Generator:
    """Build the generator described by a Config."""
    return CLIToolGenerator(
        command=config.command,
        prompt_flag=config.prompt_flag,
        extra_args=config.extra_args,
        timeout=config.timeout,
        runner=runner,
        cwd=cwd,
    )


__all__ = [
    "Generator",
    "GeneratorError",
    "ToolNotFoundError",
    "GenerationError",
    "EmptyResultError",
    "CLIToolGenerator",
    "get_generator",
]
