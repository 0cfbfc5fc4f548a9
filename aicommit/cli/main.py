"""CLI Main Entry Point"""

import logging
import sys
from dataclasses import dataclass, replace

from aicommit.cli.args import parse_args, UsageError
from aicommit.cli.commands import display_config
from aicommit.config import Config, load_config
from aicommit.git import GitRepository, GitError, FileChange, IndexSnapshot
from aicommit.llm import Generator, GeneratorError, get_generator
from aicommit.output import (
    dim, bold, print_step, print_info, print_success, print_error, print_warning,
    print_commit_message, Spinner,
)
from aicommit.prompts import PromptBuilder
from aicommit.runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


@dataclass
class CLIOptions:
    """Per-run choices that come from the command line."""
    auto_add: bool = False


class CommitAssistant:
    """Stage, describe, and commit in one pass.

    Every failure is terminal for the run and maps to exit code 1. When the
    run staged changes itself and generation then fails, the index is put
    back the way it was so the user can inspect and retry.
    """

    def __init__(
        self,
        repo: GitRepository,
        generator: Generator,
        prompt_builder: PromptBuilder | None = None,
        show_status: bool = True,
        max_file_display: int = 8,
    ):
        self.repo = repo
        self.generator = generator
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.show_status = show_status
        self.max_file_display = max_file_display

    def run(self, options: CLIOptions) -> int:
        try:
            return self._run(options)
        except (GeneratorError, GitError) as e:
            print_error(str(e))
            return 1

    def _run(self, options: CLIOptions) -> int:
        self.generator.ensure_available()
        self.repo.verify()

        if self.show_status:
            print_step("Checking git status...")
            status = self.repo.short_status()
            if status.strip():
                print(status.rstrip('\n'))

        snapshot = None
        if options.auto_add:
            snapshot = self.repo.snapshot_index()
        try:
            return self._commit_staged(snapshot)
        finally:
            if snapshot is not None:
                self.repo.discard_snapshot(snapshot)

    def _commit_staged(self, snapshot: IndexSnapshot | None) -> int:
        if snapshot is not None:
            print_step("Adding all changes to staging...")
            self.repo.stage_all()

        if not self.repo.has_staged_changes():
            print_info("No changes to commit. Exiting.")
            return 0

        diff = self.repo.staged_diff()
        self._display_file_list(self.repo.staged_files())
        prompt = self.prompt_builder.build(diff)
        logger.debug("Prompt is %d chars (%d from the diff)", len(prompt), len(diff))

        print_step(f"Generating commit message with {self.generator.name}...")
        try:
            with Spinner(f"Waiting for {self.generator.name}..."):
                message = self.generator.generate(prompt)
        except GeneratorError as e:
            print_error(str(e))
            self._undo_staging(snapshot)
            return 1
        except KeyboardInterrupt:
            print_error(f"Interrupted while waiting for {self.generator.name}.")
            self._undo_staging(snapshot)
            return 1

        print_step("Committing changes with the following message:")
        print_commit_message(message)
        summary = self.repo.commit(message)
        if summary.strip():
            print(dim(summary.rstrip('\n')))

        print_success("Successfully committed changes.")
        return 0

    def _display_file_list(self, files: list[FileChange]) -> None:
        """Show which files go into the commit, collapsing long lists."""
        if not files:
            return
        print(bold("Staged changes:"))
        shown = files[:self.max_file_display]
        for change in shown:
            print(dim(f"  {change.path} (+{change.additions} -{change.deletions})"))
        remaining = len(files) - len(shown)
        if remaining > 0:
            print(dim(f"  ... and {remaining} more files"))

    def _undo_staging(self, snapshot: IndexSnapshot | None) -> None:
        if snapshot is None:
            return
        print(dim("  Undoing 'git add' so you can inspect the changes."))
        self.repo.restore_index(snapshot)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_config(args) -> Config:
    """Effective settings.

    Precedence: CLI args > environment variables > config file
    """
    config = replace(load_config())
    for warning in config.apply_env():
        print_warning(warning)
    if args.command:
        config.command = args.command
    if args.timeout:
        config.timeout = args.timeout
    if args.auto_add is not None:
        config.auto_add = args.auto_add
    return config


def main(argv: list[str] | None = None, runner: CommandRunner | None = None) -> int:
    """Main entry point for the CLI."""
    try:
        args = parse_args(argv)
    except UsageError as e:
        print_error(str(e))
        print("Use --help to see available options.", file=sys.stderr)
        return 1

    _configure_logging(args.verbose)
    config = _resolve_config(args)

    if args.display_config:
        return display_config(config)

    runner = runner or SubprocessRunner()
    repo = GitRepository(runner)
    generator = get_generator(config, runner=runner, cwd=repo.path)
    assistant = CommitAssistant(
        repo,
        generator,
        show_status=config.show_status,
        max_file_display=config.max_file_display,
    )
    return assistant.run(CLIOptions(auto_add=config.auto_add))
