"""
End-to-end tests for the `aicommit` entry point with a scripted runner.

Run with:
    pytest tests/test_cli.py -v
"""

import pytest

import aicommit.cli.main as cli_main
from aicommit.cli.main import main
from aicommit.config import Config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Ignore any .aicommitrc or AICOMMIT_* settings on the machine running the tests."""
    monkeypatch.setattr(cli_main, "load_config", lambda: Config())
    monkeypatch.delenv("AICOMMIT_COMMAND", raising=False)
    monkeypatch.delenv("AICOMMIT_TIMEOUT", raising=False)


# ---------------------------------------------------------------------------
# Usage errors and informational flags
# ---------------------------------------------------------------------------

class TestUsage:

    def test_unknown_flag_runs_nothing(self, make_runner, capsys):
        runner = make_runner()
        assert main(['--bogus'], runner=runner) == 1
        assert runner.calls == []

        err = capsys.readouterr().err
        assert "Unknown option: --bogus" in err
        assert "Use --help to see available options." in err

    def test_unknown_flag_after_valid_one(self, make_runner, capsys):
        runner = make_runner()
        assert main(['--auto-add', '--bogus'], runner=runner) == 1
        assert runner.calls == []

    def test_invalid_timeout(self, make_runner, capsys):
        runner = make_runner()
        assert main(['--timeout', '-1'], runner=runner) == 1
        assert runner.calls == []
        assert "timeout must be greater than zero" in capsys.readouterr().err

    @pytest.mark.parametrize("flag", ['--help', '-h', '--version', '-v'])
    def test_help_and_version_never_touch_git(self, make_runner, flag):
        runner = make_runner()
        with pytest.raises(SystemExit) as exc:
            main([flag], runner=runner)
        assert exc.value.code == 0
        assert runner.calls == []

    def test_display_config(self, make_runner, capsys, monkeypatch):
        monkeypatch.setenv("AICOMMIT_TIMEOUT", "45")
        runner = make_runner()

        assert main(['--display-config', '--command', 'claude'], runner=runner) == 0
        assert runner.calls == []
        out = capsys.readouterr().out
        assert "claude" in out
        assert "45s" in out
        assert "AICOMMIT_TIMEOUT=45" in out


# ---------------------------------------------------------------------------
# Full runs
# ---------------------------------------------------------------------------

class TestRun:

    def test_commits_staged_changes(self, make_runner):
        runner = make_runner()
        assert main([], runner=runner) == 0
        assert ('git', 'commit', '-m', 'feat: add new line') in runner.calls
        assert not runner.ran('git', 'add')

    def test_auto_add_flag(self, make_runner):
        runner = make_runner()
        assert main(['--auto-add'], runner=runner) == 0
        assert runner.ran('git', 'add', '.')

    def test_auto_add_from_config(self, make_runner, monkeypatch):
        monkeypatch.setattr(cli_main, "load_config", lambda: Config(auto_add=True))
        runner = make_runner()
        assert main([], runner=runner) == 0
        assert runner.ran('git', 'add', '.')

    def test_missing_tool(self, make_runner, capsys):
        runner = make_runner(tools=('git',))
        assert main(['--auto-add'], runner=runner) == 1
        assert runner.calls == []
        assert "not installed" in capsys.readouterr().err

    def test_env_selects_command(self, make_runner, monkeypatch):
        monkeypatch.setenv("AICOMMIT_COMMAND", "claude")
        runner = make_runner({('claude',): (0, 'docs: explain setup\n')}, tools=('git', 'claude'))

        assert main([], runner=runner) == 0
        assert runner.ran('claude', '-p')
        assert ('git', 'commit', '-m', 'docs: explain setup') in runner.calls

    def test_flag_beats_env(self, make_runner, monkeypatch):
        monkeypatch.setenv("AICOMMIT_COMMAND", "claude")
        runner = make_runner()

        assert main(['--command', 'gemini'], runner=runner) == 0
        assert runner.ran('gemini')
        assert not runner.ran('claude')

    def test_timeout_flag_reaches_generator(self, make_runner):
        runner = make_runner()
        main(['--timeout', '12.5'], runner=runner)
        assert runner.timeouts[runner.index_of('gemini')] == 12.5

    def test_bad_env_timeout_warns_and_continues(self, make_runner, monkeypatch, capsys):
        monkeypatch.setenv("AICOMMIT_TIMEOUT", "forever")
        runner = make_runner()

        assert main([], runner=runner) == 0
        assert "Ignoring AICOMMIT_TIMEOUT" in capsys.readouterr().err
        assert runner.timeouts[runner.index_of('gemini')] is None

    def test_generation_failure_exit_code(self, make_runner, index_file):
        runner = make_runner({('gemini',): (1, '')})
        assert main(['--auto-add'], runner=runner) == 1
        assert index_file.read_bytes() == b"original index"
