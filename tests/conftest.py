"""Shared fixtures: a scripted CommandRunner so no real processes are spawned."""

import tempfile

import pytest

from aicommit.runner import CommandRunner, CommandResult


class FakeRunner(CommandRunner):
    """Answers commands from a table keyed by argument prefix.

    Values are (returncode, stdout) or (returncode, stdout, stderr) tuples, an
    exception instance to raise, or a callable taking the args and returning
    one of those. The longest matching prefix wins and unmatched commands
    succeed with no output.
    """

    def __init__(self, responses=None, tools=('git', 'gemini')):
        self.responses = dict(responses or {})
        self.tools = set(tools)
        self.calls = []
        self.timeouts = []
        self.cwds = []

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.tools else None

    def run(self, args, cwd=None, timeout=None):
        args = tuple(args)
        self.calls.append(args)
        self.timeouts.append(timeout)
        self.cwds.append(cwd)

        response = self._lookup(args)
        if callable(response):
            response = response(args)
        if isinstance(response, BaseException):
            raise response
        if response is None:
            return CommandResult(args=args, returncode=0)
        returncode, stdout, *rest = response
        return CommandResult(args=args, returncode=returncode, stdout=stdout, stderr=rest[0] if rest else "")

    def _lookup(self, args):
        best = None
        for key in self.responses:
            if args[:len(key)] == key and (best is None or len(key) > len(best)):
                best = key
        return self.responses[best] if best is not None else None

    def index_of(self, *prefix):
        """Position of the first call starting with prefix, or -1."""
        for i, call in enumerate(self.calls):
            if call[:len(prefix)] == prefix:
                return i
        return -1

    def ran(self, *prefix):
        return self.index_of(*prefix) >= 0


STAGED_REPO = {
    ('git', 'rev-parse'): (0, '.git\n'),
    ('git', 'status', '--short'): (0, 'M  app.py\n?? notes.txt\n'),
    ('git', 'diff', '--cached', '--quiet'): (1, ''),
    ('git', 'diff', '--cached'): (0, '+added line\n'),
    ('git', 'diff', '--cached', '--numstat'): (0, '1\t0\tapp.py\n'),
    ('gemini',): (0, 'feat: add new line\n'),
    ('git', 'commit'): (0, '[main 1a2b3c4] feat: add new line\n 1 file changed, 1 insertion(+)\n'),
}


@pytest.fixture
def index_file(tmp_path):
    """A stand-in index file that 'git add .' rewrites in the fake repo."""
    path = tmp_path / "index"
    path.write_bytes(b"original index")
    return path


@pytest.fixture
def backup_dir(tmp_path, monkeypatch):
    """Directory that receives index backups for the duration of a test."""
    path = tmp_path / "backups"
    path.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(path))
    return path


def staging_into(index_file):
    def _add(args):
        index_file.write_bytes(b"index after add")
        return (0, '')
    return _add


@pytest.fixture
def make_runner(index_file, backup_dir):
    """Return a factory for FakeRunner seeded with a repo that has staged changes."""
    def _make(overrides=None, tools=('git', 'gemini')):
        responses = dict(STAGED_REPO)
        responses[('git', 'rev-parse', '--git-path', 'index')] = (0, f"{index_file}\n")
        responses[('git', 'add', '.')] = staging_into(index_file)
        responses.update(overrides or {})
        return FakeRunner(responses, tools=tools)
    return _make
