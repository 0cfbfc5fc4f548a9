"""Terminal Output Formatting Package"""

import os
import re
import sys
import threading

from aicommit import COMMIT_TYPE_NAMES


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    encoding = getattr(sys.stdout, 'encoding', None) or 'utf-8'
    try:
        '✓─⠋'.encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
ARROW = '→' if UNICODE_ENABLED else '->'
INFO = 'i'
RULE = '─' if UNICODE_ENABLED else '-'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_step(message: str) -> None:
    """A pipeline stage is starting."""
    print(f"{info(ARROW)} {message}")


def print_info(message: str) -> None:
    print(f"{info(INFO)} {message}")


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    """Print an error to stderr. Continuation lines are indented under the first."""
    first, *rest = message.split('\n')
    print(f"{error(CROSS)} {error(first)}", file=sys.stderr)
    for line in rest:
        print(f"  {line}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning('!')} {warning(message)}", file=sys.stderr)


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
}

_TYPE_PREFIX = re.compile(rf'^({"|".join(COMMIT_TYPE_NAMES)})(\([^)]*\))?(!?:)')


def colorize_commit_type(message: str) -> str:
    """Color the commit type prefix on the first line of a commit message."""
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = _TYPE_PREFIX.match(lines[0])
    if match:
        prefix = match.group(0)
        color = COMMIT_TYPE_COLORS[match.group(1)]
        lines[0] = _colorize(prefix, Colors.BOLD, color) + lines[0][len(prefix):]
    return '\n'.join(lines)


def print_commit_message(message: str) -> None:
    """Show a commit message between horizontal rules, subject in bold."""
    lines = colorize_commit_type(message).split('\n')
    # Width from the raw text; colored lines carry escape codes
    width = max((len(line) for line in message.split('\n')), default=40)
    width = max(width, 40)
    print(dim(RULE * width))
    print(bold(lines[0]))
    for line in lines[1:]:
        print(line)
    print(dim(RULE * width))


class Spinner:
    """Animated spinner for long operations. Use as context manager.

    Draws only when stdout is a terminal, so captured output stays clean.
    """
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self, label: str = ""):
        self.label = label
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII
        self._active = False

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            print(f'\r\033[K{frame} {self.label}', end='', flush=True)
            idx += 1
            self._stop_event.wait(0.08)

    def __enter__(self):
        self._active = sys.stdout.isatty()
        if self._active:
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        if self._active:
            print('\r\033[K', end='', flush=True)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "ARROW", "INFO", "RULE",
    "success", "error", "warning", "info", "dim", "bold",
    "print_step", "print_info", "print_success", "print_error", "print_warning",
    "colorize_commit_type", "print_commit_message", "Spinner", "COMMIT_TYPE_COLORS",
]
