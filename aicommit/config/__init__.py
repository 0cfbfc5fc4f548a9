"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

ENV_COMMAND = "AICOMMIT_COMMAND"
ENV_TIMEOUT = "AICOMMIT_TIMEOUT"


@dataclass
class Config:
    """User configuration with sensible defaults."""
    command: str = "gemini"
    prompt_flag: str = "-p"  # "" passes the prompt as a positional argument
    extra_args: list[str] = field(default_factory=list)
    timeout: Optional[float] = None  # seconds; None waits forever
    auto_add: bool = False
    show_status: bool = True
    max_file_display: int = 8  # Max files shown before collapsing list

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.command, str) or not self.command.strip():
            warnings.append(f"Invalid command '{self.command}', using '{defaults.command}'")
            self.command = defaults.command

        if not isinstance(self.prompt_flag, str):
            warnings.append(f"Invalid prompt_flag '{self.prompt_flag}', using '{defaults.prompt_flag}'")
            self.prompt_flag = defaults.prompt_flag

        if not isinstance(self.extra_args, list) or not all(isinstance(a, str) for a in self.extra_args):
            warnings.append(f"Invalid extra_args '{self.extra_args}', using []")
            self.extra_args = []

        if self.timeout is not None:
            if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
                warnings.append(f"Invalid timeout '{self.timeout}', waiting without a timeout")
                self.timeout = defaults.timeout

        if not isinstance(self.auto_add, bool):
            warnings.append(f"Invalid auto_add '{self.auto_add}', using {str(defaults.auto_add).lower()}")
            self.auto_add = defaults.auto_add

        if not isinstance(self.show_status, bool):
            warnings.append(f"Invalid show_status '{self.show_status}', using {str(defaults.show_status).lower()}")
            self.show_status = defaults.show_status

        if isinstance(self.max_file_display, bool) or not isinstance(self.max_file_display, int) or self.max_file_display <= 0:
            warnings.append(f"Invalid max_file_display '{self.max_file_display}', using {defaults.max_file_display}")
            self.max_file_display = defaults.max_file_display

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config

    def apply_env(self, environ=None) -> list[str]:
        """Apply AICOMMIT_* environment overrides. Returns warnings."""
        environ = os.environ if environ is None else environ
        warnings = []

        command = environ.get(ENV_COMMAND)
        if command:
            self.command = command

        timeout = environ.get(ENV_TIMEOUT)
        if timeout:
            try:
                value = float(timeout)
            except ValueError:
                value = 0
            if value > 0:
                self.timeout = value
            else:
                warnings.append(f"Ignoring {ENV_TIMEOUT}={timeout!r}: expected a positive number of seconds")

        return warnings


class ConfigManager:
    """Finds and loads the rc file, local before global."""

    CONFIG_FILENAME = ".aicommitrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Config warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Config warning: {path} must contain a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "ENV_COMMAND",
    "ENV_TIMEOUT",
]
