"""Generator Base Classes and Errors"""

from abc import ABC, abstractmethod


class GeneratorError(Exception):
    """Raised when a commit message cannot be produced."""
    pass


class ToolNotFoundError(GeneratorError):
    """The generator executable is not on PATH."""
    pass


class GenerationError(GeneratorError):
    """The generator ran but failed (non-zero exit, timeout, crash)."""
    pass


class EmptyResultError(GeneratorError):
    """The generator succeeded but printed nothing usable."""
    pass


class Generator(ABC):
    """Turns a prompt into a commit message."""

    @abstractmethod
    def ensure_available(self) -> None:
        """Raise ToolNotFoundError if the generator cannot be used."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Return a non-empty commit message for prompt."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass
