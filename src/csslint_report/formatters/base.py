from abc import ABC, abstractmethod
from typing import Protocol

from ..models import FileResult


class Formatter(Protocol):
    """Protocol for a report output format"""

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    def start_format(self) -> str: ...

    def end_format(self) -> str: ...

    def read_error(self, filename: str, message: str) -> str: ...

    def format_results(self, results: FileResult, filename: str) -> str: ...


class BaseFormatter(ABC):
    """Abstract base class for all report formatters."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Stable formatter identifier (e.g., 'checkstyle-xml')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name."""
        pass

    def start_format(self) -> str:
        """Text to prepend before all results."""
        return ""

    def end_format(self) -> str:
        """Text to append after all results."""
        return ""

    @abstractmethod
    def read_error(self, filename: str, message: str) -> str:
        """Output for a file that could not be read."""
        pass

    @abstractmethod
    def format_results(self, results: FileResult, filename: str) -> str:
        """Output for the results of a single file."""
        pass
