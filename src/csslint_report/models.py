from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class RuleRef:
    """Identifies the lint rule that produced a diagnostic"""

    id: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class Diagnostic:
    """A single lint message for one file"""

    line: int
    col: int
    type: str  # 'error', 'warning'
    message: str
    rollup: bool = False
    rule: RuleRef | None = None


@dataclass(frozen=True)
class FileResult:
    """All diagnostics reported for one file, in report order"""

    filename: str
    messages: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class ReadFailure:
    """A file that could not be read or parsed at all"""

    filename: str
    message: str
