"""Error types raised by cssrefactor."""

from __future__ import annotations

from pathlib import Path


class CSSRefactorError(Exception):
    """Base class for all cssrefactor failures."""


class InputReadError(CSSRefactorError):
    """Raised when a CSS source file is missing or unreadable."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        message = f"cannot read {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ParseError(CSSRefactorError):
    """Raised when CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class OutputWriteError(CSSRefactorError):
    """Raised when an output file or directory cannot be written."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        message = f"cannot write {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
