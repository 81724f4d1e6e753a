"""Shared parser exceptions. Every one of them aborts the generation run."""

from pathlib import Path
from typing import Optional


class ParseError(Exception):
    """Error while reading an interface header or config file."""

    def __init__(
        self, message: str, file_path: Optional[Path] = None, line: Optional[int] = None
    ):
        self.file_path = file_path
        self.line = line
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        """Format error message with file and line information."""
        parts = []
        if self.file_path:
            parts.append(f"File: {self.file_path}")
        if self.line is not None:
            parts.append(f"Line: {self.line}")
        parts.append(message)
        return " | ".join(parts)


class UnknownKindError(ParseError):
    """A declaration names a kind other than Indicator, Control or a FIFO."""


class UnknownTypeCodeError(ParseError):
    """A declaration carries a type code with no primitive mapping."""


class MissingSignatureError(ParseError):
    """The header has no ``<namespace>_<bitfile>_Signature`` declaration."""


class DuplicateDeclarationError(ParseError):
    """Two declarations of the same kind share a name."""


class UnsupportedDeclarationError(ParseError):
    """A declaration combines flags that have no accessor, e.g. a FIFO array."""


class ConfigError(ParseError):
    """The YAML configuration file is malformed or fails validation."""
