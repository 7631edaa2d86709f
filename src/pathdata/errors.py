"""Errors raised while parsing SVG path data."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional


class SvgPathErrorKind(Enum):
    """Enum to define the kinds of path-data parse failures."""

    UNEXPECTED_TOKEN = auto()
    MISSING_ARGUMENT = auto()
    UNEXPECTED_ARGUMENT = auto()


class SvgPathError(ValueError):
    """Raised when a path-data string cannot be parsed.

    Callers branch on ``kind``. ``token`` is set for UNEXPECTED_TOKEN,
    ``command`` and ``expected`` for the two argument errors.
    """

    def __init__(
        self,
        kind: SvgPathErrorKind,
        token: Optional[str] = None,
        command: Optional[str] = None,
        expected: Optional[int] = None,
    ):
        self.kind = kind
        self.token = token
        self.command = command
        self.expected = expected
        super().__init__(self.message)

    @classmethod
    def unexpected_token(cls, token: str) -> SvgPathError:
        """Error for text outside the recognized grammar."""
        return cls(SvgPathErrorKind.UNEXPECTED_TOKEN, token=token)

    @classmethod
    def missing_argument(cls, command: str, expected: int) -> SvgPathError:
        """Error for fewer numbers than the command's arity."""
        return cls(SvgPathErrorKind.MISSING_ARGUMENT, command=command, expected=expected)

    @classmethod
    def unexpected_argument(cls, command: str, expected: int) -> SvgPathError:
        """Error for a number count that is not a multiple of the command's arity."""
        return cls(SvgPathErrorKind.UNEXPECTED_ARGUMENT, command=command, expected=expected)

    @property
    def message(self) -> str:
        """Human readable description of the error."""
        if self.kind is SvgPathErrorKind.UNEXPECTED_TOKEN:
            return f"Unexpected token '{self.token}'"
        if self.kind is SvgPathErrorKind.MISSING_ARGUMENT:
            return f"Missing argument for '{self.command}' (expected {self.expected})"
        return f"Too many arguments for '{self.command}' (expected multiple of {self.expected})"
