"""Exceptions raised while reading and ranking hands."""

from __future__ import annotations


class CamelCardsError(Exception):
    """Base exception for camel-cards operations."""

    pass


class InvalidCardError(CamelCardsError, ValueError):
    """Raised when a card label is not in the strength table."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Invalid card label: {label!r}")
        self.label = label


class HandParseError(CamelCardsError, ValueError):
    """Raised when an input line is not '<5 cards> <bid>'."""

    def __init__(self, message: str, line: str, line_number: int | None = None) -> None:
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{message} ({line!r})")
        self.line = line
        self.line_number = line_number


class InputFileError(CamelCardsError):
    """Raised when the input file is missing or unreadable."""

    pass
