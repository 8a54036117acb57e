"""
Error handling for the Lox scanner.

Lexical errors never stop a scan. The scanner hands every error to an
injected reporter, and callers decide what to do with the collected
diagnostics once the token list is complete.

Author: xwest
"""

import logging
from typing import Iterator, List, Optional, Protocol
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single lexical error, with the line it was found on."""
    line: int
    message: str
    code: Optional[str] = None
    severity: str = "error"
    where: str = ""                 # e.g. " at '@'"

    def __str__(self) -> str:
        return f"[line {self.line}] {self.severity.capitalize()}{self.where}: {self.message}"


class ScanError(Exception):
    """
    Exception carrying a lexical diagnostic.

    The scanner never raises this itself; Diagnostics.raise_for_errors()
    does, for callers that want a hard failure.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.line

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorReporter(Protocol):
    """
    Anything that can receive lexical errors from the scanner.

    Sinks may also define add(diagnostic) to receive the full Diagnostic,
    including its code and location; the scanner prefers it when present.
    """

    def report(self, line: int, message: str) -> None:
        ...


class Diagnostics:
    """
    Default reporter: collects diagnostics in the order they were reported.
    """

    def __init__(self) -> None:
        self.items: List[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        self.items.append(Diagnostic(line=line, message=message))

    def add(self, diagnostic: Diagnostic) -> None:
        """Record a fully built diagnostic (keeps code and location)."""
        self.items.append(diagnostic)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity == "error"]

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def raise_for_errors(self) -> None:
        """Raise ScanError for the first recorded error, if any."""
        errors = self.errors
        if errors:
            raise ScanError(errors[0])

    def clear(self) -> None:
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)


class LoggingReporter:
    """
    Reporter that writes each error to a logger, optionally passing it on
    to another reporter as well.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 forward_to: Optional[ErrorReporter] = None):
        self.logger = logger or logging.getLogger("lox.scanner")
        self.forward_to = forward_to

    def report(self, line: int, message: str) -> None:
        self.logger.error("[line %d] Error: %s", line, message)
        if self.forward_to is not None:
            self.forward_to.report(line, message)

    def add(self, diagnostic: Diagnostic) -> None:
        """Log a full diagnostic and pass it on with its code and location."""
        self.logger.error("%s", diagnostic)
        if self.forward_to is None:
            return
        add = getattr(self.forward_to, "add", None)
        if add is not None:
            add(diagnostic)
        else:
            self.forward_to.report(diagnostic.line, diagnostic.message)


# Error codes for categorization
ERROR_CODES = {
    "LOX001": "Unexpected character",
    "LOX002": "Unterminated string",
}

UNEXPECTED_CHARACTER = "Unexpected character."
UNTERMINATED_STRING = "Unterminated string."


def create_unexpected_character_error(char: str, line: int) -> Diagnostic:
    """Create a diagnostic for a character no lexeme can start with."""
    return Diagnostic(
        line=line,
        message=UNEXPECTED_CHARACTER,
        code="LOX001",
        where=f" at '{char}'",
    )


def create_unterminated_string_error(line: int) -> Diagnostic:
    """Create a diagnostic for a string that runs into end of input."""
    return Diagnostic(
        line=line,
        message=UNTERMINATED_STRING,
        code="LOX002",
    )
