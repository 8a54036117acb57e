"""
Lox Scanner - turns source text into a flat list of tokens

Single pass, one character of lookahead plus one more for numbers.
Errors are reported and the scan carries on, so a single run can
surface every lexical problem in the file.

xwest
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from .tokens import (
    Token, TokenType, CharClass, KEYWORDS, SINGLE_CHAR_TOKENS, TWO_CHAR_OPERATORS,
    classify, is_digit, is_alpha_numeric, lookup_keyword
)
from .errors import (
    Diagnostic, Diagnostics, ErrorReporter,
    create_unexpected_character_error, create_unterminated_string_error
)

logger = logging.getLogger(__name__)


@dataclass
class Cursor:
    """
    Scan position over the source buffer.

    start: first character of the lexeme being scanned
    current: next unread character
    line: 1-based line of `current`
    """
    start: int = 0
    current: int = 0
    line: int = 1


class Scanner:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF.
    Lexical errors go to the reporter and never interrupt the scan.
    """

    def __init__(
        self,
        source: str,
        reporter: Optional[ErrorReporter] = None,
        keywords: Optional[Mapping[str, TokenType]] = None
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            reporter: Sink for lexical errors (defaults to a fresh Diagnostics)
            keywords: Reserved word table (defaults to the Lox keywords)
        """
        self.source = source
        self.reporter = reporter if reporter is not None else Diagnostics()
        self.keywords = keywords if keywords is not None else KEYWORDS
        self.cursor = Cursor()
        self.tokens: List[Token] = []
        self.errors: List[Diagnostic] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens, always ending with exactly one EOF token
        """
        self.cursor = Cursor()
        self.tokens = []
        self.errors = []
        logger.debug("scanning %d characters", len(self.source))

        while not self.is_at_end():
            self.cursor.start = self.cursor.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.cursor.line))

        logger.debug("scanned %d tokens over %d lines, %d errors",
                     len(self.tokens), self.cursor.line, len(self.errors))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.cursor.current >= len(self.source)

    def has_errors(self) -> bool:
        """Check if the last scan reported any errors."""
        return len(self.errors) > 0

    @property
    def line(self) -> int:
        return self.cursor.line

    def _scan_token(self):
        """Recognize one lexeme starting at cursor.start."""
        char = self._advance()
        char_class = classify(char)

        if char_class is CharClass.PUNCTUATION:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char_class is CharClass.OPERATOR:
            plain, with_equal = TWO_CHAR_OPERATORS[char]
            self._add_token(with_equal if self._match("=") else plain)
        elif char_class is CharClass.SLASH:
            if self._match("/"):
                # Comment runs to end of line; the newline is scanned next
                while self._peek() != "\n" and not self.is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char_class is CharClass.WHITESPACE:
            pass
        elif char_class is CharClass.NEWLINE:
            self.cursor.line += 1
        elif char_class is CharClass.QUOTE:
            self._string()
        elif char_class is CharClass.DIGIT:
            self._number()
        elif char_class is CharClass.ALPHA:
            self._identifier()
        else:
            self._error(create_unexpected_character_error(char, self.cursor.line))

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        start_line = self.cursor.line

        while self._peek() != '"' and not self.is_at_end():
            if self._peek() == "\n":
                self.cursor.line += 1
            self._advance()

        if self.is_at_end():
            self._error(create_unterminated_string_error(self.cursor.line))
            return

        self._advance()  # closing quote

        # No escape sequences in Lox, the literal is the raw text
        value = self.source[self.cursor.start + 1:self.cursor.current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _number(self):
        """Scan a number literal. A trailing '.' is left for the DOT token."""
        while is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()  # the '.'
            while is_digit(self._peek()):
                self._advance()

        text = self.source[self.cursor.start:self.cursor.current]
        self._add_token(TokenType.NUMBER, float(text))

    def _identifier(self):
        while is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.cursor.start:self.cursor.current]
        self._add_token(lookup_keyword(text, self.keywords))

    def _advance(self) -> str:
        """Consume and return the next character."""
        char = self.source[self.cursor.current]
        self.cursor.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is `expected`."""
        if self.is_at_end():
            return False
        if self.source[self.cursor.current] != expected:
            return False
        self.cursor.current += 1
        return True

    def _peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self.cursor.current]

    def _peek_next(self) -> str:
        if self.cursor.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.cursor.current + 1]

    def _add_token(self, token_type: TokenType, literal: Any = None,
                   line: Optional[int] = None):
        text = self.source[self.cursor.start:self.cursor.current]
        if line is None:
            line = self.cursor.line
        self.tokens.append(Token(token_type, text, literal, line))

    def _error(self, diagnostic: Diagnostic):
        self.errors.append(diagnostic)
        # Sinks with add() take the full record; plain sinks get (line, message)
        add = getattr(self.reporter, "add", None)
        if add is not None:
            add(diagnostic)
        else:
            self.reporter.report(diagnostic.line, diagnostic.message)


def scan_tokens(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Sink for lexical errors; errors are dropped if omitted

    Returns:
        List of tokens ending with EOF
    """
    return Scanner(source, reporter).scan_tokens()
