"""
Token definitions for the Lox scanner.

This module defines:
- TokenType, the closed set of token kinds the scanner can emit
- Token, the immutable record handed to the parser
- The reserved word table and keyword lookup
- Character classes used by the scanner to dispatch on the next character

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Mapping


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # name, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), decoded literal value
    and the line the token was scanned on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # float for NUMBER, str for STRING, else None
    line: int

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in {TokenType.STRING, TokenType.NUMBER}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in RESERVED_TYPES

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


# Reserved words, spelled exactly as they must appear in source.
KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

RESERVED_TYPES = frozenset(KEYWORDS.values())


def lookup_keyword(text: str, keywords: Mapping[str, TokenType] = KEYWORDS) -> TokenType:
    """
    Classify an identifier-shaped lexeme.

    Args:
        text: The scanned identifier text
        keywords: Reserved word table (case-sensitive)

    Returns:
        The reserved token type, or IDENTIFIER when the spelling is not reserved
    """
    return keywords.get(text, TokenType.IDENTIFIER)


# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operator start -> (type without '=', type with trailing '=')
TWO_CHAR_OPERATORS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE_CHARS = frozenset(" \r\t")


class CharClass(Enum):
    """Classes of lexeme-start characters, in dispatch order."""
    PUNCTUATION = auto()
    OPERATOR = auto()
    SLASH = auto()
    WHITESPACE = auto()
    NEWLINE = auto()
    QUOTE = auto()
    DIGIT = auto()
    ALPHA = auto()
    OTHER = auto()


def is_digit(char: str) -> bool:
    """ASCII digit check (str.isdigit accepts other Unicode digits)."""
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    """ASCII letter or underscore."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_alpha_numeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


def classify(char: str) -> CharClass:
    """
    Classify the first character of a lexeme.

    Fixed characters are checked before the digit and letter predicates.
    """
    if char in SINGLE_CHAR_TOKENS:
        return CharClass.PUNCTUATION
    if char in TWO_CHAR_OPERATORS:
        return CharClass.OPERATOR
    if char == "/":
        return CharClass.SLASH
    if char in WHITESPACE_CHARS:
        return CharClass.WHITESPACE
    if char == "\n":
        return CharClass.NEWLINE
    if char == '"':
        return CharClass.QUOTE
    if is_digit(char):
        return CharClass.DIGIT
    if is_alpha(char):
        return CharClass.ALPHA
    return CharClass.OTHER
