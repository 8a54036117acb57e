"""
Lox Scanner Package

Implements the lexical analyzer for the Lox scripting language.

Key Features:
- Single-pass scanning with one character of lookahead
- Line tracking, including strings that span lines
- Case-sensitive reserved word recognition
- Error recovery: lexical errors are reported and scanning continues

Author: xwest
"""

from .tokens import Token, TokenType, CharClass, KEYWORDS, lookup_keyword, classify
from .scanner import Scanner, Cursor, scan_tokens
from .errors import (
    Diagnostic, Diagnostics, ErrorReporter, LoggingReporter, ScanError
)

__all__ = [
    "Scanner",
    "Cursor",
    "scan_tokens",
    "Token",
    "TokenType",
    "CharClass",
    "KEYWORDS",
    "lookup_keyword",
    "classify",
    "Diagnostic",
    "Diagnostics",
    "ErrorReporter",
    "LoggingReporter",
    "ScanError",
]
