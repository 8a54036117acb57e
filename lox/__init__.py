"""
Lox Front End Package

Scanner for the Lox scripting language. Produces the token stream a
Lox parser consumes.

Architecture:
    lox/
    └── scanner/         # Tokenization and lexical analysis

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .scanner import Scanner, Token, TokenType, Diagnostics, scan_tokens

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "Diagnostics",
    "scan_tokens",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
