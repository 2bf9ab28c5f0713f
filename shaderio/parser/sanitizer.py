"""
Source sanitizing for the GLSL interface parser.

Macros and comments are removed before anything else: their content would
otherwise be split into expressions and read as declarations.
"""

import re

from loguru import logger

# Leftmost match wins, so "//" inside a block comment and "/*" inside a line
# comment are both part of the comment they appear in.
_COMMENT = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)


def strip_directives(code: str) -> str:
    """Remove every preprocessor line (#version, #define, ...)."""
    return "\n".join(
        line for line in code.split("\n") if not line.strip().startswith("#")
    )


def strip_comments(code: str) -> str:
    """Erase the content of all line and block comments.

    Line comments end before their line break. A block comment is replaced
    by a single space so the words around it stay apart.
    """
    return _COMMENT.sub(lambda m: "" if m.group().startswith("//") else " ", code)


def sanitize(code: str) -> str:
    """Remove directives and comments from shader code.

    Args:
        code: Raw GLSL source

    Returns:
        The source without preprocessor lines and comments
    """
    sanitized = strip_comments(strip_directives(code))
    logger.debug(f"Sanitized shader code: {len(code)} -> {len(sanitized)} chars")
    return sanitized
