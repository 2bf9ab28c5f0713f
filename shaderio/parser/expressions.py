"""
Expression splitting and filtering for the GLSL interface parser.

Once blocks are extracted, GLSL expressions end with ";". Each expression is
split into words, and filters decide which word lists can be declarations
worth reading.
"""

from collections.abc import Callable

from shaderio.parser.constants import (
    DECLARATION_KEYWORDS,
    GLSL_TYPES,
    LAYOUT_KEYWORD,
    PRECISION_KEYWORD,
    PRECISION_STATEMENT_LENGTH,
    STRUCT_QUALIFIER,
)

ExpressionFilter = Callable[[list[str]], bool]


def split_expressions(code: str) -> list[list[str]]:
    """Split code on ";" into lists of whitespace-delimited words.

    Empty expressions are dropped.
    """
    return [words for words in (e.split() for e in code.split(";")) if words]


def shader_io_filter(words: list[str]) -> bool:
    """Keep expressions that can declare shader input/output variables.

    These start with "uniform", "in", "out", a layout qualifier, or a
    precision modifier followed by a declaration. A bare precision statement
    (`precision highp float`) is not a variable and is dropped.
    """
    if not words:
        return False
    initial = words[0]
    return (
        initial in DECLARATION_KEYWORDS
        or LAYOUT_KEYWORD in initial
        or (
            PRECISION_KEYWORD in initial
            and len(words) > PRECISION_STATEMENT_LENGTH
        )
    )


def struct_filter(words: list[str]) -> bool:
    """Keep only expressions that declare a struct."""
    return bool(words) and words[0] == STRUCT_QUALIFIER


def create_variables_filter(extra_types: frozenset[str]) -> ExpressionFilter:
    """Create the filter used for declarations inside a block.

    Members of a uniform block or struct have no qualifier of their own, so
    on top of shader_io_filter() this accepts expressions starting with a
    built-in type or with one of the extra (struct) types, e.g. the
    `Material material` member in:

        uniform PerScene { Material material; } u_perScene;

    Args:
        extra_types: Names of the user types known at this point

    Returns:
        An expression filter
    """

    def variables_filter(words: list[str]) -> bool:
        if not words:
            return False
        return (
            words[0] in GLSL_TYPES
            or words[0] in extra_types
            or shader_io_filter(words)
        )

    return variables_filter
