"""
Variable reading for the GLSL interface parser.

This module turns the words of a declaration expression into a
PartialVariable. It reads in three steps:

1. the layout qualifier, found between "(" ")" and resolved through the
   block table;
2. every remaining word, classified by WORD_RULES;
3. the block body, found between "{" "}", whose member declarations are read
   recursively with read_expressions().
"""

from collections.abc import Callable, Iterator

from loguru import logger

from shaderio.parser.blocks import BRACES, PARENTHESES, BlockTable
from shaderio.parser.constants import (
    BLOCK_TYPE,
    CENTROID,
    GLSL_TYPES,
    INVARIANT,
    PRECISIONS,
    QUALIFIERS,
    STRUCT_QUALIFIER,
    STRUCT_TYPE,
)
from shaderio.parser.expressions import (
    ExpressionFilter,
    create_variables_filter,
    shader_io_filter,
    split_expressions,
)
from shaderio.parser.models import GLSLVariable, PartialVariable
from shaderio.parser.validation import to_full_variable

# A rule applies a word to the variable and returns True if it claimed it
WordRule = Callable[[str, PartialVariable, frozenset[str]], bool]


def _qualifier_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    if variable.qualifier is None and (
        word in QUALIFIERS or word == STRUCT_QUALIFIER
    ):
        variable.qualifier = word
        return True
    return False


def _struct_type_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    # Takes precedence over built-in types: a struct type also sets `type`
    if variable.struct_name is None and word in extra_types:
        variable.type = STRUCT_TYPE
        variable.struct_name = word
        return True
    return False


def _type_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    if variable.type is None and word in GLSL_TYPES:
        variable.type = word
        return True
    return False


def _array_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    """Read `name[3]` or `[3]`: the size goes to amount, a prefix to name."""
    bracket = word.find("[")
    if bracket < 0:
        return False
    close = word.find("]", bracket)
    size = word[bracket + 1 : close] if close >= 0 else word[bracket + 1 :]
    variable.amount = int(size) if size.isascii() and size.isdigit() else None
    if bracket > 0:
        variable.name = word[:bracket]
    return True


def _centroid_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    if not variable.is_centroid and word == CENTROID:
        variable.is_centroid = True
        return True
    return False


def _invariant_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    if not variable.is_invariant and word == INVARIANT:
        variable.is_invariant = True
        return True
    return False


def _precision_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    if variable.precision is None and word in PRECISIONS:
        variable.precision = word
        return True
    return False


def _name_rule(
    word: str, variable: PartialVariable, extra_types: frozenset[str]
) -> bool:
    if not variable.name:
        variable.name = word
        return True
    return False


# Checked in order, the first rule claiming a word wins
WORD_RULES: tuple[tuple[str, WordRule], ...] = (
    ("qualifier", _qualifier_rule),
    ("struct_type", _struct_type_rule),
    ("type", _type_rule),
    ("array", _array_rule),
    ("centroid", _centroid_rule),
    ("invariant", _invariant_rule),
    ("precision", _precision_rule),
    ("name", _name_rule),
)


def parse_expression_word(
    word: str,
    variable: PartialVariable,
    extra_types: frozenset[str] = frozenset(),
) -> str | None:
    """Place a word in the variable attribute it belongs to.

    Args:
        word: A word of the declaration
        variable: The accumulator, modified in place
        extra_types: User type names (structs) valid as a type

    Returns:
        Name of the rule that claimed the word, or None if it was discarded
    """
    for rule_name, rule in WORD_RULES:
        if rule(word, variable, extra_types):
            return rule_name
    logger.debug(f"Discarding word '{word}' for variable '{variable.name}'")
    return None


def clean_word(word: str) -> str:
    """Remove block markers fused to a word.

    Text from a "{" onwards and text up to a "}" are dropped, so
    "Block{3}" becomes "Block" and "}instance" becomes "instance".
    """
    open_index = word.find("{")
    if open_index >= 0:
        word = word[:open_index]
    close_index = word.find("}")
    if close_index >= 0:
        word = word[close_index + 1 :]
    return word


def words_within(
    words: list[str], left: str, right: str
) -> tuple[list[str] | None, list[str]]:
    """Find the words between the first left and right delimiters.

    Only the first delimiters found are considered. The words up to and
    including the one holding the left delimiter are consumed (this is where
    the `layout` keyword goes); text attached after the right delimiter is
    kept as a word of its own.

    Args:
        words: Words of an expression
        left: Opening delimiter
        right: Closing delimiter

    Returns:
        Tuple of (inner words or None if there are no delimiters, remaining
        words)

    Examples:
        >>> words_within(["layout(0)in", "vec2", "uv"], "(", ")")
        (['0'], ['in', 'vec2', 'uv'])
    """
    start = next((i for i, w in enumerate(words) if left in w), -1)
    end = next((i for i, w in enumerate(words) if right in w), -1)
    if start < 0 or end < start:
        return None, words

    last = words[end]
    right_index = last.index(right)
    if start == end:
        inner = [last[last.index(left) + 1 : right_index]]
    else:
        first = words[start]
        inner = [
            first[first.index(left) + 1 :],
            *words[start + 1 : end],
            last[:right_index],
        ]

    remaining = words[end + 1 :]
    tail = last[right_index + 1 :]
    if tail:
        remaining = [tail, *remaining]
    return inner, remaining


def _resolve_within(
    words: list[str], delimiters: tuple[str, str], table: BlockTable
) -> tuple[str | None, list[str]]:
    inner, remaining = words_within(words, *delimiters)
    if inner is None:
        return None, remaining
    return table.resolve(" ".join(inner)), remaining


def _read_block(
    content: str,
    qualifier: str | None,
    table: BlockTable,
    extra_types: frozenset[str],
) -> Iterator[GLSLVariable]:
    members = read_expressions(
        content,
        table,
        expression_filter=create_variables_filter(extra_types),
        extra_types=extra_types,
    )
    for member in members:
        # Block members inherit the block qualifier unless they set their own
        if member.qualifier is None:
            member.qualifier = qualifier
        yield to_full_variable(member, "Invalid block variable")


def read_variable(
    words: list[str],
    table: BlockTable,
    extra_types: frozenset[str] = frozenset(),
) -> PartialVariable:
    """Read a declaration expression into a partial variable.

    Blocks must have been extracted into the table beforehand, so a layout
    qualifier reads as `layout(N)` and a block body as `{N}`.

    Args:
        words: Words of the expression
        table: Table holding the extracted block contents
        extra_types: User type names (structs) valid as a type

    Returns:
        The partial variable read from the words

    Raises:
        ParserError: If a member of the declaration block is not a full
            variable
    """
    variable = PartialVariable()

    layout, words = _resolve_within(words, PARENTHESES, table)
    if layout is not None:
        variable.layout = "".join(layout.split())

    for word in words:
        word = clean_word(word)
        if word:
            parse_expression_word(word, variable, extra_types)

    body, _ = _resolve_within(words, BRACES, table)
    if body is not None:
        variable.block = tuple(
            _read_block(body, variable.qualifier, table, extra_types)
        )
        variable.type = BLOCK_TYPE

    logger.debug(f"Read variable: {variable}")
    return variable


def read_expressions(
    code: str,
    table: BlockTable,
    *,
    expression_filter: ExpressionFilter = shader_io_filter,
    extra_types: frozenset[str] = frozenset(),
) -> list[PartialVariable]:
    """Read the variables declared in a piece of code.

    This calls read_variable() for each expression kept by the filter, and
    read_variable() calls back into this function for block bodies.

    Args:
        code: Code with its blocks already extracted
        table: Table holding the extracted block contents
        expression_filter: Selects the expressions to read
        extra_types: User type names (structs) valid as a type

    Returns:
        The partial variables, in declaration order
    """
    expressions = split_expressions(code)
    selected = [words for words in expressions if expression_filter(words)]
    logger.debug(f"Reading {len(selected)} of {len(expressions)} expressions")
    return [read_variable(words, table, extra_types) for words in selected]
