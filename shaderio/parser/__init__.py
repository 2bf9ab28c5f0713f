"""
Interface extraction for GLSL ES 3.00 shaders.

This module provides the top-level interface for reading the `in`, `out` and
`uniform` variables, uniform blocks and struct definitions declared in a
shader source string.
"""

from collections.abc import Iterable

from loguru import logger

from shaderio.parser.blocks import BlockTable, extract_blocks
from shaderio.parser.errors import ParserError
from shaderio.parser.expressions import struct_filter
from shaderio.parser.models import GLSLVariable
from shaderio.parser.reader import read_expressions
from shaderio.parser.sanitizer import sanitize
from shaderio.parser.validation import to_full_variable


def _known_types(
    struct_names: Iterable[str | None], extra_types: Iterable[str]
) -> frozenset[str]:
    """Merge struct names found in the code with caller-supplied type names.

    Raises:
        ParserError: If extra_types is a single string instead of an iterable
            of names
    """
    if isinstance(extra_types, str):
        raise ParserError(
            f"extra_types must be an iterable of type names, got '{extra_types}'"
        )
    names = {name for name in struct_names if isinstance(name, str) and name}
    return frozenset(names).union(extra_types)


def parse(code: str, *, extra_types: Iterable[str] = ()) -> list[GLSLVariable]:
    """Parse the interface variables declared in GLSL shader code.

    This is the main entry point of the parser. It works in three stages:

    1. Remove macros and comments, their content might look like declarations.
    2. Move the contents of every "( )" and "{ }" into a block table, leaving
       their index in the code.
    3. Read every expression (ending with ";") that can declare a variable.

    Struct definitions are read in a first pass over the code so that their
    names can be used as types in the main pass, e.g. for uniform block
    members. They are placed at the end of the returned list.

    Args:
        code: The GLSL shader code
        extra_types: Additional user type names to accept as variable types,
            e.g. structs declared in another shader stage

    Returns:
        The declared variables in source order, followed by the struct
        definitions in source order

    Raises:
        ParserError: If code is not a string, or any declaration cannot be
            read into a full variable

    Examples:
        >>> [v.name for v in parse("in vec2 a_uv; out vec4 color;")]
        ['a_uv', 'color']
    """
    if not isinstance(code, str):
        raise ParserError(f"Shader code must be a string, got {type(code).__name__}")

    logger.debug("Parsing shader interface")
    table = BlockTable()
    shader_code = extract_blocks(sanitize(code), table)

    structs = read_expressions(shader_code, table, expression_filter=struct_filter)
    known_types = _known_types((s.name for s in structs), extra_types)
    logger.debug(f"Known user types: {sorted(known_types)}")

    variables = read_expressions(shader_code, table, extra_types=known_types)
    result = [to_full_variable(v) for v in [*variables, *structs]]
    logger.debug(
        f"Parsing complete: {len(variables)} variables, {len(structs)} structs"
    )
    return result


__all__ = ["ParserError", "parse"]
