"""
Validation for the GLSL interface parser.

A PartialVariable is validated once, when it is complete, and frozen into a
GLSLVariable. There is no best-effort output: an incomplete record raises.
"""

from dataclasses import fields

from shaderio.parser.constants import (
    BLOCK_TYPE,
    GLSL_TYPES,
    PRECISIONS,
    QUALIFIERS,
    STRUCT_QUALIFIER,
    STRUCT_TYPE,
)
from shaderio.parser.errors import ParserError
from shaderio.parser.models import GLSLVariable, PartialVariable


def validation_errors(variable: PartialVariable) -> list[str]:
    """List the reasons a partial variable is not a full GLSL variable.

    Args:
        variable: The accumulator to check

    Returns:
        Problems found, empty if the variable is complete
    """
    problems = []

    if variable.qualifier not in QUALIFIERS and variable.qualifier != STRUCT_QUALIFIER:
        problems.append(f"invalid qualifier {variable.qualifier!r}")
    if variable.type not in GLSL_TYPES and variable.type not in (
        BLOCK_TYPE,
        STRUCT_TYPE,
    ):
        problems.append(f"invalid type {variable.type!r}")
    if not isinstance(variable.name, str) or not variable.name:
        problems.append("missing name")

    amount = variable.amount
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
        problems.append(f"invalid array size {amount!r}")

    if not isinstance(variable.is_invariant, bool):
        problems.append("is_invariant is not a boolean")
    if not isinstance(variable.is_centroid, bool):
        problems.append("is_centroid is not a boolean")
    if variable.layout is not None and not isinstance(variable.layout, str):
        problems.append(f"invalid layout {variable.layout!r}")
    if variable.precision is not None and variable.precision not in PRECISIONS:
        problems.append(f"invalid precision {variable.precision!r}")

    if (variable.type == BLOCK_TYPE) != (variable.block is not None):
        problems.append("block members must be present exactly for block types")
    if (variable.type == STRUCT_TYPE) != (variable.struct_name is not None):
        problems.append("struct name must be present exactly for struct types")

    return problems


def is_glsl_variable(variable: PartialVariable) -> bool:
    """Return True if the partial variable can be frozen into a GLSLVariable."""
    return not validation_errors(variable)


def to_full_variable(
    variable: PartialVariable,
    message: str = "Unable to read a full GLSL variable",
) -> GLSLVariable:
    """Freeze a partial variable into a GLSLVariable.

    Args:
        variable: The accumulator read from an expression
        message: Error message used if the variable is incomplete

    Returns:
        The immutable GLSLVariable

    Raises:
        ParserError: If the variable is missing attributes or has invalid ones
    """
    problems = validation_errors(variable)
    if problems:
        raise ParserError(message, variable.to_dict(), problems)
    values = {f.name: getattr(variable, f.name) for f in fields(variable)}
    return GLSLVariable(**values)
