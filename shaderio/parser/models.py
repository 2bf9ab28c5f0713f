"""
Data models and structures for the GLSL interface parser.

This module contains the dataclass definitions used throughout the parser to
represent declarations while they are being read (PartialVariable) and once
they are complete (GLSLVariable), plus the predicates used to sort them.
"""

from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Any

from shaderio.parser.constants import RECORD_KEYS, STRUCT_QUALIFIER


def _record_dict(variable: Any) -> dict[str, Any]:
    """Convert a variable into a dict keyed by the record wire names."""
    result: dict[str, Any] = {}
    for f in fields(variable):
        value = getattr(variable, f.name)
        if f.name == "block" and value is not None:
            value = [child.to_dict() for child in value]
        result[RECORD_KEYS[f.name]] = value
    return result


@dataclass(frozen=True)
class GLSLVariable:
    """A fully read GLSL interface declaration.

    Attributes:
        qualifier: "in", "uniform", "out", or "struct" for struct definitions
        type: A built-in GLSL type, "block" or "struct"
        name: Declared identifier
        amount: Array length, 1 for non-arrays
        is_invariant: Whether the declaration has the invariant modifier
        is_centroid: Whether the declaration has the centroid modifier
        layout: Layout qualifier contents with whitespace removed
        precision: Precision modifier of this declaration
        block: Member declarations when type is "block"
        struct_name: Name of the struct used when type is "struct"
    """

    qualifier: str
    type: str
    name: str
    amount: int = 1
    is_invariant: bool = False
    is_centroid: bool = False
    layout: str | None = None
    precision: str | None = None
    block: tuple["GLSLVariable", ...] | None = None
    struct_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-ready dict, blocks included."""
        return _record_dict(self)


@dataclass
class PartialVariable:
    """Accumulator for a declaration being read word by word.

    Every attribute is optional until the accumulator is validated into a
    GLSLVariable. An amount of None means the array size could not be read.
    """

    qualifier: str | None = None
    type: str | None = None
    name: str | None = None
    amount: int | None = 1
    is_invariant: bool = False
    is_centroid: bool = False
    layout: str | None = None
    precision: str | None = None
    block: tuple[GLSLVariable, ...] | None = None
    struct_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _record_dict(self)


def is_input_variable(variable: GLSLVariable) -> bool:
    """Return True unless the variable is an "out" variable."""
    return variable.qualifier != "out"


def is_output_variable(variable: GLSLVariable) -> bool:
    """Return True if the variable is an "out" variable."""
    return variable.qualifier == "out"


def find_struct(variables: Iterable[GLSLVariable], name: str) -> GLSLVariable | None:
    """Find the struct definition with the given name.

    Struct definitions are part of the list returned by parse(); this is how
    a member with type "struct" gets resolved to the struct fields.

    Args:
        variables: Variables returned by parse()
        name: Struct name, usually taken from a member's struct_name

    Returns:
        The struct definition record, or None if there is none with that name
    """
    for variable in variables:
        if variable.qualifier == STRUCT_QUALIFIER and variable.name == name:
            return variable
    return None
