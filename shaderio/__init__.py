from shaderio.parser import parse
from shaderio.parser.errors import ParserError
from shaderio.parser.models import (
    GLSLVariable,
    find_struct,
    is_input_variable,
    is_output_variable,
)

__version__ = "0.1.0"


__all__ = [
    "GLSLVariable",
    "ParserError",
    "find_struct",
    "is_input_variable",
    "is_output_variable",
    "parse",
]
