"""
Exceptions and error handling for the GLSL interface parser.

This module defines the exception raised when shader source cannot be read
into a complete set of interface declarations.
"""

import json
from typing import Any


class ParserError(Exception):
    """Exception raised when a declaration cannot be read into a full variable.

    This is the only exception raised by the parser. Any malformed declaration,
    at the top level or inside a block, aborts the whole parse.

    The error keeps the partially read record and the list of problems found
    while validating it, so callers can report what was missing.

    Examples:
        >>> raise ParserError("Unable to read a full GLSL variable")
        ParserError: Unable to read a full GLSL variable
    """

    def __init__(
        self,
        message: str,
        variable: dict[str, Any] | None = None,
        problems: list[str] | None = None,
    ):
        """Initialize the exception with a message and the offending record.

        Args:
            message: The error message
            variable: Optional partial record (as a dict) that failed
            problems: Optional list of validation problems
        """
        self.message = message
        self.variable = variable
        self.problems = list(problems or [])

        details = ""
        if self.variable is not None:
            details = f": {json.dumps(self.variable)}"
        if self.problems:
            details += f" ({'; '.join(self.problems)})"

        super().__init__(f"{message}{details}")
