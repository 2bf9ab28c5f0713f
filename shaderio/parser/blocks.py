"""
Block extraction for the GLSL interface parser.

The contents of every "( )" and "{ }" pair are moved into a side table and
replaced in the code by their index in that table, e.g.

    "void main() { color = texture(u_tex, v_uv); }"

becomes "void main() {1}", with blocks[0] == "u_tex, v_uv" and
blocks[1] == " color = texture(0); ". Once blocks are out of the way the
code can be split into expressions on ";" without breaking declarations
that contain block bodies.
"""

from loguru import logger

# Delimiter pairs, in the order they are extracted
PARENTHESES = ("(", ")")
BRACES = ("{", "}")


class BlockTable:
    """Append-only table of extracted block contents.

    One table is shared by every extraction pass and every expression read
    during a single parse() call.
    """

    def __init__(self) -> None:
        self._blocks: list[str] = []

    def __len__(self) -> int:
        return len(self._blocks)

    def __getitem__(self, index: int) -> str:
        return self._blocks[index]

    def add(self, content: str) -> int:
        """Store block content and return the index it was stored at."""
        self._blocks.append(content)
        return len(self._blocks) - 1

    def resolve(self, reference: str) -> str | None:
        """Return the content a decimal reference points to.

        Args:
            reference: Text that was found between two block delimiters

        Returns:
            The stored content, or None if the reference is not an index of
            this table
        """
        reference = reference.strip()
        if not (reference.isascii() and reference.isdigit()):
            return None
        index = int(reference)
        if index >= len(self._blocks):
            return None
        return self._blocks[index]


def replace_blocks(code: str, start: str, end: str, table: BlockTable) -> str:
    """Replace the content between two delimiters by its table index.

    This is a single left-to-right pass: the code is split on the start
    delimiter and, in each fragment, everything up to the first end delimiter
    is stored. Sibling blocks are all extracted; a block nested in another
    block of the same kind is extracted in place of the outer one's tail, and
    the outer one is left as is. Empty blocks such as "()" are not stored.

    Args:
        code: Code to process
        start: Opening delimiter
        end: Closing delimiter
        table: Table receiving the block contents

    Returns:
        The code with each extracted block content replaced by its index
    """
    fragments = code.split(start)
    for i in range(1, len(fragments)):
        fragment = fragments[i]
        end_index = fragment.find(end)
        if end_index > 0:
            index = table.add(fragment[:end_index])
            fragments[i] = f"{index}{fragment[end_index:]}"
    return start.join(fragments)


def extract_blocks(code: str, table: BlockTable) -> str:
    """Extract parentheses and then braces contents into the table.

    Parentheses go first so that the content stored for a brace block already
    has its own parentheses replaced (e.g. a member's layout qualifier).
    """
    code = replace_blocks(code, *PARENTHESES, table)
    code = replace_blocks(code, *BRACES, table)
    logger.debug(f"Extracted {len(table)} blocks")
    return code
