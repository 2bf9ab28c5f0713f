"""Tests for the parser blocks module."""

from shaderio.parser.blocks import BlockTable, extract_blocks, replace_blocks


class TestBlockTable:
    """Tests for the BlockTable class."""

    def test_add_returns_index(self):
        """Test that contents are appended and their index returned."""
        # Arrange
        table = BlockTable()

        # Act
        first = table.add("location = 0")
        second = table.add("std140")

        # Assert
        assert (first, second) == (0, 1)
        assert len(table) == 2
        assert table[1] == "std140"

    def test_resolve(self, table):
        """Test resolving decimal references, with surrounding spaces."""
        # Arrange
        table.add("a")
        table.add("b")

        # Act & Assert
        assert table.resolve("1") == "b"
        assert table.resolve(" 0 ") == "a"

    def test_resolve_invalid_reference(self, table):
        """Test that non-index references resolve to None."""
        # Arrange
        table.add("a")

        # Act & Assert
        assert table.resolve("1") is None
        assert table.resolve("-1") is None
        assert table.resolve("location") is None
        assert table.resolve("") is None


class TestReplaceBlocks:
    """Tests for the replace_blocks function."""

    def test_replace_sibling_blocks(self, table):
        """Test that every sibling block is replaced by its index."""
        # Arrange
        code = "layout(location = 0) in vec2 a; layout(location=1) in vec2 b;"

        # Act
        result = replace_blocks(code, "(", ")", table)

        # Assert
        assert result == "layout(0) in vec2 a; layout(1) in vec2 b;"
        assert table[0] == "location = 0"
        assert table[1] == "location=1"

    def test_empty_block_is_not_stored(self, table):
        """Test that an empty block such as '()' is left as is."""
        # Act
        result = replace_blocks("void main() {}", "(", ")", table)

        # Assert
        assert result == "void main() {}"
        assert len(table) == 0

    def test_same_content_in_different_places(self, table):
        """Test that each block is replaced where it is, not at a copy of it."""
        # Arrange
        code = "f(a) g(a)"

        # Act
        result = replace_blocks(code, "(", ")", table)

        # Assert
        assert result == "f(0) g(1)"

    def test_nested_blocks_single_pass(self, table):
        """Test that only the first close of each fragment is considered."""
        # Arrange
        code = "vec4(clip * vec2(1, -1), 0, 1)"

        # Act
        result = replace_blocks(code, "(", ")", table)

        # Assert
        assert result == "vec4(clip * vec2(0), 0, 1)"
        assert table[0] == "1, -1"

    def test_unclosed_block(self, table):
        """Test that a block without a closing delimiter is not replaced."""
        # Act
        result = replace_blocks("uniform Block { float a;", "{", "}", table)

        # Assert
        assert result == "uniform Block { float a;"
        assert len(table) == 0


class TestExtractBlocks:
    """Tests for the extract_blocks function."""

    def test_parentheses_before_braces(self, table):
        """Test that brace contents are stored with their parentheses replaced."""
        # Arrange
        code = "void main() { color = texture(u_tex, v_uv); }"

        # Act
        result = extract_blocks(code, table)

        # Assert
        assert result == "void main() {1}"
        assert table[0] == "u_tex, v_uv"
        assert table[1] == " color = texture(0); "

    def test_uniform_block_with_layout(self, table):
        """Test extracting a uniform block declaration with a layout."""
        # Arrange
        code = "layout(std140) uniform Matrices { mat4 view; } m;"

        # Act
        result = extract_blocks(code, table)

        # Assert
        assert result == "layout(0) uniform Matrices {1} m;"
        assert table[0] == "std140"
        assert table[1] == " mat4 view; "
