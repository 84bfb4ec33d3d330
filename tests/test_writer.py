"""Tests for the compact token writer."""

import io
import pytest
from json_minifier.types import Token, TokenType
from json_minifier.writer import CompactTokenWriter


START_OBJECT = Token(TokenType.START_OBJECT, "{")
END_OBJECT = Token(TokenType.END_OBJECT, "}")
START_ARRAY = Token(TokenType.START_ARRAY, "[")
END_ARRAY = Token(TokenType.END_ARRAY, "]")


def field(name):
    return Token(TokenType.FIELD_NAME, f'"{name}"')


def number(text):
    return Token(TokenType.VALUE_NUMBER, text)


class TestCompactTokenWriter:
    """Tests for CompactTokenWriter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.buffer = io.StringIO()
        self.writer = CompactTokenWriter(self.buffer)

    def write_all(self, *tokens):
        for token in tokens:
            self.writer.copy_token(token)
        return self.buffer.getvalue()

    def test_object_separators(self):
        """Test colons after field names and commas between members."""
        output = self.write_all(
            START_OBJECT,
            field("a"), number("1"),
            field("b"), Token(TokenType.VALUE_STRING, '"x y"'),
            END_OBJECT,
        )

        assert output == '{"a":1,"b":"x y"}'

    def test_nested_containers(self):
        """Test separators across nested arrays and objects."""
        output = self.write_all(
            START_ARRAY,
            START_OBJECT, field("id"), number("1"), END_OBJECT,
            START_OBJECT, END_OBJECT,
            START_ARRAY, END_ARRAY,
            Token(TokenType.VALUE_NULL, "null"),
            END_ARRAY,
        )

        assert output == '[{"id":1},{},[],null]'

    def test_token_text_written_verbatim(self):
        """Test that numbers and strings are not reformatted."""
        output = self.write_all(
            START_ARRAY,
            number("1.0"), number("1E+2"),
            Token(TokenType.VALUE_STRING, r'"\u00e9\n"'),
            END_ARRAY,
        )

        assert output == r'[1.0,1E+2,"\u00e9\n"]'

    def test_scalar_root(self):
        """Test writing a bare scalar document."""
        assert self.write_all(Token(TokenType.VALUE_TRUE, "true")) == "true"

    def test_rejects_second_root_value(self):
        """Test that only one root value may be written."""
        self.write_all(START_ARRAY, END_ARRAY)

        with pytest.raises(ValueError, match="second root"):
            self.writer.copy_token(number("1"))

    def test_rejects_value_without_field_name(self):
        """Test that object members need a field name."""
        self.writer.copy_token(START_OBJECT)

        with pytest.raises(ValueError, match="without a field name"):
            self.writer.copy_token(number("1"))

    def test_rejects_field_name_in_array(self):
        """Test that field names are only legal inside objects."""
        self.writer.copy_token(START_ARRAY)

        with pytest.raises(ValueError, match="field name"):
            self.writer.copy_token(field("a"))

    def test_rejects_mismatched_close(self):
        """Test that close markers must match the open container."""
        self.writer.copy_token(START_ARRAY)

        with pytest.raises(ValueError, match="end-object"):
            self.writer.copy_token(END_OBJECT)

    def test_close_keeps_target_open(self):
        """Test that closing the writer does not close the sink."""
        with self.writer as writer:
            writer.copy_token(START_ARRAY)
            writer.copy_token(END_ARRAY)

        assert self.writer.closed
        assert not self.buffer.closed
        assert self.buffer.getvalue() == "[]"
        with pytest.raises(ValueError, match="closed"):
            self.writer.copy_token(START_ARRAY)
