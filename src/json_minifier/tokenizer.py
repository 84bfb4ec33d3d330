"""Incremental pull-based JSON tokenizer."""

import logging
import re
from enum import Enum
from typing import Iterator, List, Optional
from .types import JSONParseError, Token, TokenType


_WHITESPACE_RE = re.compile(r"[ \t\n\r]*")
_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
# Plain run of string content: no quote, backslash or control character.
_STRING_CHUNK_RE = re.compile(r'[^"\\\x00-\x1f]*')
_HEX4_RE = re.compile(r"[0-9a-fA-F]{4}")
_LITERALS = {
    "t": ("true", TokenType.VALUE_TRUE),
    "f": ("false", TokenType.VALUE_FALSE),
    "n": ("null", TokenType.VALUE_NULL),
}
_SIMPLE_ESCAPES = frozenset('"\\/bfnrt')
_BOM = "\ufeff"


class _State(Enum):
    """What the cursor expects to read next."""
    ROOT_VALUE = "root-value"
    END_OF_INPUT = "end-of-input"
    FIRST_KEY = "first-key"        # after '{'
    KEY = "key"                    # after ',' in an object
    COLON = "colon"                # after a field name
    OBJECT_VALUE = "object-value"  # after ':'
    OBJECT_NEXT = "object-next"    # after a member value
    FIRST_ELEMENT = "first-element"  # after '['
    ELEMENT = "element"            # after ',' in an array
    ARRAY_NEXT = "array-next"      # after an element


class JSONTokenizer:
    """
    Cursor over JSON text yielding one token per ``next_token`` call.

    Commas and colons are consumed and validated but not reported as tokens;
    the token stream alone is enough to re-create them. Only the container
    stack grows with the document (one entry per nesting level), so memory
    use does not depend on document size.
    """

    def __init__(self, text: str, logger: Optional[logging.Logger] = None):
        """
        Initialize the tokenizer.

        Args:
            text: JSON text to tokenize
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._text: Optional[str] = text
        self._pos = 1 if text.startswith(_BOM) else 0
        self._stack: List[TokenType] = []
        self._state = _State.ROOT_VALUE
        self._closed = False

    def __enter__(self) -> "JSONTokenizer":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    @property
    def depth(self) -> int:
        """Current container nesting depth."""
        return len(self._stack)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the input text. Further reads raise ``ValueError``."""
        self._closed = True
        self._text = None
        self._stack = []

    def next_token(self) -> Optional[Token]:
        """
        Advance to the next token.

        Returns:
            The next Token, or None once the root value and any trailing
            whitespace have been consumed (or the input holds no value).

        Raises:
            JSONParseError: If the input is not well-formed JSON
            ValueError: If the tokenizer has been closed
        """
        if self._closed:
            raise ValueError("I/O operation on closed tokenizer")

        self._skip_whitespace()
        state = self._state

        if state == _State.END_OF_INPUT:
            if self._pos < len(self._text):
                self._fail("Extra data after root value")
            return None

        if self._pos >= len(self._text):
            if state == _State.ROOT_VALUE:
                self._state = _State.END_OF_INPUT
                return None
            self._fail(self._eof_reason())

        char = self._text[self._pos]

        if state in (_State.OBJECT_NEXT, _State.ARRAY_NEXT):
            closer = "}" if state == _State.OBJECT_NEXT else "]"
            if char == closer:
                return self._close_container()
            if char != ",":
                self._fail(f"Expecting ',' or '{closer}' delimiter")
            self._pos += 1
            self._state = _State.KEY if state == _State.OBJECT_NEXT else _State.ELEMENT
            self._skip_whitespace()
            if self._pos >= len(self._text):
                self._fail(self._eof_reason())
            char = self._text[self._pos]
            state = self._state

        if state == _State.COLON:
            if char != ":":
                self._fail("Expecting ':' delimiter")
            self._pos += 1
            self._state = _State.OBJECT_VALUE
            self._skip_whitespace()
            if self._pos >= len(self._text):
                self._fail(self._eof_reason())
            char = self._text[self._pos]
            state = self._state

        if state in (_State.FIRST_KEY, _State.KEY):
            if char == "}" and state == _State.FIRST_KEY:
                return self._close_container()
            if char != '"':
                self._fail("Expecting property name enclosed in double quotes")
            start = self._pos
            self._scan_string()
            self._state = _State.COLON
            return Token(TokenType.FIELD_NAME, self._text[start:self._pos], start)

        if char == "]" and state == _State.FIRST_ELEMENT:
            return self._close_container()

        return self._read_value(char)

    def _read_value(self, char: str) -> Token:
        """Read a value starting at ``char``: a scalar or a container start marker."""
        start = self._pos
        if char == "{":
            self._pos += 1
            self._stack.append(TokenType.START_OBJECT)
            self._state = _State.FIRST_KEY
            return Token(TokenType.START_OBJECT, "{", start)
        if char == "[":
            self._pos += 1
            self._stack.append(TokenType.START_ARRAY)
            self._state = _State.FIRST_ELEMENT
            return Token(TokenType.START_ARRAY, "[", start)

        if char == '"':
            self._scan_string()
            token_type = TokenType.VALUE_STRING
        elif char == "-" or "0" <= char <= "9":
            match = _NUMBER_RE.match(self._text, start)
            if match is None:
                self._fail("Invalid number")
            self._pos = match.end()
            # Reject "01", "1." and "1e" rather than splitting them into two tokens.
            if self._pos < len(self._text) and self._text[self._pos] in "0123456789.eE+-":
                self._fail("Invalid number")
            token_type = TokenType.VALUE_NUMBER
        elif char in _LITERALS:
            literal, token_type = _LITERALS[char]
            if not self._text.startswith(literal, start):
                self._fail(f"Unrecognized token, expected '{literal}'")
            self._pos += len(literal)
        elif char in "}]":
            self._fail(f"Unexpected close marker '{char}'")
        else:
            self._fail(f"Unexpected character {char!r}")

        self._after_value()
        return Token(token_type, self._text[start:self._pos], start)

    def _scan_string(self) -> None:
        """Advance past a string literal starting at the opening quote."""
        text = self._text
        pos = self._pos + 1
        while True:
            pos = _STRING_CHUNK_RE.match(text, pos).end()
            if pos >= len(text):
                self._fail("Unterminated string", self._pos)
            char = text[pos]
            if char == '"':
                self._pos = pos + 1
                return
            if char == "\\":
                escape = text[pos + 1:pos + 2]
                if not escape:
                    self._fail("Unterminated string", self._pos)
                elif escape == "u":
                    if not _HEX4_RE.match(text, pos + 2):
                        self._fail("Invalid \\uXXXX escape", pos)
                    pos += 6
                elif escape in _SIMPLE_ESCAPES:
                    pos += 2
                else:
                    self._fail(f"Invalid escape '\\{escape}'", pos)
            else:
                self._fail("Invalid control character in string", pos)

    def _close_container(self) -> Token:
        """Pop the innermost container and return its close-marker token."""
        start = self._pos
        opener = self._stack.pop()
        self._pos += 1
        self._after_value()
        if opener == TokenType.START_OBJECT:
            return Token(TokenType.END_OBJECT, "}", start)
        return Token(TokenType.END_ARRAY, "]", start)

    def _after_value(self) -> None:
        """Set the expected next state once a complete value has been read."""
        if not self._stack:
            self._state = _State.END_OF_INPUT
        elif self._stack[-1] == TokenType.START_OBJECT:
            self._state = _State.OBJECT_NEXT
        else:
            self._state = _State.ARRAY_NEXT

    def _skip_whitespace(self) -> None:
        """Advance past insignificant whitespace."""
        self._pos = _WHITESPACE_RE.match(self._text, self._pos).end()

    def _eof_reason(self) -> str:
        """Describe a premature end of input for the current container."""
        if self._stack:
            kind = "object" if self._stack[-1] == TokenType.START_OBJECT else "array"
            return f"Unexpected end-of-input: expected close marker for {kind}"
        return "Unexpected end-of-input"

    def _fail(self, reason: str, offset: Optional[int] = None) -> None:
        """Raise JSONParseError for ``reason`` at ``offset`` (default: the cursor)."""
        if offset is None:
            offset = self._pos
        line = self._text.count("\n", 0, offset) + 1
        column = offset - self._text.rfind("\n", 0, offset)
        self.logger.debug(f"Tokenizer rejected input: {reason} at char {offset}")
        raise JSONParseError(reason, offset, line, column)
