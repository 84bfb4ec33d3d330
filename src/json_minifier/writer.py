"""Compact token writer for re-emitting JSON without whitespace."""

from typing import List, Optional, TextIO
from .types import Token, TokenType


class CompactTokenWriter:
    """
    Incremental writer that appends tokens to a text sink.

    Separators are derived from the token sequence alone: a ``,`` goes
    between siblings and a ``:`` after each field name, with no whitespace
    anywhere. Token text is written verbatim; the writer never decodes or
    re-escapes strings and never reformats numbers. Closing the writer does
    not close the sink.
    """

    def __init__(self, target: TextIO):
        """
        Initialize the writer.

        Args:
            target: Text sink with a ``write`` method (e.g. ``io.StringIO``)
        """
        self._target: Optional[TextIO] = target
        # One entry per open container: whether it already holds an item.
        self._has_items: List[bool] = []
        self._containers: List[TokenType] = []
        self._after_field_name = False
        self._root_written = False
        self._closed = False

    def __enter__(self) -> "CompactTokenWriter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Flush the sink if it supports it and release it."""
        if self._closed:
            return
        self._closed = True
        target, self._target = self._target, None
        self._has_items = []
        self._containers = []
        flush = getattr(target, "flush", None)
        if flush is not None and not getattr(target, "closed", False):
            flush()

    def copy_token(self, token: Token) -> None:
        """
        Write one token, preceded by whatever separator its position needs.

        Raises:
            ValueError: If the writer is closed or the token is not legal here
        """
        if self._closed:
            raise ValueError("I/O operation on closed writer")

        token_type = token.type
        in_object = bool(self._containers) and self._containers[-1] == TokenType.START_OBJECT

        if token_type.is_container_end:
            expected = TokenType.START_OBJECT if token_type == TokenType.END_OBJECT else TokenType.START_ARRAY
            if not self._containers or self._containers[-1] != expected or self._after_field_name:
                raise ValueError(f"Cannot write {token_type.value} here")
            self._containers.pop()
            self._has_items.pop()
            self._target.write(token.text)
            return

        if token_type == TokenType.FIELD_NAME:
            if not in_object or self._after_field_name:
                raise ValueError("Cannot write a field name outside an object")
            self._write_separator(",")
            self._target.write(token.text)
            self._after_field_name = True
            return

        # A value: array element, member value or root value.
        if self._after_field_name:
            self._target.write(":")
            self._after_field_name = False
        elif in_object:
            raise ValueError(f"Cannot write {token_type.value} without a field name")
        elif self._containers:
            self._write_separator(",")
        else:
            if self._root_written:
                raise ValueError("Cannot write a second root value")
            self._root_written = True

        self._target.write(token.text)
        if token_type.is_container_start:
            self._containers.append(token_type)
            self._has_items.append(False)

    def _write_separator(self, separator: str) -> None:
        if self._has_items[-1]:
            self._target.write(separator)
        else:
            self._has_items[-1] = True
