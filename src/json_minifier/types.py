"""Core type definitions for the JSON Minifier."""

import json
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Union


PathLike = Union[str, os.PathLike]


class TokenType(Enum):
    """Enumeration of JSON lexical token types."""
    START_OBJECT = "start-object"
    END_OBJECT = "end-object"
    START_ARRAY = "start-array"
    END_ARRAY = "end-array"
    FIELD_NAME = "field-name"
    VALUE_STRING = "string"
    VALUE_NUMBER = "number"
    VALUE_TRUE = "true"
    VALUE_FALSE = "false"
    VALUE_NULL = "null"

    @property
    def is_scalar(self) -> bool:
        return self in _SCALAR_TYPES

    @property
    def is_container_start(self) -> bool:
        return self in (TokenType.START_OBJECT, TokenType.START_ARRAY)

    @property
    def is_container_end(self) -> bool:
        return self in (TokenType.END_OBJECT, TokenType.END_ARRAY)


_SCALAR_TYPES = frozenset({
    TokenType.VALUE_STRING,
    TokenType.VALUE_NUMBER,
    TokenType.VALUE_TRUE,
    TokenType.VALUE_FALSE,
    TokenType.VALUE_NULL,
})


@dataclass(frozen=True)
class Token:
    """
    One lexical unit of JSON text.

    ``text`` is the exact source lexeme: string and field-name tokens keep
    their quotes and escape sequences, number tokens keep their literal form.
    """
    type: TokenType
    text: str
    offset: int = 0

    @property
    def value(self) -> Any:
        """Decoded value of the token, for inspection only."""
        if self.type in (TokenType.VALUE_STRING, TokenType.FIELD_NAME, TokenType.VALUE_NUMBER):
            return json.loads(self.text)
        if self.type == TokenType.VALUE_TRUE:
            return True
        if self.type == TokenType.VALUE_FALSE:
            return False
        if self.type == TokenType.VALUE_NULL:
            return None
        return self.text


class JSONMinifierError(Exception):
    """Base exception for the JSON Minifier."""


class JSONParseError(JSONMinifierError, ValueError):
    """Raised by the tokenizer when the input cannot be lexed as JSON."""

    def __init__(self, reason: str, offset: int, line: int, column: int):
        super().__init__(f"{reason} at line {line}, column {column} (char {offset})")
        self.reason = reason
        self.offset = offset
        self.line = line
        self.column = column


class MinificationError(JSONMinifierError):
    """Raised when minification fails for a reason other than malformed input."""

    def __init__(self, message: str, source_path: Optional[PathLike] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.source_path = source_path
        self.cause = cause


# Abstract base classes for interfaces

class AssetMinifierInterface(ABC):
    """Abstract interface shared by build-pipeline asset minifiers."""

    @abstractmethod
    def minify(self, content: str, source_path: PathLike) -> str:
        """Return minified content, or the original content if it must be left alone."""
        pass

    @abstractmethod
    def get_supported_extensions(self) -> FrozenSet[str]:
        """Return the file extensions (without dot) this minifier handles."""
        pass

    @abstractmethod
    def should_minify(self, path: PathLike) -> bool:
        """Decide from the path alone whether the file should be minified."""
        pass

    @abstractmethod
    def configure(self, options: Optional[Mapping[str, Any]]) -> None:
        """Accept plugin configuration options."""
        pass
