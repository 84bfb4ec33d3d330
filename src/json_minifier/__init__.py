"""
JSON Minifier - Whitespace-stripping JSON minifier for asset pipelines.

Re-emits JSON token by token with no insignificant whitespace, keeping
every string and number exactly as written.
"""

__version__ = "1.0.0"

from .filtering import should_minify
from .minifier import JSONMinifier, minify_json
from .tokenizer import JSONTokenizer
from .types import (
    AssetMinifierInterface,
    JSONMinifierError,
    JSONParseError,
    MinificationError,
    Token,
    TokenType,
)
from .writer import CompactTokenWriter

__all__ = [
    "JSONMinifier",
    "minify_json",
    "should_minify",
    "JSONTokenizer",
    "CompactTokenWriter",
    "Token",
    "TokenType",
    "AssetMinifierInterface",
    "JSONMinifierError",
    "JSONParseError",
    "MinificationError",
]
