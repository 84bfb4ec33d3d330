"""Main JSON Minifier implementation."""

import io
import logging
from typing import Any, FrozenSet, Mapping, Optional
from .filtering import should_minify
from .tokenizer import JSONTokenizer
from .types import AssetMinifierInterface, JSONParseError, MinificationError, PathLike
from .writer import CompactTokenWriter


class JSONMinifier(AssetMinifierInterface):
    """
    JSON minifier that removes insignificant whitespace.

    Tokens are pulled from a JSONTokenizer and copied straight to a
    CompactTokenWriter, so no document tree is ever built and every string
    and number keeps its exact source text.

    Malformed input is not an error for the caller: a warning is logged and
    the original content is returned unchanged. Any other failure is raised
    as MinificationError.

    Instances keep no per-call state and may be shared between threads.
    """

    SUPPORTED_EXTENSIONS: FrozenSet[str] = frozenset({"json"})

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the minifier.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def minify(self, content: str, source_path: PathLike) -> str:
        """
        Minify JSON content by removing whitespace between tokens.

        Args:
            content: JSON text to minify
            source_path: Path of the source file, used for diagnostics only

        Returns:
            Minified JSON text, or ``content`` unchanged if it is malformed

        Raises:
            MinificationError: If minification fails for any other reason
        """
        try:
            buffer = io.StringIO()
            with JSONTokenizer(content) as tokenizer, CompactTokenWriter(buffer) as writer:
                while True:
                    token = tokenizer.next_token()
                    if token is None:
                        break
                    writer.copy_token(token)
            return buffer.getvalue()

        except JSONParseError as e:
            self.logger.warning(f"Malformed JSON in {source_path}, skipping minification: {e}")
            return content
        except Exception as e:
            raise MinificationError(
                f"Failed to minify JSON file: {source_path}",
                source_path=source_path,
                cause=e,
            ) from e

    def get_supported_extensions(self) -> FrozenSet[str]:
        """Return the file extensions handled by this minifier."""
        return self.SUPPORTED_EXTENSIONS

    def should_minify(self, path: PathLike) -> bool:
        """
        Determine whether a file should be minified.

        Skips package.json, tsconfig.json and lock files
        (``*-lock.json``, ``*.lock.json``).
        """
        return should_minify(path)

    def configure(self, options: Optional[Mapping[str, Any]]) -> None:
        """
        Accept configuration options.

        No options are currently supported; anything passed is ignored.
        """
        if options:
            self.logger.debug(f"Ignoring unsupported JSON minifier options: {sorted(options)}")


_default_minifier = JSONMinifier()


def minify_json(content: str, source_path: PathLike = "<string>") -> str:
    """Minify ``content`` with a shared default JSONMinifier."""
    return _default_minifier.minify(content, source_path)
