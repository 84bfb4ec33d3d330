"""
File eligibility rules for JSON minification.

Some JSON files must stay human-formatted because external tooling reads
or rewrites them (package manifests, compiler configuration), and lock
files are generated by package managers. Both are left alone.
"""

from pathlib import PurePath
from typing import FrozenSet, Tuple
from .types import PathLike


SKIPPED_FILENAMES: FrozenSet[str] = frozenset({
    "package.json",   # npm manifest
    "tsconfig.json",  # TypeScript compiler options
})

SKIPPED_SUFFIXES: Tuple[str, ...] = (
    "-lock.json",  # package-lock.json, composer-lock.json
    ".lock.json",  # dependencies.lock.json
)


def should_minify(path: PathLike) -> bool:
    """
    Return False for files that must not be minified, True otherwise.

    Only the final path component is inspected and matching is
    case-sensitive; directory names never affect the decision.
    """
    filename = PurePath(path).name

    if filename in SKIPPED_FILENAMES:
        return False

    if filename.endswith(SKIPPED_SUFFIXES):
        return False

    return True
