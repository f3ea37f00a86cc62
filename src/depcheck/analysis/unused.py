"""Heuristic unused-dependency check.

A dependency counts as used when any source file contains a textual module
reference to it. Nothing is parsed: aliases, re-exports and computed module
names are invisible, so results must be verified manually.
"""

from collections.abc import Iterable

from depcheck.core.logger.logger import get_logger

# (keyword, quote) pairs; each yields require('x'), from "x", import 'x', ...
REFERENCE_FORMS: tuple[tuple[str, str], ...] = (
    ("require(", "'"),
    ("require(", '"'),
    ("from ", "'"),
    ("from ", '"'),
    ("import ", "'"),
    ("import ", '"'),
)


def reference_tokens(name: str) -> list[str]:
    """Build the substrings that count as a reference to a package.

    Both the bare module and its subpaths are covered, e.g. ``require('lodash')``
    and ``require('lodash/fp')``.

    Args:
        name: Package name.

    Returns:
        List of reference substrings.
    """
    tokens: list[str] = []
    for keyword, quote in REFERENCE_FORMS:
        opening = f"{keyword}{quote}{name}"
        tokens.append(f"{opening}{quote}")
        tokens.append(f"{opening}/")
    return tokens


class UnusedChecker:
    """Flags declared dependencies that no source file references."""

    def __init__(self) -> None:
        """Initialize the checker."""
        self.logger = get_logger(__name__)

    def is_referenced(self, name: str, contents: Iterable[str]) -> bool:
        """Check whether any content references a package.

        Args:
            name: Package name.
            contents: Source file contents.

        Returns:
            True if at least one content contains a reference token.
        """
        tokens = reference_tokens(name)
        return any(token in content for content in contents for token in tokens)

    def check(self, deps: Iterable[str], sources: Iterable[str]) -> list[str]:
        """Find potentially unused dependencies.

        Args:
            deps: Declared package names (a manifest mapping works as is).
            sources: Source file contents.

        Returns:
            Names with no reference in any source, in declaration order.
        """
        contents = list(sources)
        unused = [name for name in deps if not self.is_referenced(name, contents)]

        self.logger.info(
            f"Unused check complete: {len(unused)} potentially unused "
            f"across {len(contents)} files"
        )
        return unused
