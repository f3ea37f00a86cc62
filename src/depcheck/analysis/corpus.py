"""Source corpus collection for the unused-dependency check."""

import os
from collections.abc import Iterable, Sequence
from fnmatch import fnmatchcase
from pathlib import Path

from depcheck.core.exceptions.errors import CorpusReadError
from depcheck.core.logger.logger import get_logger


class SourceCorpus:
    """Collects the text of every source file under a project root.

    Excluded directories are pruned during the walk. Hidden files and
    directories (names starting with a dot) are never collected. The corpus
    is all-or-nothing: one unreadable file fails the whole load.
    """

    def __init__(
        self,
        root: Path | str | None = None,
        pattern: str = "**/*.js",
        exclude_dirs: Iterable[str] = ("node_modules",),
    ) -> None:
        """Initialize source corpus.

        Args:
            root: Project root. Defaults to the working directory.
            pattern: Glob selecting source files, relative to root.
            exclude_dirs: Directory names whose contents are skipped.
        """
        self.root = Path(root) if root else Path.cwd()
        self.pattern = pattern
        self.exclude_dirs = frozenset(exclude_dirs)
        self.logger = get_logger(__name__)

    def find_files(self) -> list[Path]:
        """Find matching source files.

        Returns:
            Sorted list of file paths relative to root.
        """
        pattern_parts = tuple(part for part in self.pattern.split("/") if part)
        found: list[Path] = []

        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [d for d in dirnames if not self._should_skip_dir(d)]
            base = Path(dirpath).relative_to(self.root)
            for filename in filenames:
                if _is_hidden(filename):
                    continue
                relative = base / filename
                if not _match_parts(relative.parts, pattern_parts):
                    continue
                if (self.root / relative).is_file():
                    found.append(relative)

        return sorted(found)

    def load(self) -> dict[Path, str]:
        """Read every matching source file.

        Returns:
            Mapping of relative path to file content.

        Raises:
            CorpusReadError: If any file cannot be read as UTF-8 text.
        """
        contents: dict[Path, str] = {}
        for relative in self.find_files():
            try:
                contents[relative] = (self.root / relative).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise CorpusReadError(
                    f"Could not read source file {relative}",
                    file_path=str(relative),
                    details={"error": str(e)},
                ) from e

        self.logger.debug(f"Loaded {len(contents)} source files from {self.root}")
        return contents

    def _should_skip_dir(self, name: str) -> bool:
        return name in self.exclude_dirs or _is_hidden(name)


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _match_parts(parts: Sequence[str], pattern: Sequence[str]) -> bool:
    """Match path segments against glob segments, where ``**`` spans any depth."""
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_parts(parts[i:], rest) for i in range(len(parts) + 1))
    return bool(parts) and fnmatchcase(parts[0], head) and _match_parts(parts[1:], rest)
