"""Manifest reader for npm package.json files."""

import json
from pathlib import Path

from depcheck.core.exceptions.errors import ManifestError
from depcheck.core.logger.logger import get_logger

# Merge order matters: later groups win on name collisions.
DEPENDENCY_GROUPS = ("dependencies", "devDependencies")


class ManifestReader:
    """Reader for the dependency groups of a project manifest."""

    def __init__(
        self,
        project_dir: Path | str | None = None,
        manifest_name: str = "package.json",
    ) -> None:
        """Initialize manifest reader.

        Args:
            project_dir: Project directory. Defaults to the working directory.
            manifest_name: Manifest file name inside the project directory.
        """
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.manifest_name = manifest_name
        self.logger = get_logger(__name__)

    @property
    def manifest_path(self) -> Path:
        """Return the full manifest path."""
        return self.project_dir / self.manifest_name

    def read(self) -> dict[str, str]:
        """Read declared dependencies.

        Production and development groups are merged into one mapping in
        declaration order. A name declared in both groups keeps the position
        of its first occurrence and takes the development version.

        Returns:
            Mapping of package name to declared version range.

        Raises:
            ManifestError: If the manifest is missing or malformed.
        """
        data = self._load()
        dependencies: dict[str, str] = {}

        for group in DEPENDENCY_GROUPS:
            entries = data.get(group)
            if entries is None:
                continue
            if not isinstance(entries, dict):
                raise self._error(details={"group": group})

            for name, version in entries.items():
                if not isinstance(version, str):
                    raise self._error(details={"group": group, "package": name})
                dependencies[name] = version

        self.logger.debug(
            f"Read {len(dependencies)} dependencies from {self.manifest_path}"
        )
        return dependencies

    def _load(self) -> dict:
        """Load and parse the manifest file.

        Returns:
            Parsed manifest object.

        Raises:
            ManifestError: If the file cannot be read or parsed.
        """
        try:
            content = self.manifest_path.read_text(encoding="utf-8")
            data = json.loads(content)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            self.logger.debug(f"Failed to load {self.manifest_path}: {e}")
            raise self._error() from e

        if not isinstance(data, dict):
            raise self._error()
        return data

    def _error(self, details: dict | None = None) -> ManifestError:
        return ManifestError(
            f"Could not read {self.manifest_name}. "
            "Ensure you are in a Node.js project directory.",
            manifest_path=str(self.manifest_path),
            details=details,
        )


def read_manifest(project_dir: Path | str | None = None) -> dict[str, str]:
    """Read the declared dependencies of the project in ``project_dir``.

    Args:
        project_dir: Project directory. Defaults to the working directory.

    Returns:
        Mapping of package name to declared version range.
    """
    return ManifestReader(project_dir).read()
