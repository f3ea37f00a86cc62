"""Pytest configuration and shared fixtures."""

import asyncio
import json
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Generator

import pytest

from depcheck.analysis.registry import BaseRegistryClient
from depcheck.core.exceptions.errors import RegistryLookupError
from depcheck.models.report import RegistryInfo


class FakeRegistry(BaseRegistryClient):
    """In-memory registry with optional failures, delays and hangs."""

    def __init__(
        self,
        latest: dict[str, str] | None = None,
        delays: dict[str, float] | None = None,
        hang: set[str] | None = None,
    ) -> None:
        self.latest = latest or {}
        self.delays = delays or {}
        self.hang = hang or set()
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    async def close(self) -> None:
        self.closed = True

    async def fetch_latest(self, name: str) -> RegistryInfo:
        self.calls.append(name)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if name in self.hang:
                await asyncio.Event().wait()
            await asyncio.sleep(self.delays.get(name, 0))
            if name not in self.latest:
                raise RegistryLookupError(
                    f"Package not found in registry: {name}",
                    package_name=name,
                    status=404,
                )
            return RegistryInfo(name=name, latest_version=self.latest[name])
        finally:
            self.in_flight -= 1


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fake_registry() -> type[FakeRegistry]:
    """Return the fake registry class."""
    return FakeRegistry


@pytest.fixture
def make_project(temp_dir: Path) -> Callable[..., Path]:
    """Build an npm project in the temporary directory.

    Returns:
        Factory taking dependencies, dev_dependencies and a mapping of
        relative file path to content.
    """

    def _make(
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        manifest: dict = {"name": "sample-project", "version": "1.0.0"}
        if dependencies is not None:
            manifest["dependencies"] = dependencies
        if dev_dependencies is not None:
            manifest["devDependencies"] = dev_dependencies
        (temp_dir / "package.json").write_text(json.dumps(manifest, indent=2))

        for relative, content in (files or {}).items():
            path = temp_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        return temp_dir

    return _make


@pytest.fixture
def sample_project(make_project: Callable[..., Path]) -> Path:
    """Project with chalk referenced and left-pad unreferenced.

    Returns:
        Project directory.
    """
    return make_project(
        dependencies={"chalk": "^4.0.0", "left-pad": "1.0.0"},
        files={
            "index.js": "const chalk = require('chalk');\nconsole.log(chalk.green('ok'));\n",
            "node_modules/other/index.js": "require('left-pad');\n",
        },
    )
