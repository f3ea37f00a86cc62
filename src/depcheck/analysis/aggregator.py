"""Report aggregation and persistence."""

import asyncio
import json
import os
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from depcheck.analysis.corpus import SourceCorpus
from depcheck.analysis.manifest import ManifestReader
from depcheck.analysis.outdated import OutdatedChecker
from depcheck.analysis.registry import BaseRegistryClient
from depcheck.analysis.unused import UnusedChecker
from depcheck.analysis.vulnerabilities import VulnerabilityChecker
from depcheck.core.config.settings import Settings
from depcheck.core.exceptions.errors import PersistenceError
from depcheck.core.logger.logger import get_logger
from depcheck.models.report import (
    OutdatedEntry,
    Report,
    ScanResults,
    VulnerabilityEntry,
    VulnerabilityRule,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ReportAggregator:
    """Runs the dependency checks and combines their results.

    The manifest is read once per scan and handed to every check. A check
    that fails as a whole (unreadable manifest or source corpus) aborts the
    scan and nothing is persisted. Registry failures for single packages are
    absorbed by the outdated check and never reach this level.
    """

    def __init__(
        self,
        manifest_reader: ManifestReader,
        registry: BaseRegistryClient,
        corpus: SourceCorpus,
        report_path: Path | str,
        vulnerability_table: Mapping[str, VulnerabilityRule] | None = None,
        max_concurrent: int = 10,
        lookup_timeout: float = 15.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the aggregator.

        Args:
            manifest_reader: Reader for the project manifest.
            registry: Registry client for the outdated check.
            corpus: Source corpus for the unused check.
            report_path: Where save_report writes the report.
            vulnerability_table: Table for the vulnerability check.
            max_concurrent: Maximum concurrent registry lookups.
            lookup_timeout: Seconds allowed for a single registry lookup.
            clock: Returns the report timestamp. Defaults to current UTC time.
        """
        self.logger = get_logger(__name__)
        self.manifest_reader = manifest_reader
        self.corpus = corpus
        self.report_path = Path(report_path)
        self.clock = clock or _utc_now

        self.outdated_checker = OutdatedChecker(
            registry,
            max_concurrent=max_concurrent,
            lookup_timeout=lookup_timeout,
        )
        self.unused_checker = UnusedChecker()
        self.vulnerability_checker = VulnerabilityChecker(vulnerability_table)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        registry: BaseRegistryClient,
        project_dir: Path | str | None = None,
    ) -> "ReportAggregator":
        """Create an aggregator for a project directory.

        Args:
            settings: Application settings.
            registry: Registry client for the outdated check.
            project_dir: Project directory. Defaults to the working directory.

        Returns:
            ReportAggregator instance.
        """
        root = Path(project_dir) if project_dir else Path.cwd()
        project = settings.project
        return cls(
            manifest_reader=ManifestReader(root, manifest_name=project.manifest_name),
            registry=registry,
            corpus=SourceCorpus(
                root,
                pattern=project.source_pattern,
                exclude_dirs=project.exclude_dirs,
            ),
            report_path=root / project.report_file,
            max_concurrent=settings.registry.max_concurrent,
            lookup_timeout=settings.registry.timeout,
        )

    def read_manifest(self) -> dict[str, str]:
        """Read the declared dependencies."""
        return self.manifest_reader.read()

    async def check_outdated(
        self, deps: Mapping[str, str] | None = None
    ) -> list[OutdatedEntry]:
        """Run the outdated check.

        Args:
            deps: Declared dependencies. Read from the manifest if not provided.

        Returns:
            Outdated entries.
        """
        if deps is None:
            deps = self.read_manifest()
        return await self.outdated_checker.check(deps)

    async def check_unused(self, deps: Mapping[str, str] | None = None) -> list[str]:
        """Run the unused check.

        Args:
            deps: Declared dependencies. Read from the manifest if not provided.

        Returns:
            Potentially unused package names.
        """
        if deps is None:
            deps = self.read_manifest()
        sources = await asyncio.to_thread(self.corpus.load)
        return self.unused_checker.check(deps, sources.values())

    def check_vulnerabilities(
        self, deps: Mapping[str, str] | None = None
    ) -> list[VulnerabilityEntry]:
        """Run the vulnerability check.

        Args:
            deps: Declared dependencies. Read from the manifest if not provided.

        Returns:
            Vulnerability entries.
        """
        if deps is None:
            deps = self.read_manifest()
        return self.vulnerability_checker.check(deps)

    async def scan(self) -> ScanResults:
        """Run all three checks.

        Returns:
            Combined scan results.
        """
        deps = self.read_manifest()
        self.logger.info(f"Scanning {len(deps)} dependencies")

        outdated, unused = await asyncio.gather(
            self.check_outdated(deps),
            self.check_unused(deps),
        )
        vulnerabilities = self.check_vulnerabilities(deps)

        return ScanResults(
            outdated=outdated,
            unused=unused,
            vulnerabilities=vulnerabilities,
        )

    async def save_report(self) -> Report:
        """Scan, timestamp and persist a report.

        Any previous report at report_path is replaced.

        Returns:
            The persisted report.

        Raises:
            PersistenceError: If the report cannot be written.
        """
        results = await self.scan()
        report = Report.from_results(results, timestamp=self.clock())
        write_report(report, self.report_path)
        self.logger.info(f"Report saved to {self.report_path}")
        return report


def write_report(report: Report, path: Path) -> None:
    """Write a report as pretty-printed JSON, atomically.

    Args:
        report: Report to write.
        path: Target file.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    tmp_path = path.with_name(path.name + ".tmp")
    content = json.dumps(report.model_dump(mode="json"), indent=2)

    try:
        tmp_path.write_text(content + "\n", encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise PersistenceError(
            f"Could not write report to {path}",
            report_path=str(path),
            details={"error": str(e)},
        ) from e


def load_report(path: Path) -> Report:
    """Load a persisted report.

    Args:
        path: Report file.

    Returns:
        The loaded report.

    Raises:
        PersistenceError: If the file cannot be read or is not a report.
    """
    try:
        return Report.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise PersistenceError(
            f"Could not load report from {path}",
            report_path=str(path),
            details={"error": str(e)},
        ) from e
