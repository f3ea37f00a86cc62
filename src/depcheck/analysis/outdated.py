"""Outdated dependency check against registry latest tags."""

import asyncio
from collections.abc import Mapping

from depcheck.analysis.registry import BaseRegistryClient
from depcheck.core.exceptions.errors import RegistryLookupError
from depcheck.core.logger.logger import get_logger
from depcheck.models.report import DeclaredDependency, OutdatedEntry


def is_outdated(version_range: str, latest: str) -> bool:
    """Classify a declared range against the latest published version.

    This is a textual heuristic, not a range resolver. A range that contains
    the latest version as a substring counts as current, so "^2.1.0" with
    latest "2.1.0" is current while "^4.0.0" with latest "4.1.2" is outdated.

    Args:
        version_range: Declared version range.
        latest: Latest published version.

    Returns:
        True if the dependency is reported outdated.
    """
    return version_range != latest and latest not in version_range


class OutdatedChecker:
    """Checks declared dependencies against the registry's latest versions.

    A failed or timed-out lookup skips that dependency with a warning; it
    never fails the batch.
    """

    def __init__(
        self,
        registry: BaseRegistryClient,
        max_concurrent: int = 10,
        lookup_timeout: float = 15.0,
    ) -> None:
        """Initialize the checker.

        Args:
            registry: Registry client used for lookups.
            max_concurrent: Maximum number of lookups in flight.
            lookup_timeout: Seconds allowed for a single lookup.
        """
        self.registry = registry
        self.max_concurrent = max_concurrent
        self.lookup_timeout = lookup_timeout
        self.logger = get_logger(__name__)

    async def check(self, deps: Mapping[str, str]) -> list[OutdatedEntry]:
        """Find outdated dependencies.

        Args:
            deps: Mapping of package name to declared version range.

        Returns:
            Outdated entries in declaration order.
        """
        declared = [
            DeclaredDependency(name=name, version_range=version)
            for name, version in deps.items()
        ]
        if not declared:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrent)
        # gather preserves argument order regardless of completion order
        results = await asyncio.gather(
            *(self._check_one(dep, semaphore) for dep in declared)
        )

        outdated = [entry for entry in results if entry is not None]
        self.logger.info(
            f"Outdated check complete: {len(outdated)} of {len(declared)} outdated"
        )
        return outdated

    async def _check_one(
        self,
        dep: DeclaredDependency,
        semaphore: asyncio.Semaphore,
    ) -> OutdatedEntry | None:
        async with semaphore:
            try:
                info = await asyncio.wait_for(
                    self.registry.fetch_latest(dep.name),
                    timeout=self.lookup_timeout,
                )
            except RegistryLookupError as e:
                self.logger.warning(f"Could not fetch info for {dep.name}.")
                self.logger.debug(f"Lookup failure for {dep.name}: {e}")
                return None
            except asyncio.TimeoutError:
                self.logger.warning(f"Could not fetch info for {dep.name}.")
                self.logger.debug(
                    f"Lookup for {dep.name} exceeded {self.lookup_timeout}s"
                )
                return None

        if is_outdated(dep.version_range, info.latest_version):
            return OutdatedEntry(
                name=dep.name,
                installed=dep.version_range,
                latest=info.latest_version,
            )
        return None
