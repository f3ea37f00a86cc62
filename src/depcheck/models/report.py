"""Dependency and report models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DeclaredDependency(BaseModel):
    """A package name and version-range string declared in the manifest."""

    name: str = Field(..., description="Package name")
    version_range: str = Field(..., description="Declared version range")


class RegistryInfo(BaseModel):
    """Registry metadata for a single package."""

    name: str
    latest_version: str = Field(..., description="Version tagged 'latest'")


class OutdatedEntry(BaseModel):
    """A dependency whose declared range does not track the latest release."""

    model_config = ConfigDict(frozen=True)

    name: str
    installed: str = Field(..., description="Declared version range")
    latest: str = Field(..., description="Latest published version")


class VulnerabilityEntry(BaseModel):
    """A dependency matching the static vulnerability table."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str = Field(..., description="Declared version range")
    issue: str = Field(..., description="Issue description")


class VulnerabilityRule(BaseModel):
    """One row of the vulnerability table.

    ``vulnerable_prefix`` is matched as a plain substring of the declared
    version range. ``advisory_range`` is informational only.
    """

    model_config = ConfigDict(frozen=True)

    vulnerable_prefix: str
    issue: str
    advisory_range: str | None = None


class ScanResults(BaseModel):
    """Combined results of the three checks."""

    model_config = ConfigDict(frozen=True)

    outdated: list[OutdatedEntry] = Field(default_factory=list)
    unused: list[str] = Field(default_factory=list)
    vulnerabilities: list[VulnerabilityEntry] = Field(default_factory=list)


class Report(BaseModel):
    """Timestamped, persisted dependency report."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    outdated: list[OutdatedEntry] = Field(default_factory=list)
    unused: list[str] = Field(default_factory=list)
    vulnerabilities: list[VulnerabilityEntry] = Field(default_factory=list)

    @classmethod
    def from_results(cls, results: ScanResults, timestamp: datetime) -> "Report":
        """Build a report from scan results.

        Args:
            results: Results of a scan.
            timestamp: Report creation instant.

        Returns:
            Report instance.
        """
        return cls(
            timestamp=timestamp,
            outdated=list(results.outdated),
            unused=list(results.unused),
            vulnerabilities=list(results.vulnerabilities),
        )

    def get_summary(self) -> dict[str, int]:
        """Get per-check finding counts.

        Returns:
            Summary dictionary.
        """
        return {
            "outdated": len(self.outdated),
            "unused": len(self.unused),
            "vulnerabilities": len(self.vulnerabilities),
        }
