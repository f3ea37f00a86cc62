"""Data models module."""

from depcheck.models.report import (
    DeclaredDependency,
    OutdatedEntry,
    RegistryInfo,
    Report,
    ScanResults,
    VulnerabilityEntry,
    VulnerabilityRule,
)

__all__ = [
    "DeclaredDependency",
    "OutdatedEntry",
    "RegistryInfo",
    "Report",
    "ScanResults",
    "VulnerabilityEntry",
    "VulnerabilityRule",
]
