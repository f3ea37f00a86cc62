"""Dependency analysis engine: manifest, registry, checks and reporting."""

from depcheck.analysis.aggregator import ReportAggregator, load_report, write_report
from depcheck.analysis.corpus import SourceCorpus
from depcheck.analysis.manifest import ManifestReader, read_manifest
from depcheck.analysis.outdated import OutdatedChecker, is_outdated
from depcheck.analysis.registry import BaseRegistryClient, NpmRegistryClient
from depcheck.analysis.unused import UnusedChecker, reference_tokens
from depcheck.analysis.vulnerabilities import (
    DEFAULT_VULNERABILITY_TABLE,
    VulnerabilityChecker,
)

__all__ = [
    "DEFAULT_VULNERABILITY_TABLE",
    "BaseRegistryClient",
    "ManifestReader",
    "NpmRegistryClient",
    "OutdatedChecker",
    "ReportAggregator",
    "SourceCorpus",
    "UnusedChecker",
    "VulnerabilityChecker",
    "is_outdated",
    "load_report",
    "read_manifest",
    "reference_tokens",
    "write_report",
]
