"""Vulnerability check against a static, illustrative table."""

from collections.abc import Mapping

from depcheck.models.report import VulnerabilityEntry, VulnerabilityRule

# Demo data, not an advisory feed.
DEFAULT_VULNERABILITY_TABLE: dict[str, VulnerabilityRule] = {
    "lodash": VulnerabilityRule(
        vulnerable_prefix="4.17.20",
        issue="Potential prototype pollution",
        advisory_range="<4.17.21",
    ),
    "express": VulnerabilityRule(
        vulnerable_prefix="4.17.",
        issue="CVE-2023-1234",
        advisory_range="<4.18.0",
    ),
}


class VulnerabilityChecker:
    """Matches declared dependencies against a vulnerability table.

    A dependency matches when its declared version range contains the rule's
    vulnerable prefix as a substring. There is no version comparison.
    """

    def __init__(self, table: Mapping[str, VulnerabilityRule] | None = None) -> None:
        """Initialize the checker.

        Args:
            table: Package name to rule mapping. Uses the default table if not provided.
        """
        self.table = dict(DEFAULT_VULNERABILITY_TABLE if table is None else table)

    def check(self, deps: Mapping[str, str]) -> list[VulnerabilityEntry]:
        """Find dependencies matching the table.

        Args:
            deps: Mapping of package name to declared version range.

        Returns:
            Matches in declaration order.
        """
        matches: list[VulnerabilityEntry] = []
        for name, version in deps.items():
            rule = self.table.get(name)
            if rule and rule.vulnerable_prefix in version:
                matches.append(
                    VulnerabilityEntry(name=name, version=version, issue=rule.issue)
                )
        return matches
