"""depcheck - heuristic dependency auditor for npm projects."""

__version__ = "0.1.0"
