"""Exception definitions module."""

from depcheck.core.exceptions.errors import (
    ConfigurationError,
    CorpusReadError,
    DepCheckError,
    ManifestError,
    PersistenceError,
    RegistryLookupError,
)

__all__ = [
    "ConfigurationError",
    "CorpusReadError",
    "DepCheckError",
    "ManifestError",
    "PersistenceError",
    "RegistryLookupError",
]
