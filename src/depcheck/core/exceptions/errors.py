"""Custom exception definitions for depcheck."""

from typing import Any


class DepCheckError(Exception):
    """Base exception for all depcheck errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message shown to the user.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ManifestError(DepCheckError):
    """Raised when the project manifest is missing or malformed."""

    def __init__(
        self,
        message: str,
        manifest_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize manifest error.

        Args:
            message: Error message.
            manifest_path: Path of the manifest that failed to load.
            details: Additional error details.
        """
        details = details or {}
        if manifest_path:
            details["manifest_path"] = manifest_path
        super().__init__(message, details)


class RegistryLookupError(DepCheckError):
    """Raised when registry metadata for a single package cannot be fetched."""

    def __init__(
        self,
        message: str,
        package_name: str | None = None,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize registry lookup error.

        Args:
            message: Error message.
            package_name: Package whose lookup failed.
            status: HTTP status code, when the registry answered.
            details: Additional error details.
        """
        details = details or {}
        if package_name:
            details["package_name"] = package_name
        if status is not None:
            details["status"] = status
        super().__init__(message, details)
        self.package_name = package_name
        self.status = status


class CorpusReadError(DepCheckError):
    """Raised when a source file of the scanned corpus cannot be read."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize corpus read error.

        Args:
            message: Error message.
            file_path: Source file that could not be read.
            details: Additional error details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details)


class PersistenceError(DepCheckError):
    """Raised when the report cannot be written."""

    def __init__(
        self,
        message: str,
        report_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize persistence error.

        Args:
            message: Error message.
            report_path: Target report path.
            details: Additional error details.
        """
        details = details or {}
        if report_path:
            details["report_path"] = report_path
        super().__init__(message, details)


class ConfigurationError(DepCheckError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
