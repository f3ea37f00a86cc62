"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from depcheck.core.config.loader import ConfigLoader

DEFAULT_CONFIG_FILE = "depcheck.yaml"


class RegistrySettings(BaseSettings):
    """npm registry access settings."""

    model_config = SettingsConfigDict(
        env_prefix="DEPCHECK_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="https://registry.npmjs.org",
        description="Registry base URL",
    )
    timeout: float = Field(
        default=15.0,
        gt=0,
        le=300,
        description="Per-package lookup timeout in seconds",
    )
    max_concurrent: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum concurrent registry lookups",
    )

    @field_validator("url", mode="before")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Strip trailing slashes from the registry URL."""
        return str(v).rstrip("/")


class ProjectSettings(BaseSettings):
    """Project layout settings."""

    model_config = SettingsConfigDict(
        env_prefix="DEPCHECK_PROJECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    manifest_name: str = Field(
        default="package.json",
        description="Manifest file name in the project directory",
    )
    report_file: str = Field(
        default="dep-check-report.json",
        description="Report file name in the project directory",
    )
    source_pattern: str = Field(
        default="**/*.js",
        description="Glob selecting source files for the unused check",
    )
    exclude_dirs: list[str] = Field(
        default_factory=lambda: ["node_modules"],
        description="Directory names skipped when collecting sources",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="DEPCHECK_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="WARNING",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DEPCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    registry: RegistrySettings = Field(default_factory=RegistrySettings)
    project: ProjectSettings = Field(default_factory=ProjectSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            registry=RegistrySettings(**loader.get_section("registry")),
            project=ProjectSettings(**loader.get_section("project")),
            logging=LoggingSettings(**loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Priority: depcheck.yaml > environment variables > .env > defaults

        Returns:
            Settings instance.
        """
        default_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if default_path.exists():
            return cls.from_yaml(default_path)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
