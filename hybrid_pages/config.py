"""Application settings for Hybrid Pages."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the app boots from an empty environment;
    overrides come from environment variables or a .env file in the
    working directory.

    Uses Pydantic v2 API:
    - model_config with SettingsConfigDict
    - @field_validator decorator
    - properties for derived directories
    """

    # Server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="Server port")

    # File-based routing layout
    project_root: Path = Field(default_factory=Path.cwd, description="Directory holding routes/ and partials/")
    routes_dir_name: str = Field(default="routes", min_length=1, description="Route file directory name")
    partials_dir_name: str = Field(default="partials", min_length=1, description="Partial template directory name")
    partial_extensions: list[str] = Field(
        default=[".hbs", ".html", ".jinja", ".j2"],
        description="File extensions registered as partials",
    )

    # Mount prefix stripped from incoming paths (e.g. a serverless rewrite to /api)
    api_prefix: str = Field(default="/api", description="Mount prefix stripped before route resolution")

    # Outbound fetch used by route scripts. None disables timeouts entirely.
    fetch_timeout: float | None = Field(default=None, gt=0, description="Timeout for script fetch calls (seconds)")
    fetch_max_connections: int = Field(default=10, ge=1, description="Connection pool size for script fetch calls")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path | None = Field(default=None, description="Directory for JSON logs (defaults to ./logs)")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @property
    def routes_dir(self) -> Path:
        """Directory route files are resolved against."""
        return self.project_root / self.routes_dir_name

    @property
    def partials_dir(self) -> Path:
        """Directory scanned once for partial templates."""
        return self.project_root / self.partials_dir_name

    @field_validator("api_prefix", mode="after")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Normalize to a leading slash and no trailing slash ('' disables stripping)."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    @field_validator("partial_extensions", mode="after")
    @classmethod
    def validate_partial_extensions(cls, v: list[str]) -> list[str]:
        """Ensure every extension is lower-case and dot-prefixed."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("partial_extensions must not contain empty entries")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
