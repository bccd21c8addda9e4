"""Application settings loaded from environment, .env and YAML."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from magentaa11y_mcp.models.config.server import ServerConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".magentaa11y-mcp"


class Settings(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MAGENTAA11Y_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Content artifact; None means the packaged content.json
    content_path: Path | None = None

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    # Transports
    server: ServerConfig = Field(default_factory=ServerConfig)

    # CLI settings
    color: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def load_from_file(cls, config_path: Path | None = None) -> "Settings":
        """Load configuration from a YAML file, falling back to defaults."""
        import yaml

        if config_path is None:
            config_path = DEFAULT_CONFIG_DIR / "config.yaml"

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}

            if "server" in config_data:
                config_data["server"] = ServerConfig.model_validate(
                    config_data["server"]
                )

            for key in ("content_path", "log_file"):
                if isinstance(config_data.get(key), str):
                    config_data[key] = Path(config_data[key]).expanduser()

            return cls(**config_data)
        except Exception as e:
            logger.warning(f"Ignoring invalid config file {config_path}: {e}")
            return cls()


__all__ = ["Settings", "DEFAULT_CONFIG_DIR"]
