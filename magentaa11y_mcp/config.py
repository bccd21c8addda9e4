"""Process-wide configuration access."""

from magentaa11y_mcp.models.config import Settings

# Global configuration instance
_config: Settings | None = None


def get_config() -> Settings:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Settings.load_from_file()
    return _config


def set_config(config: Settings | None) -> None:
    """Set the global configuration instance; None resets to lazy loading."""
    global _config
    _config = config

