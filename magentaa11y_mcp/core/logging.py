"""
Logging setup for the MagentaA11y MCP server.

All output goes to stderr: stdout belongs to the stdio transport.
Modules log through ``logging.getLogger(__name__)`` and may attach
structured context with ``extra={"extra_data": {...}}``.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path


class A11yFormatter(logging.Formatter):
    """Console formatter with level emoji and key=value context."""

    LEVEL_EMOJIS = {
        "DEBUG": "🔍",
        "INFO": "ℹ️",
        "WARNING": "⚠️",
        "ERROR": "❌",
        "CRITICAL": "🚨",
    }

    COLORS = {
        "DEBUG": "\033[90m",  # Gray
        "INFO": "\033[36m",  # Cyan
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def __init__(self, use_color: bool | None = None):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with emoji, color and structured data."""
        emoji = self.LEVEL_EMOJIS.get(record.levelname, "📝")
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        message = f"[{timestamp}] {emoji}  {record.getMessage()}"

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            extra_parts = [f"{key}={value}" for key, value in extra_data.items()]
            message += f" ({', '.join(extra_parts)})"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        if self._should_color():
            color = self.COLORS.get(record.levelname, "")
            message = f"{color}{message}{self.COLORS['RESET']}"

        return message

    def _should_color(self) -> bool:
        if self.use_color is not None:
            return self.use_color
        return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def setup_logging(
    level: str = "INFO", log_file: Path | None = None, use_color: bool | None = None
) -> None:
    """
    Setup application-wide logging configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to
        use_color: Force color on or off; None auto-detects a terminal
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(A11yFormatter(use_color=use_color))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)
