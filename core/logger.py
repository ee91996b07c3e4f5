"""
Poem Viewer - Logging System
Timestamped console output with rich formatting + file logging
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# Custom theme for console output
THEME = Theme({
    "info": "cyan",
    "debug": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "timestamp": "dim white",
    "header": "bold magenta",
    "config": "dim cyan",
})

# Global console instance
console = Console(theme=THEME)

# Module-level logger instance
_logger: Optional[logging.Logger] = None
_log_to_console: bool = True


def setup_logging(
    log_file_path: Path,
    level: str = "INFO",
    log_to_file: bool = True,
    log_to_console: bool = True
) -> logging.Logger:
    """
    Initialize the logging system.

    Args:
        log_file_path: Path to the diagnostic log file
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_to_file: Whether to write logs to file
        log_to_console: Whether to write logs to console (via rich)

    Returns:
        Configured logger instance
    """
    global _logger, _log_to_console

    _log_to_console = log_to_console

    _logger = logging.getLogger("poem_viewer")
    _logger.setLevel(getattr(logging, level.upper()))
    _logger.handlers.clear()
    _logger.propagate = False

    # File handler
    if log_to_file:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # File gets everything
        file_formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        _logger.addHandler(file_handler)

    return _logger


def set_console_logging(enabled: bool) -> None:
    """
    Turn console output on or off.

    The viewer owns the whole screen while it runs, so console lines are
    suspended for that time. The file log is not affected.
    """
    global _log_to_console
    _log_to_console = enabled


def get_timestamp() -> str:
    """Get formatted timestamp for console output."""
    return datetime.now().strftime("%H:%M:%S")


def log(message: str, level: str = "info", prefix: str = "") -> None:
    """
    Log a message to both console and file.

    Args:
        message: The message to log
        level: Log level (debug, info, warning, error, success)
        prefix: Optional prefix for console output
    """
    prefix_str = f"{prefix} " if prefix else ""

    if _log_to_console and level != "debug":
        style = level if level in ("info", "warning", "error", "success") else "info"
        console.print(
            f"[timestamp][{get_timestamp()}][/timestamp] {prefix_str}{escape(message)}",
            style=style,
            highlight=False,
        )

    if _logger:
        log_level = logging.INFO if level == "success" else getattr(logging, level.upper(), logging.INFO)
        _logger.log(log_level, f"{prefix_str}{message}")


def log_debug(message: str) -> None:
    """Log a debug message (file only)."""
    log(message, "debug")


def log_info(message: str, prefix: str = "") -> None:
    """Log an info message."""
    log(message, "info", prefix)


def log_success(message: str, prefix: str = "") -> None:
    """Log a success message."""
    log(message, "success", prefix or "OK")


def log_warning(message: str, prefix: str = "") -> None:
    """Log a warning message."""
    log(message, "warning", prefix or "!")


def log_error(message: str, prefix: str = "") -> None:
    """Log an error message."""
    log(message, "error", prefix or "x")


def log_config(key: str, value: object, indent: int = 0) -> None:
    """Print a configuration value."""
    indent_str = "   " * indent
    if _log_to_console:
        console.print(
            f"[timestamp][{get_timestamp()}][/timestamp] [config]{indent_str}{key}: {escape(str(value))}[/config]",
            highlight=False,
        )

    if _logger:
        _logger.info(f"{indent_str}{key}: {value}")


def log_startup_banner(version: str, project_name: str) -> None:
    """Print the startup banner."""
    separator = "=" * 60
    timestamp = get_timestamp()

    if _log_to_console:
        console.print(f"\n[timestamp][{timestamp}][/timestamp] [header]{separator}[/header]")
        console.print(f"[timestamp][{timestamp}][/timestamp] [header]{project_name} - v{version}[/header]")
        console.print(f"[timestamp][{timestamp}][/timestamp] [header]{separator}[/header]")

    if _logger:
        _logger.info(separator)
        _logger.info(f"{project_name} - v{version}")
        _logger.info(separator)
