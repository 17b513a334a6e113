# utils/logger.py
# This file is part of Seqex - Sequence Expression Matching
#
# Logging utility for matcher evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for sequence matching."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class SeqexLogger:
    """Centralized logger for matcher evaluation with structured output."""

    def __init__(self, name: str = "seqex", level: LogLevel = LogLevel.INFO):
        """Initialize the Seqex logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(SeqexFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug_enabled(self) -> bool:
        """Whether DEBUG records would currently be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for matching sessions
    def session_start(self, matcher_name: str, verdict: str):
        """Log session initialization."""
        self.info("=== Starting Match ===")
        self.info(f"Matcher: {matcher_name}")
        self.info(f"Initial verdict: {verdict}")

    def token_processed(self, position: int, token: str, verdict: str):
        """Log the verdict reached after a token."""
        self.info(f"#{position} {token} → verdict={verdict}")

    def path_set_size(self, size: int, step: str):
        """Log the serial engine frontier size."""
        self.debug(f"    serial {step}: {size} path(s)")

    def final_verdict(self, verdict: str, accepted: bool):
        """Log final match verdict."""
        outcome = "ACCEPTED" if accepted else "REJECTED"
        self.info(f"\n>>> FINAL VERDICT: {verdict} ({outcome}) <<<")


class SeqexFormatter(logging.Formatter):
    """Custom formatter for Seqex logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[SeqexLogger] = None


def get_logger(name: str = "seqex") -> SeqexLogger:
    """Get or create the global Seqex logger instance.

    Args:
        name: Logger name (default: "seqex")

    Returns:
        SeqexLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = SeqexLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Verdicts and summaries are INFO records, so INFO is the floor; ``verbose``
    only adds per-token records, which the match session emits itself.

    Args:
        verbose: Enable verbose (per-token) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)
