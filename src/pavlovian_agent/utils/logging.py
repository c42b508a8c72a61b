"""Structured logging for the conditioning engine.

ARCHITECTURAL INVARIANT: Every learning decision is logged with enough
context (association, strength, delta) to replay it afterwards.

This module provides:
- LogCategory: Predefined log categories for consistent filtering
- StructuredLogger: Category-prefixed logging with timestamps and context
- get_logger / set_logger: Process-wide default logger
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Any, TextIO

# =============================================================================
# LOG CATEGORIES
# =============================================================================

class LogCategory(str, Enum):
    """Log categories for structured filtering and analysis.

    Categories describe engine subsystems, not content.
    """
    PERCEPTION = "PERCEPTION"          # Stimulus matching on input text
    ATTENTION = "ATTENTION"            # Gate decisions, fatigue, resets
    CONDITIONING = "CONDITIONING"      # Acquisition and reinforcement
    EXTINCTION = "EXTINCTION"          # Extinction and spontaneous recovery
    HABITUATION = "HABITUATION"        # Habituation and sensitization
    CHAIN = "CHAIN"                    # Second-order conditioning
    DRIVE = "DRIVE"                    # Drive satiation and decay
    MEMORY = "MEMORY"                  # Memory trace encoding and recall
    CONSOLIDATION = "CONSOLIDATION"    # Consolidation cycles
    INVARIANT = "INVARIANT"            # Invariant checks and violations
    SYSTEM = "SYSTEM"                  # Engine lifecycle


# =============================================================================
# LOG LEVELS
# =============================================================================

class LogLevel(str, Enum):
    """Log levels for filtering."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Map to standard logging levels
_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


# =============================================================================
# LOG ENTRY
# =============================================================================

class LogEntry:
    """A structured log entry.

    Contains category, level, message, and optional conditioning context
    (association, stimulus, response, strength, delta).
    """

    def __init__(
        self,
        category: LogCategory,
        level: LogLevel,
        message: str,
        association_id: str | None = None,
        stimulus: str | None = None,
        response: str | None = None,
        strength: float | None = None,
        delta: float | None = None,
        extras: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        self.timestamp = datetime.now()
        self.category = category
        self.level = level
        self.message = message
        self.association_id = association_id
        self.stimulus = stimulus
        self.response = response
        self.strength = strength
        self.delta = delta
        self.extras = extras or {}
        # Arbitrary context plus the named fields that were supplied
        self.context = dict(kwargs)
        for key in ("association_id", "stimulus", "response", "strength", "delta"):
            value = getattr(self, key)
            if value is not None:
                self.context[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        d: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "category": self.category.value,
            "level": self.level.value,
            "message": self.message,
        }
        if self.association_id is not None:
            d["association_id"] = self.association_id
        if self.stimulus is not None:
            d["stimulus"] = self.stimulus
        if self.response is not None:
            d["response"] = self.response
        if self.strength is not None:
            d["strength"] = self.strength
        if self.delta is not None:
            d["delta"] = self.delta
        if self.extras:
            d["extras"] = self.extras
        if self.context:
            d["context"] = self.context
        return d

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)

    def format_console(self) -> str:
        """Format for console output with category prefix."""
        ts = self.timestamp.strftime("%H:%M:%S.%f")[:-3]
        prefix = f"[{self.category.value}]"

        context_parts = []
        if self.stimulus and self.response:
            context_parts.append(f"{self.stimulus}->{self.response}")
        elif self.stimulus:
            context_parts.append(f"stim={self.stimulus}")
        if self.strength is not None:
            context_parts.append(f"V={self.strength:.3f}")
        if self.delta is not None:
            context_parts.append(f"dV={self.delta:+.3f}")

        context_str = f" ({', '.join(context_parts)})" if context_parts else ""

        return f"{ts} {prefix:16} {self.message}{context_str}"


# =============================================================================
# STRUCTURED LOGGER
# =============================================================================

class StructuredLogger:
    """Category-prefixed structured logger.

    ARCHITECTURAL INVARIANT: All log entries include category prefix
    for consistent filtering and post-run analysis.
    """

    def __init__(
        self,
        name: str = "pavlovian_agent",
        level: LogLevel = LogLevel.INFO,
        console_output: bool = True,
        file_output: TextIO | None = None,
        json_output: bool = False,
        max_history: int = 10000,
    ):
        """Initialize the structured logger.

        Args:
            name: Logger name
            level: Minimum log level
            console_output: Whether to output to console
            file_output: Optional file handle for output
            json_output: Whether to use JSON format for file output
            max_history: Number of entries kept in memory
        """
        self._name = name
        self._level = level
        self._console_output = console_output
        self._file_output = file_output
        self._json_output = json_output

        # Statistics
        self._counts: dict[LogCategory, int] = {cat: 0 for cat in LogCategory}
        self._error_count = 0
        self._warning_count = 0

        # Entry history for filtering/retrieval
        self._entries: list[LogEntry] = []
        self._max_history = max_history

        # Category filters (None = all enabled)
        self._enabled_categories: set[LogCategory] | None = None
        self._disabled_categories: set[LogCategory] = set()

    @property
    def name(self) -> str:
        """Get the logger name."""
        return self._name

    def log(
        self,
        category: LogCategory,
        level: LogLevel,
        message: str,
        **kwargs: Any,
    ) -> LogEntry:
        """Log a structured entry.

        Args:
            category: Log category
            level: Log level
            message: Log message
            **kwargs: Additional context (association_id, strength, etc.)

        Returns:
            The created LogEntry
        """
        # Create entry first (even if filtered, for return value)
        entry = LogEntry(category, level, message, **kwargs)

        if _LEVEL_MAP[level] < _LEVEL_MAP[self._level]:
            return entry

        if self._enabled_categories is not None:
            if category not in self._enabled_categories:
                return entry
        if category in self._disabled_categories:
            return entry

        self._counts[category] += 1
        if level == LogLevel.ERROR or level == LogLevel.CRITICAL:
            self._error_count += 1
        elif level == LogLevel.WARNING:
            self._warning_count += 1

        self._entries.append(entry)
        if len(self._entries) > self._max_history:
            self._entries = self._entries[-self._max_history:]

        if self._console_output:
            self._write_console(entry)

        if self._file_output:
            self._write_file(entry)

        return entry

    def _write_console(self, entry: LogEntry) -> None:
        """Write entry to stderr so state output on stdout stays clean."""
        output = entry.format_console()

        if sys.stderr.isatty():
            colors = {
                LogLevel.DEBUG: "\033[90m",    # Gray
                LogLevel.INFO: "\033[0m",       # Default
                LogLevel.WARNING: "\033[93m",   # Yellow
                LogLevel.ERROR: "\033[91m",     # Red
                LogLevel.CRITICAL: "\033[91;1m",  # Bold red
            }
            reset = "\033[0m"
            output = f"{colors.get(entry.level, '')}{output}{reset}"

        print(output, file=sys.stderr)

    def _write_file(self, entry: LogEntry) -> None:
        """Write entry to file."""
        if self._json_output:
            self._file_output.write(entry.to_json() + "\n")
        else:
            self._file_output.write(entry.format_console() + "\n")
        self._file_output.flush()

    # -------------------------------------------------------------------------
    # CONVENIENCE METHODS
    # -------------------------------------------------------------------------

    def debug(self, category: LogCategory, message: str, **kwargs: Any) -> LogEntry:
        """Log at DEBUG level."""
        return self.log(category, LogLevel.DEBUG, message, **kwargs)

    def info(self, category: LogCategory, message: str, **kwargs: Any) -> LogEntry:
        """Log at INFO level."""
        return self.log(category, LogLevel.INFO, message, **kwargs)

    def warning(self, category: LogCategory, message: str, **kwargs: Any) -> LogEntry:
        """Log at WARNING level."""
        return self.log(category, LogLevel.WARNING, message, **kwargs)

    def error(self, category: LogCategory, message: str, **kwargs: Any) -> LogEntry:
        """Log at ERROR level."""
        return self.log(category, LogLevel.ERROR, message, **kwargs)

    # -------------------------------------------------------------------------
    # CATEGORY-SPECIFIC METHODS
    # -------------------------------------------------------------------------

    def perception(self, message: str, level: LogLevel = LogLevel.DEBUG, **kwargs: Any) -> LogEntry:
        """Log stimulus matching."""
        return self.log(LogCategory.PERCEPTION, level, message, **kwargs)

    def attention(self, message: str, level: LogLevel = LogLevel.DEBUG, **kwargs: Any) -> LogEntry:
        """Log attentional gate activity."""
        return self.log(LogCategory.ATTENTION, level, message, **kwargs)

    def conditioning(self, message: str, level: LogLevel = LogLevel.INFO, **kwargs: Any) -> LogEntry:
        """Log acquisition and reinforcement."""
        return self.log(LogCategory.CONDITIONING, level, message, **kwargs)

    def extinction(self, message: str, level: LogLevel = LogLevel.INFO, **kwargs: Any) -> LogEntry:
        """Log extinction and recovery."""
        return self.log(LogCategory.EXTINCTION, level, message, **kwargs)

    def habituation(self, message: str, level: LogLevel = LogLevel.INFO, **kwargs: Any) -> LogEntry:
        """Log habituation and sensitization."""
        return self.log(LogCategory.HABITUATION, level, message, **kwargs)

    def chain(self, message: str, level: LogLevel = LogLevel.INFO, **kwargs: Any) -> LogEntry:
        """Log second-order chains."""
        return self.log(LogCategory.CHAIN, level, message, **kwargs)

    def drive(self, message: str, level: LogLevel = LogLevel.DEBUG, **kwargs: Any) -> LogEntry:
        """Log drive changes."""
        return self.log(LogCategory.DRIVE, level, message, **kwargs)

    def memory(self, message: str, level: LogLevel = LogLevel.DEBUG, **kwargs: Any) -> LogEntry:
        """Log memory trace operations."""
        return self.log(LogCategory.MEMORY, level, message, **kwargs)

    def consolidation(self, message: str, level: LogLevel = LogLevel.INFO, **kwargs: Any) -> LogEntry:
        """Log consolidation cycles."""
        return self.log(LogCategory.CONSOLIDATION, level, message, **kwargs)

    def invariant(self, message: str, level: LogLevel = LogLevel.WARNING, **kwargs: Any) -> LogEntry:
        """Log invariant checks."""
        return self.log(LogCategory.INVARIANT, level, message, **kwargs)

    def system(self, message: str, level: LogLevel = LogLevel.INFO, **kwargs: Any) -> LogEntry:
        """Log system operations."""
        return self.log(LogCategory.SYSTEM, level, message, **kwargs)

    # -------------------------------------------------------------------------
    # INVARIANT LOGGING
    # -------------------------------------------------------------------------

    def check_invariant(
        self,
        condition: bool,
        invariant_name: str,
        message: str,
        **kwargs: Any,
    ) -> LogEntry:
        """Check and log an invariant.

        Args:
            condition: Whether the invariant holds
            invariant_name: Name of the invariant being checked
            message: Description of the check
            **kwargs: Additional context

        Returns:
            The created LogEntry
        """
        extras = {"invariant": invariant_name, **kwargs.pop("extras", {})}
        if condition:
            return self.invariant(
                f"PASS: {invariant_name} - {message}",
                level=LogLevel.DEBUG,
                extras={**extras, "result": "pass"},
                **kwargs,
            )
        return self.invariant(
            f"FAIL: {invariant_name} - {message}",
            level=LogLevel.ERROR,
            extras={**extras, "result": "fail"},
            **kwargs,
        )

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    def set_level(self, level: LogLevel) -> None:
        """Set minimum log level."""
        self._level = level

    def enable_categories(self, categories: list[LogCategory]) -> None:
        """Enable only specific categories."""
        self._enabled_categories = set(categories)

    def disable_categories(self, categories: list[LogCategory]) -> None:
        """Disable specific categories."""
        self._disabled_categories.update(categories)

    def enable_all_categories(self) -> None:
        """Enable all categories."""
        self._enabled_categories = None
        self._disabled_categories.clear()

    def set_file_output(self, file_output: TextIO | None, json_format: bool = False) -> None:
        """Set file output."""
        self._file_output = file_output
        self._json_output = json_format

    # -------------------------------------------------------------------------
    # STATISTICS
    # -------------------------------------------------------------------------

    def get_statistics(self) -> dict[str, Any]:
        """Get logging statistics."""
        return {
            "total": sum(self._counts.values()),
            "by_category": {cat: count for cat, count in self._counts.items()},
            "errors": self._error_count,
            "warnings": self._warning_count,
        }

    def reset_statistics(self) -> None:
        """Reset statistics."""
        self._counts = {cat: 0 for cat in LogCategory}
        self._error_count = 0
        self._warning_count = 0

    def get_recent_entries(self, count: int = 100) -> list[LogEntry]:
        """Get the most recent log entries."""
        return self._entries[-count:]

    def filter_by_category(self, category: LogCategory) -> list[LogEntry]:
        """Get all recorded entries of a specific category."""
        return [e for e in self._entries if e.category == category]


# =============================================================================
# GLOBAL LOGGER INSTANCE
# =============================================================================

_global_logger: StructuredLogger | None = None


def get_logger() -> StructuredLogger:
    """Get the global logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = StructuredLogger()
    return _global_logger


def set_logger(logger: StructuredLogger) -> None:
    """Set the global logger instance."""
    global _global_logger
    _global_logger = logger


__all__ = [
    "LogCategory",
    "LogLevel",
    "LogEntry",
    "StructuredLogger",
    "get_logger",
    "set_logger",
]
