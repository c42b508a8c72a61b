"""Utility functions and configuration."""

from pavlovian_agent.utils.config import DEFAULT_LEARNING_RATE, EXTINCTION_THRESHOLD
from pavlovian_agent.utils.logging import (
    get_logger,
    LogCategory,
    LogEntry,
    LogLevel,
    set_logger,
    StructuredLogger,
)
from pavlovian_agent.utils.profiles import (
    EngineProfile,
    get_profile,
    list_profiles,
    PROFILES,
)

__all__ = [
    "DEFAULT_LEARNING_RATE",
    "EXTINCTION_THRESHOLD",
    "EngineProfile",
    "get_logger",
    "get_profile",
    "list_profiles",
    "LogCategory",
    "LogEntry",
    "LogLevel",
    "PROFILES",
    "set_logger",
    "StructuredLogger",
]
