"""Run output logging."""

from pavlovian_agent.metrics.logging import StateLogWriter, read_state_log

__all__ = [
    "read_state_log",
    "StateLogWriter",
]
