"""JSONL logging of consciousness states.

This module provides:
- StateLogWriter: One JSON object per processed input
- read_state_log: Load a state log back for analysis
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pavlovian_agent.utils.config import LOG_VERSION

if TYPE_CHECKING:
    from pavlovian_agent.schemas import ConsciousnessState


class StateLogWriter:
    """Writes consciousness states to a JSONL log file.

    Creates a consistent log format with one JSON object per line.
    """

    def __init__(self, log_path: Path, run_id: str = "") -> None:
        """Initialize the log writer.

        Args:
            log_path: Path to the JSONL log file.
            run_id: Identifier stamped on every record.
        """
        self._log_path = log_path
        self._log_path.parent.mkdir(parents=True, exist_ok=True)
        self._run_id = run_id
        self._step = 0
        # Open file in append mode
        self._file = open(self._log_path, "a", encoding="utf-8")

    @property
    def records_written(self) -> int:
        return self._step

    def write(
        self,
        state: ConsciousnessState,
        text: str | None = None,
        extras: dict[str, Any] | None = None,
    ) -> None:
        """Write a state to the log.

        Args:
            state: The state to log.
            text: Input that produced the state.
            extras: Additional fields merged into the record.
        """
        self._step += 1
        record = {
            "version": LOG_VERSION,
            "run_id": self._run_id,
            "step": self._step,
            "input": text,
            **state.to_log_dict(),
            **(extras or {}),
        }
        self._file.write(json.dumps(record, separators=(",", ":")) + "\n")
        self._file.flush()

    def close(self) -> None:
        """Close the log file."""
        self._file.close()

    def __enter__(self) -> StateLogWriter:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - ensures file is closed."""
        self.close()


def read_state_log(log_path: Path) -> list[dict[str, Any]]:
    """Load every record of a state log, skipping malformed lines."""
    records = []
    with open(log_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    return records
