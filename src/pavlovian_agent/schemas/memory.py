"""Memory trace data contract.

A trace records one interaction independently of the association graph.
Traces strengthen with retrieval (with diminishing returns) and
stabilize through consolidation.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from pavlovian_agent.utils.config import (
    DEFAULT_CONSOLIDATION_LEVEL,
    DEFAULT_ENCODING_STRENGTH,
    RETRIEVAL_BOOST,
    RETRIEVAL_DIMINISH,
    TRACE_CONSOLIDATED_THRESHOLD,
    TRACE_CONSOLIDATION_STEP,
)


class MemoryTrace(BaseModel):
    """A decaying, consolidating record of an interaction."""

    trace_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    content: str
    encoding_strength: float = Field(default=DEFAULT_ENCODING_STRENGTH, ge=0.0, le=1.0)
    consolidation_level: float = Field(default=DEFAULT_CONSOLIDATION_LEVEL, ge=0.0, le=1.0)
    encoded_at: datetime = Field(default_factory=datetime.now)
    last_retrieved: datetime | None = None
    retrieval_count: int = Field(default=0, ge=0)

    # Forward-compatible extras (caller context lands here)
    extras: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": False}

    @property
    def is_consolidated(self) -> bool:
        return self.consolidation_level > TRACE_CONSOLIDATED_THRESHOLD

    def consolidate(self) -> None:
        """Advance consolidation by one fixed step."""
        self.consolidation_level = min(
            1.0, self.consolidation_level + TRACE_CONSOLIDATION_STEP
        )

    def retrieve(self, when: datetime | None = None) -> float:
        """Record a retrieval; each one strengthens encoding a bit less.

        Returns:
            The encoding boost applied.
        """
        boost = RETRIEVAL_BOOST / (1 + self.retrieval_count * RETRIEVAL_DIMINISH)
        before = self.encoding_strength
        self.encoding_strength = min(1.0, before + boost)
        self.last_retrieved = when or datetime.now()
        self.retrieval_count += 1
        return self.encoding_strength - before
