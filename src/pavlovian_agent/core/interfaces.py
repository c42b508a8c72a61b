"""Abstract base classes for the engine's swappable collaborators.

The engine depends only on these interfaces and the schemas, so a
persistent trace store or a different engine can be dropped in without
touching callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime

    from pavlovian_agent.schemas import ConsciousnessState, MemoryTrace, Response


# =============================================================================
# Memory Interfaces
# =============================================================================


class TraceStore(ABC):
    """Abstract interface for memory trace storage."""

    @abstractmethod
    def store(self, trace: MemoryTrace) -> None:
        """Store a trace.

        Args:
            trace: Trace to store.
        """
        ...

    @abstractmethod
    def get(self, trace_id: str) -> MemoryTrace | None:
        """Retrieve a trace by ID.

        Returns:
            The MemoryTrace if found, None otherwise.
        """
        ...

    @abstractmethod
    def get_all(self) -> list[MemoryTrace]:
        """Get every stored trace in encoding order."""
        ...

    @abstractmethod
    def recall(
        self,
        cue: str,
        limit: int,
        when: datetime | None = None,
    ) -> list[MemoryTrace]:
        """Retrieve traces whose content overlaps the cue.

        Every returned trace has been retrieved (its retrieval count and
        encoding strength updated).

        Args:
            cue: Free-text retrieval cue.
            limit: Maximum number of traces to return.
            when: Retrieval timestamp.

        Returns:
            Matching traces, best match first.
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Get the number of stored traces."""
        ...


# =============================================================================
# Engine Interface
# =============================================================================


class ConsciousnessEngine(ABC):
    """Abstract interface for an affect/attention engine.

    Consumes free text and returns a quantified state snapshot plus
    response activations for the text-generation layer.
    """

    @abstractmethod
    def process_input(
        self,
        text: str | None,
        context: dict[str, Any] | None = None,
    ) -> ConsciousnessState:
        """Process one input and return the resulting state."""
        ...

    @abstractmethod
    def get_dominant_response(self) -> Response | None:
        """Get the most strongly activated response, if any."""
        ...

    @abstractmethod
    def get_active_responses(self, threshold: float) -> dict[str, float]:
        """Get response activations at or above a threshold."""
        ...

    @abstractmethod
    def get_response_modulation(self) -> dict[str, Any]:
        """Get named scalar signals for response generation."""
        ...
