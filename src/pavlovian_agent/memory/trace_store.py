"""In-memory memory trace store."""

from __future__ import annotations

import re
from datetime import datetime

from pavlovian_agent.core.interfaces import TraceStore
from pavlovian_agent.schemas import MemoryTrace
from pavlovian_agent.utils.config import DEFAULT_MAX_TRACES

_WORD_RE = re.compile(r"[a-z0-9']+")


def content_words(text: str | None) -> set[str]:
    """Lower-cased word set of a text, used for overlap matching."""
    if not text:
        return set()
    return set(_WORD_RE.findall(text.lower()))


class InMemoryTraceStore(TraceStore):
    """Simple in-memory trace storage.

    Stores traces in a dictionary keyed by trace id. Not persisted
    across runs. Once ``max_traces`` is reached the oldest trace is
    evicted for each new one; ``None`` keeps every trace.
    """

    def __init__(self, max_traces: int | None = DEFAULT_MAX_TRACES) -> None:
        """Initialize an empty trace store.

        Raises:
            ValueError: If max_traces is less than 1.
        """
        if max_traces is not None and max_traces < 1:
            raise ValueError(f"max_traces must be at least 1, got {max_traces}")
        self._max_traces = max_traces
        self._traces: dict[str, MemoryTrace] = {}
        # Encoding order for stable recall tie-breaks
        self._order: list[str] = []

    @property
    def max_traces(self) -> int | None:
        return self._max_traces

    def store(self, trace: MemoryTrace) -> None:
        if trace.trace_id not in self._traces:
            self._order.append(trace.trace_id)
        self._traces[trace.trace_id] = trace

        if self._max_traces is not None:
            while len(self._order) > self._max_traces:
                evicted = self._order.pop(0)
                del self._traces[evicted]

    def get(self, trace_id: str) -> MemoryTrace | None:
        return self._traces.get(trace_id)

    def get_all(self) -> list[MemoryTrace]:
        return [self._traces[tid] for tid in self._order]

    def recall(
        self,
        cue: str,
        limit: int,
        when: datetime | None = None,
    ) -> list[MemoryTrace]:
        """Retrieve traces ranked by word overlap, then encoding strength.

        Args:
            cue: Free-text retrieval cue.
            limit: Maximum number of traces to return.
            when: Retrieval timestamp.

        Returns:
            Up to ``limit`` retrieved traces. Empty for an empty cue.
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        cue_words = content_words(cue)
        if not cue_words or limit == 0:
            return []

        scored: list[tuple[int, float, int, MemoryTrace]] = []
        for index, trace in enumerate(self.get_all()):
            overlap = len(cue_words & content_words(trace.content))
            if overlap:
                scored.append((overlap, trace.encoding_strength, -index, trace))

        scored.sort(key=lambda item: item[:3], reverse=True)
        recalled = [item[3] for item in scored[:limit]]
        for trace in recalled:
            trace.retrieve(when)
        return recalled

    def count(self) -> int:
        return len(self._traces)

    def clear(self) -> None:
        """Remove all traces."""
        self._traces.clear()
        self._order.clear()
