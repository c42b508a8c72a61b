"""Tests for the in-memory trace store."""

from __future__ import annotations

from datetime import datetime

import pytest

from pavlovian_agent.memory import InMemoryTraceStore, content_words
from pavlovian_agent.schemas import MemoryTrace


class TestContentWords:
    """Tests for content_words()."""

    def test_lowercases_and_splits(self):
        assert content_words("Hello, World! don't") == {"hello", "world", "don't"}

    @pytest.mark.parametrize("text", ["", None, "!!!"])
    def test_empty(self, text):
        assert content_words(text) == set()


class TestInMemoryTraceStore:
    """Tests for InMemoryTraceStore."""

    def test_store_and_get(self):
        store = InMemoryTraceStore()
        trace = MemoryTrace(content="the bell rang")

        store.store(trace)

        assert store.get(trace.trace_id) is trace
        assert store.count() == 1

    def test_get_nonexistent(self):
        assert InMemoryTraceStore().get("missing") is None

    def test_get_all_preserves_order(self):
        store = InMemoryTraceStore()
        traces = [MemoryTrace(content=f"trace {i}") for i in range(5)]
        for trace in traces:
            store.store(trace)

        assert [t.trace_id for t in store.get_all()] == [t.trace_id for t in traces]

    def test_restore_does_not_duplicate(self):
        store = InMemoryTraceStore()
        trace = MemoryTrace(content="once")
        store.store(trace)
        store.store(trace)

        assert store.count() == 1
        assert len(store.get_all()) == 1

    def test_evicts_oldest_past_cap(self):
        store = InMemoryTraceStore(max_traces=3)
        traces = [MemoryTrace(content=f"trace {i}") for i in range(5)]
        for trace in traces:
            store.store(trace)

        assert store.count() == 3
        assert [t.content for t in store.get_all()] == ["trace 2", "trace 3", "trace 4"]
        assert store.get(traces[0].trace_id) is None

    def test_unbounded_store(self):
        store = InMemoryTraceStore(max_traces=None)
        for i in range(50):
            store.store(MemoryTrace(content=f"trace {i}"))
        assert store.count() == 50

    @pytest.mark.parametrize("cap", [0, -1])
    def test_invalid_cap_rejected(self, cap):
        with pytest.raises(ValueError, match="max_traces"):
            InMemoryTraceStore(max_traces=cap)

    def test_engine_uses_injected_store(self, clock):
        from pavlovian_agent.core.engine import PavlovianConsciousnessEngine

        engine = PavlovianConsciousnessEngine(
            trace_store=InMemoryTraceStore(max_traces=2), clock=clock
        )
        engine.initialize()
        for text in ("first", "second", "third"):
            engine.process_input(text)

        assert [t.content for t in engine.memory_traces] == ["second", "third"]

    def test_clear(self):
        store = InMemoryTraceStore()
        store.store(MemoryTrace(content="x"))
        store.clear()

        assert store.count() == 0
        assert store.get_all() == []


class TestRecall:
    """Tests for cue-based recall."""

    @pytest.fixture
    def store(self):
        store = InMemoryTraceStore()
        store.store(MemoryTrace(content="the bell rang before dinner", encoding_strength=0.4))
        store.store(MemoryTrace(content="dinner was great", encoding_strength=0.9))
        store.store(MemoryTrace(content="a quiet afternoon", encoding_strength=0.5))
        return store

    def test_ranks_by_overlap_first(self, store):
        recalled = store.recall("bell before dinner", limit=5)
        assert [t.content for t in recalled] == [
            "the bell rang before dinner",
            "dinner was great",
        ]

    def test_ties_broken_by_encoding_strength(self, store):
        recalled = store.recall("dinner", limit=5)
        assert recalled[0].content == "dinner was great"

    def test_equal_traces_keep_encoding_order(self):
        store = InMemoryTraceStore()
        first = MemoryTrace(content="same words")
        second = MemoryTrace(content="same words")
        store.store(first)
        store.store(second)

        assert store.recall("same", limit=2) == [first, second]

    def test_limit(self, store):
        assert len(store.recall("dinner", limit=1)) == 1

    def test_zero_limit_and_empty_cue(self, store):
        assert store.recall("dinner", limit=0) == []
        assert store.recall("", limit=5) == []

    def test_negative_limit_rejected(self, store):
        with pytest.raises(ValueError):
            store.recall("dinner", limit=-1)

    def test_no_overlap(self, store):
        assert store.recall("spaceship", limit=5) == []

    def test_recall_marks_retrieval(self, store):
        when = datetime(2024, 6, 1, 9, 0, 0)
        recalled = store.recall("afternoon", limit=5, when=when)

        trace = recalled[0]
        assert trace.retrieval_count == 1
        assert trace.last_retrieved == when
        assert trace.encoding_strength == pytest.approx(0.6)
