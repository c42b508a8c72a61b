"""Memory store implementations."""

from pavlovian_agent.memory.trace_store import InMemoryTraceStore, content_words

__all__ = [
    "content_words",
    "InMemoryTraceStore",
]
