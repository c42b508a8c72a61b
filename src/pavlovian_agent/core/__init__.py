"""Core orchestration and interfaces."""

from pavlovian_agent.core.interfaces import ConsciousnessEngine, TraceStore
from pavlovian_agent.core.activation import Activation
from pavlovian_agent.core.consolidation import ConsolidationResult
from pavlovian_agent.core.engine import PavlovianConsciousnessEngine
from pavlovian_agent.core.innate import INNATE_REFLEXES, InnateReflex

__all__ = [
    "Activation",
    "ConsciousnessEngine",
    "ConsolidationResult",
    "INNATE_REFLEXES",
    "InnateReflex",
    "PavlovianConsciousnessEngine",
    "TraceStore",
]
