"""Pavlovian associative-learning engine for conversational agents."""

__version__ = "0.1.0"

from pavlovian_agent.core.engine import PavlovianConsciousnessEngine  # noqa: E402
from pavlovian_agent.schemas import ConsciousnessState  # noqa: E402

__all__ = [
    "__version__",
    "ConsciousnessState",
    "PavlovianConsciousnessEngine",
]
