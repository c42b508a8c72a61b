"""Data contracts for the Pavlovian conditioning engine."""

from pavlovian_agent.schemas.associations import ConditionedAssociation, SecondOrderChain
from pavlovian_agent.schemas.attention import AttentionalGate
from pavlovian_agent.schemas.drives import DriveState, create_default_drives
from pavlovian_agent.schemas.memory import MemoryTrace
from pavlovian_agent.schemas.state import ConsciousnessState
from pavlovian_agent.schemas.stimuli import (
    Response,
    ResponseType,
    Stimulus,
    StimulusType,
)

__all__ = [
    "AttentionalGate",
    "ConditionedAssociation",
    "ConsciousnessState",
    "create_default_drives",
    "DriveState",
    "MemoryTrace",
    "Response",
    "ResponseType",
    "SecondOrderChain",
    "Stimulus",
    "StimulusType",
]
