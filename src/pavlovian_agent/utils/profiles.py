"""Profile configuration system for the conditioning engine.

Profiles bundle learning and attention parameters for different
temperaments (balanced, easily conditioned, hard to move).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pavlovian_agent.utils.config import (
    AUTO_CONDITIONING_TRIGGER,
    DEFAULT_ATTENTION_THRESHOLD,
    DEFAULT_FATIGUE_FACTOR,
    DEFAULT_LEARNING_RATE,
)


class ProfileName(str, Enum):
    """Available profile names."""

    DEFAULT = "default"
    SENSITIVE = "sensitive"  # Notices more, learns faster
    STOIC = "stoic"          # Notices less, learns slower, tires faster


@dataclass
class EngineProfile:
    """Parameters for a specific engine temperament."""

    name: str
    description: str

    learning_rate: float = DEFAULT_LEARNING_RATE
    attention_threshold: float = DEFAULT_ATTENTION_THRESHOLD
    fatigue_factor: float = DEFAULT_FATIGUE_FACTOR
    auto_conditioning_trigger: float = AUTO_CONDITIONING_TRIGGER

    # Categories whose stimuli get the attention boost
    primed_categories: tuple[str, ...] = ("social", "emotional", "novel", "urgent")

    def __post_init__(self) -> None:
        for attr in ("learning_rate", "attention_threshold", "fatigue_factor"):
            value = getattr(self, attr)
            if value < 0:
                raise ValueError(f"{attr} must be non-negative, got {value}")


# ============================================================================
# Profile Definitions
# ============================================================================

DEFAULT_PROFILE = EngineProfile(
    name="default",
    description="Balanced learning and attention",
)

SENSITIVE_PROFILE = EngineProfile(
    name="sensitive",
    description="Low attention threshold and fast learning",
    learning_rate=0.3,
    attention_threshold=0.2,
    auto_conditioning_trigger=0.5,
)

STOIC_PROFILE = EngineProfile(
    name="stoic",
    description="High attention threshold, slow learning, quick fatigue",
    learning_rate=0.1,
    attention_threshold=0.45,
    fatigue_factor=0.005,
    auto_conditioning_trigger=0.75,
    primed_categories=("emotional", "urgent"),
)


# Profile registry
PROFILES: dict[str, EngineProfile] = {
    "default": DEFAULT_PROFILE,
    "sensitive": SENSITIVE_PROFILE,
    "stoic": STOIC_PROFILE,
}


def get_profile(name: str) -> EngineProfile:
    """Get a profile by name.

    Args:
        name: Profile name (case-insensitive).

    Returns:
        The EngineProfile for the specified name.

    Raises:
        ValueError: If profile name is not found.
    """
    name_lower = name.lower()
    if name_lower not in PROFILES:
        available = ", ".join(PROFILES.keys())
        raise ValueError(f"Unknown profile: {name}. Available: {available}")

    return PROFILES[name_lower]


def list_profiles() -> list[tuple[str, str]]:
    """List available profiles with descriptions.

    Returns:
        List of (name, description) tuples.
    """
    return [(p.name, p.description) for p in PROFILES.values()]
