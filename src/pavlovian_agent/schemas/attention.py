"""Attentional gate: decides which matched stimuli reach the engine.

The gate is a pure filter. It never changes associations; it only
admits or rejects a stimulus for the current cycle.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from pavlovian_agent.schemas.stimuli import Stimulus
from pavlovian_agent.utils.config import (
    CAPACITY_THRESHOLD_RELIEF,
    DEFAULT_ATTENTION_THRESHOLD,
    DEFAULT_FATIGUE_FACTOR,
    MIN_ATTENTION_CAPACITY,
    PRIMED_CATEGORY_BOOST,
)


class AttentionalGate(BaseModel):
    """Salience filter with fatigue and recovery."""

    threshold: float = Field(default=DEFAULT_ATTENTION_THRESHOLD, ge=0.0, le=1.0)
    capacity: float = Field(default=1.0, ge=MIN_ATTENTION_CAPACITY, le=1.0)
    primed_categories: frozenset[str] = Field(
        default_factory=lambda: frozenset({"social", "emotional", "novel"}),
    )
    fatigue_factor: float = Field(
        default=DEFAULT_FATIGUE_FACTOR,
        ge=0.0,
        description="Capacity lost per minute of activity",
    )
    category_boost: float = Field(default=PRIMED_CATEGORY_BOOST, ge=1.0)
    last_reset: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": False}

    @property
    def effective_threshold(self) -> float:
        """Threshold relaxed in proportion to the remaining capacity."""
        return self.threshold * (1.0 - self.capacity * CAPACITY_THRESHOLD_RELIEF)

    def effective_salience(self, stimulus: Stimulus) -> float:
        """Stimulus salience with the priming boost, capped at 1."""
        salience = stimulus.salience
        if stimulus.category is not None and stimulus.category in self.primed_categories:
            salience *= self.category_boost
        return min(1.0, salience)

    def allows(self, stimulus: Stimulus) -> bool:
        """Whether the stimulus passes the gate this cycle."""
        return self.effective_salience(stimulus) > self.effective_threshold

    def apply_fatigue(self, elapsed: timedelta) -> None:
        """Reduce capacity by fatigue × elapsed minutes, floored at the minimum."""
        minutes = elapsed.total_seconds() / 60.0
        if minutes < 0:
            raise ValueError(f"elapsed must be non-negative, got {elapsed}")
        self.capacity = max(
            MIN_ATTENTION_CAPACITY,
            self.capacity - self.fatigue_factor * minutes,
        )

    def reset(self, when: datetime | None = None) -> None:
        """Restore full capacity (like after a break)."""
        self.capacity = 1.0
        self.last_reset = when or datetime.now()

    def prime(self, categories: list[str] | set[str] | frozenset[str]) -> None:
        """Add categories that receive the salience boost."""
        self.primed_categories = self.primed_categories | frozenset(categories)
