"""Homeostatic drive states.

A drive is a scalar motivational channel (like hunger in Pavlov's dogs)
that decays toward a baseline and potentiates responses to stimuli in
its associated categories.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field


class DriveState(BaseModel):
    """A single motivational channel with level in ``[0, 1]``."""

    name: str
    level: float = Field(default=0.5, ge=0.0, le=1.0)
    baseline: float = Field(default=0.5, ge=0.0, le=1.0)
    decay_rate: float = Field(default=0.01, ge=0.0, description="Fraction per minute")
    associated_categories: frozenset[str] = Field(default_factory=frozenset)
    last_updated: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": False}

    def increase(self, amount: float) -> None:
        """Raise the level (deprivation), clamped at 1."""
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        self.level = min(1.0, self.level + amount)
        self.last_updated = datetime.now()

    def decrease(self, amount: float) -> None:
        """Lower the level (satiation), clamped at 0."""
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        self.level = max(0.0, self.level - amount)
        self.last_updated = datetime.now()

    def update_with_decay(self, elapsed: timedelta) -> None:
        """Move the level toward baseline in proportion to elapsed time.

        The pulled fraction is capped at 1 so the level never overshoots
        the baseline.
        """
        minutes = elapsed.total_seconds() / 60.0
        if minutes < 0:
            raise ValueError(f"elapsed must be non-negative, got {elapsed}")
        fraction = min(1.0, self.decay_rate * minutes)
        self.level = self.level + (self.baseline - self.level) * fraction
        self.last_updated = datetime.now()

    def potentiates(self, category: str | None) -> bool:
        """Whether stimuli of this category are amplified by the drive."""
        return category is not None and category in self.associated_categories


def create_default_drives() -> list[DriveState]:
    """Create the five default drives."""
    return [
        DriveState(
            name="curiosity", level=0.7, baseline=0.5, decay_rate=0.01,
            associated_categories=frozenset({"curiosity", "novel"}),
        ),
        DriveState(
            name="social", level=0.6, baseline=0.5, decay_rate=0.02,
            associated_categories=frozenset({"social"}),
        ),
        DriveState(
            name="achievement", level=0.5, baseline=0.4, decay_rate=0.015,
            associated_categories=frozenset({"achievement"}),
        ),
        DriveState(
            name="novelty", level=0.6, baseline=0.5, decay_rate=0.02,
            associated_categories=frozenset({"novel"}),
        ),
        DriveState(
            name="harmony", level=0.5, baseline=0.5, decay_rate=0.01,
            associated_categories=frozenset({"emotional"}),
        ),
    ]
