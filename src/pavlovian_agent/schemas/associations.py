"""Conditioned association and second-order chain data contracts.

ARCHITECTURAL INVARIANT: Associations reference stimuli and responses by
id only. The engine owns the arena; nothing holds a live object graph.

Association state machine (derived, never stored):
- Active:  the default state
- Extinct: at least one extinction trial since the last reinforcement
           and strength below EXTINCTION_THRESHOLD

Active → Extinct only through repeated extinction trials.
Extinct → Active immediately on reinforcement, or gradually through
spontaneous recovery.
"""

from __future__ import annotations

import math
import uuid
from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from pavlovian_agent import learning
from pavlovian_agent.utils.config import (
    DEFAULT_LEARNING_RATE,
    DEFAULT_MAX_STRENGTH,
    EXTINCTION_THRESHOLD,
    SPONTANEOUS_RECOVERY_CAP,
    SPONTANEOUS_RECOVERY_MAX_FACTOR,
    SPONTANEOUS_RECOVERY_SCALE,
)


def _new_id() -> str:
    return str(uuid.uuid4())


def _require_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# CONDITIONED ASSOCIATION
# =============================================================================

class ConditionedAssociation(BaseModel):
    """A learned or innate link between one stimulus and one response.

    ``association_strength`` is V in the Rescorla-Wagner rule and always
    stays within ``[0, max_strength]``.
    """

    association_id: str = Field(default_factory=_new_id)
    stimulus_id: str = Field(..., description="ID of the predicting stimulus")
    response_id: str = Field(..., description="ID of the predicted response")
    association_strength: float = Field(default=0.3, ge=0.0, le=1.0)
    learning_rate: float = Field(default=DEFAULT_LEARNING_RATE, ge=0.0)
    max_strength: float = Field(default=DEFAULT_MAX_STRENGTH, ge=0.0, le=1.0)
    reinforcement_count: int = Field(default=0, ge=0)
    extinction_trials: int = Field(default=0, ge=0)
    last_reinforcement: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": False}

    @property
    def is_extinct(self) -> bool:
        """Whether repeated non-reinforcement has extinguished this link."""
        return self.extinction_trials > 0 and self.association_strength < EXTINCTION_THRESHOLD

    def _clamp(self, value: float) -> float:
        return learning.clamp(value, 0.0, self.max_strength)

    def reinforce(
        self,
        salience: float,
        amount: float = 1.0,
        total_strength: float | None = None,
        when: datetime | None = None,
    ) -> float:
        """Apply a reinforced trial.

        Args:
            salience: α of the stimulus on this trial.
            amount: Scale applied to the Rescorla-Wagner delta.
            total_strength: ΣV over every predictor of the same response.
                Defaults to this association's own strength.
            when: Trial timestamp.

        Returns:
            The strength change actually applied after clamping.
        """
        _require_non_negative("amount", amount)
        sigma = self.association_strength if total_strength is None else total_strength
        delta = learning.reinforce(
            salience, self.learning_rate, sigma, target=self.max_strength
        ) * amount

        before = self.association_strength
        self.association_strength = self._clamp(before + delta)
        self.reinforcement_count += 1
        self.extinction_trials = 0
        self.last_reinforcement = when or datetime.now()
        return self.association_strength - before

    def apply_extinction(
        self,
        salience: float,
        amount: float = 1.0,
        total_strength: float | None = None,
    ) -> float:
        """Apply a non-reinforced trial (Rescorla-Wagner toward zero).

        Returns:
            The strength change actually applied after clamping.
        """
        _require_non_negative("amount", amount)
        sigma = self.association_strength if total_strength is None else total_strength
        delta = learning.extinguish(salience, self.learning_rate, sigma) * amount

        before = self.association_strength
        self.association_strength = self._clamp(before + delta)
        self.extinction_trials += 1
        return self.association_strength - before

    def apply_spontaneous_recovery(self, elapsed: timedelta) -> float:
        """Partially restore an extinct association after time has passed.

        Recovery follows a saturating log curve of the hours elapsed and is
        capped at SPONTANEOUS_RECOVERY_CAP of max strength. A no-op unless
        the association is extinct.

        Returns:
            The strength regained.
        """
        if not self.is_extinct:
            return 0.0
        hours = elapsed.total_seconds() / 3600.0
        if hours < 0:
            raise ValueError(f"elapsed must be non-negative, got {elapsed}")

        factor = min(
            SPONTANEOUS_RECOVERY_MAX_FACTOR,
            math.log1p(hours) * SPONTANEOUS_RECOVERY_SCALE,
        )
        ceiling = self.max_strength * SPONTANEOUS_RECOVERY_CAP
        recovered = min(ceiling, self.association_strength + self.max_strength * factor)
        # Already above the ceiling: recovery never weakens
        recovered = max(recovered, self.association_strength)

        gained = recovered - self.association_strength
        self.association_strength = recovered
        return gained

    def scale(self, factor: float) -> float:
        """Multiply strength by a non-associative factor (habituation, sensitization)."""
        _require_non_negative("factor", factor)
        before = self.association_strength
        self.association_strength = self._clamp(before * factor)
        return self.association_strength - before


# =============================================================================
# SECOND-ORDER CHAIN
# =============================================================================

class SecondOrderChain(BaseModel):
    """Links two associations so firing the primary partially fires the secondary.

    Chain strength is fixed at creation as the product of both strengths.
    """

    chain_id: str = Field(default_factory=_new_id)
    primary_association_id: str
    secondary_association_id: str
    chain_strength: float = Field(..., ge=0.0, le=1.0)
    chain_depth: int = Field(default=2, ge=2)
    created_at: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        primary: ConditionedAssociation,
        secondary: ConditionedAssociation,
    ) -> SecondOrderChain:
        """Create a depth-2 chain from two existing associations."""
        return cls(
            primary_association_id=primary.association_id,
            secondary_association_id=secondary.association_id,
            chain_strength=primary.association_strength * secondary.association_strength,
            chain_depth=2,
        )
