"""Consolidation cycle (simulated sleep).

ARCHITECTURAL INVARIANT: Consolidation never strengthens an extinct
association. Extinct associations can only regain strength through
spontaneous recovery, which is capped below full strength.

A consolidation pass:
1. Rehearses well-reinforced, non-extinct associations
2. Stabilizes memory traces that have been retrieved
3. Lets long-unreinforced extinct associations spontaneously recover
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Iterable

from pavlovian_agent.utils.config import (
    CONSOLIDATION_BOOST,
    CONSOLIDATION_CEILING_BOOST,
    CONSOLIDATION_MIN_REINFORCEMENTS,
    SPONTANEOUS_RECOVERY_CAP,
    SPONTANEOUS_RECOVERY_MIN_HOURS,
)

if TYPE_CHECKING:
    from pavlovian_agent.schemas import ConditionedAssociation, MemoryTrace
    from pavlovian_agent.utils.logging import StructuredLogger

logger = logging.getLogger(__name__)


# =============================================================================
# CONSOLIDATION RESULT
# =============================================================================

@dataclass
class ConsolidationResult:
    """Result of a consolidation run."""
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    associations_strengthened: int = 0
    associations_recovered: int = 0
    associations_skipped_extinct: int = 0
    traces_consolidated: int = 0

    # Association ids touched, for inspection
    strengthened_ids: list[str] = field(default_factory=list)
    recovered_ids: list[str] = field(default_factory=list)

    def complete(self, when: datetime | None = None) -> None:
        """Mark consolidation as complete."""
        self.completed_at = when or datetime.now()

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds."""
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds() * 1000


# =============================================================================
# CONSOLIDATION PASSES
# =============================================================================

def rehearse_associations(
    associations: Iterable[ConditionedAssociation],
    result: ConsolidationResult,
    structured_logger: StructuredLogger | None = None,
) -> None:
    """Strengthen non-extinct associations reinforced more than the minimum."""
    for association in associations:
        if association.is_extinct:
            result.associations_skipped_extinct += 1
            continue
        if association.reinforcement_count <= CONSOLIDATION_MIN_REINFORCEMENTS:
            continue

        association.max_strength = min(1.0, association.max_strength * CONSOLIDATION_CEILING_BOOST)
        delta = association.scale(CONSOLIDATION_BOOST)
        result.associations_strengthened += 1
        result.strengthened_ids.append(association.association_id)

        if structured_logger:
            structured_logger.consolidation(
                "Rehearsed association",
                association_id=association.association_id,
                strength=association.association_strength,
                delta=delta,
            )


def consolidate_traces(
    traces: Iterable[MemoryTrace],
    result: ConsolidationResult,
) -> None:
    """Advance consolidation of retrieved, not-yet-consolidated traces."""
    for trace in traces:
        if trace.retrieval_count > 0 and not trace.is_consolidated:
            trace.consolidate()
            result.traces_consolidated += 1


def recover_extinct(
    associations: Iterable[ConditionedAssociation],
    now: datetime,
    result: ConsolidationResult,
    structured_logger: StructuredLogger | None = None,
) -> None:
    """Apply spontaneous recovery to extinct associations left alone long enough."""
    min_elapsed = timedelta(hours=SPONTANEOUS_RECOVERY_MIN_HOURS)
    for association in associations:
        if not association.is_extinct:
            continue
        elapsed = now - association.last_reinforcement
        if elapsed <= min_elapsed:
            continue

        gained = association.apply_spontaneous_recovery(elapsed)
        if gained > 0:
            result.associations_recovered += 1
            result.recovered_ids.append(association.association_id)
            logger.debug(
                "Spontaneous recovery %s: +%.3f after %.1fh",
                association.association_id, gained, elapsed.total_seconds() / 3600,
            )

        if structured_logger:
            structured_logger.extinction(
                "Spontaneous recovery",
                association_id=association.association_id,
                strength=association.association_strength,
                delta=gained,
            )
            structured_logger.check_invariant(
                association.association_strength
                <= association.max_strength * SPONTANEOUS_RECOVERY_CAP + 1e-9,
                "recovery_cap",
                "Recovered strength stays under the recovery cap",
                association_id=association.association_id,
            )
