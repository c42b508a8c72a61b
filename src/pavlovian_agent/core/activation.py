"""Activation weighting and state aggregation.

Pure functions that turn the associations fired on one input into the
next ConsciousnessState. The engine owns all mutation; nothing here
touches the arena.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

import numpy as np

from pavlovian_agent.schemas import ConsciousnessState, DriveState, Response
from pavlovian_agent.utils.config import (
    AROUSAL_DECAY,
    AROUSAL_OFFSET,
    AWARENESS_AROUSAL_WEIGHT,
    AWARENESS_BASE,
    AWARENESS_FOCUS_STEP,
    DEFAULT_FOCUS,
    DRIVE_MODULATION_CAP,
    DRIVE_MODULATION_GAIN,
    ENCODING_AROUSAL_WEIGHT,
    ENCODING_BASE,
    ENCODING_EMOTION_WEIGHT,
    ENCODING_NOVELTY_BONUS,
    NOVELTY_CATEGORY,
    SPOTLIGHT_SIZE,
    TONE_VALENCE,
    VALENCE_DECAY,
)


@dataclass(frozen=True)
class Activation:
    """One response activated on the current input.

    ``chained`` marks activations propagated through a second-order chain
    rather than fired directly by a matched stimulus.
    """

    association_id: str
    response: Response
    weight: float
    category: str | None = None
    chained: bool = False


def drive_modulation(category: str | None, drives: Iterable[DriveState]) -> float:
    """Multiplier from every drive that potentiates the category.

    Each potentiating drive contributes ``1 + gain × level``; the product
    is capped so no drive state can more than double a response.
    """
    modulation = 1.0
    for drive in drives:
        if drive.potentiates(category):
            modulation *= 1.0 + drive.level * DRIVE_MODULATION_GAIN
    return min(DRIVE_MODULATION_CAP, modulation)


def tone_valence(activations: Sequence[Activation]) -> float | None:
    """Weighted valence over the tone parts of emotional activations.

    Returns:
        The weighted mean valence, or None when no tone part is known.
    """
    values: list[float] = []
    weights: list[float] = []
    for activation in activations:
        for part in activation.response.emotional_tone.replace(" ", "-").split("-"):
            value = TONE_VALENCE.get(part.strip().lower())
            if value is not None:
                values.append(value)
                weights.append(activation.weight)

    if not values or sum(weights) <= 0:
        return None
    return float(np.average(values, weights=weights))


def encoding_strength(activations: Sequence[Activation], arousal: float) -> float:
    """Encoding strength for the interaction's memory trace.

    Emotional activations and the arousal they produced deepen encoding;
    novelty adds a flat bonus.
    """
    emotional = sum(a.weight for a in activations if a.response.is_emotional)
    novelty = any(a.category == NOVELTY_CATEGORY for a in activations)
    strength = (
        ENCODING_BASE
        + emotional * ENCODING_EMOTION_WEIGHT
        + arousal * ENCODING_AROUSAL_WEIGHT
        + (ENCODING_NOVELTY_BONUS if novelty else 0.0)
    )
    return min(1.0, strength)


def aggregate_state(
    previous: ConsciousnessState,
    activations: Sequence[Activation],
    focus: Sequence[str],
    drives: Iterable[DriveState],
    timestamp: datetime,
) -> ConsciousnessState:
    """Compute the next state from this cycle's activations.

    With nothing activated, arousal and valence decay multiplicatively
    from the previous state instead of being recomputed from zero.
    """
    if activations:
        mean_weight = float(np.mean([a.weight for a in activations]))
        arousal = min(1.0, mean_weight + AROUSAL_OFFSET)
    else:
        arousal = previous.arousal * AROUSAL_DECAY

    emotional = [a for a in activations if a.response.is_emotional]
    valence = tone_valence(emotional) if emotional else None
    if valence is None:
        valence = previous.valence * VALENCE_DECAY if not emotional else 0.0

    if emotional:
        dominant_emotion = max(emotional, key=lambda a: a.weight).response.emotional_tone
    else:
        dominant_emotion = previous.dominant_emotion

    awareness = min(
        1.0,
        AWARENESS_BASE + len(focus) * AWARENESS_FOCUS_STEP + arousal * AWARENESS_AROUSAL_WEIGHT,
    )

    return ConsciousnessState(
        current_focus=focus[0] if focus else DEFAULT_FOCUS,
        arousal=arousal,
        valence=max(-1.0, min(1.0, valence)),
        dominant_emotion=dominant_emotion,
        awareness=awareness,
        active_drives={d.name: d.level for d in drives},
        active_associations=tuple(a.association_id for a in activations if not a.chained),
        attentional_spotlight=tuple(focus[:SPOTLIGHT_SIZE]),
        state_timestamp=timestamp,
    )
