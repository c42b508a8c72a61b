"""Rescorla-Wagner learning rule.

The single update shared by reinforcement and extinction:

    ΔV = β · α · (λ − ΣV)

where α is the salience of the conditioned stimulus, β the learning rate,
λ the target (1 for reinforcement, 0 for extinction) and ΣV the summed
strength of every association already predicting the same response.
Summing over all predictors is what produces blocking and overshadowing:
a response that is already fully predicted leaves nothing to learn.

Extinction is reinforcement toward a target of zero.
"""

from __future__ import annotations

REINFORCEMENT_TARGET: float = 1.0
EXTINCTION_TARGET: float = 0.0


def _require_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def compute_delta(
    salience: float,
    learning_rate: float,
    target: float,
    total_strength: float,
) -> float:
    """Compute the Rescorla-Wagner strength change.

    Args:
        salience: α, salience of the conditioned stimulus.
        learning_rate: β, learning rate of the association.
        target: λ, asymptote the prediction is pulled toward.
        total_strength: ΣV, summed strength of all predictors of the response.

    Returns:
        The signed change to apply to the association strength.

    Raises:
        ValueError: If salience or learning_rate is negative.
    """
    _require_non_negative("salience", salience)
    _require_non_negative("learning_rate", learning_rate)
    return learning_rate * salience * (target - total_strength)


def reinforce(
    salience: float,
    learning_rate: float,
    total_strength: float,
    target: float = REINFORCEMENT_TARGET,
) -> float:
    """Strength change for a reinforced trial (stimulus followed by outcome)."""
    return compute_delta(salience, learning_rate, target, total_strength)


def extinguish(
    salience: float,
    learning_rate: float,
    total_strength: float,
    target: float = EXTINCTION_TARGET,
) -> float:
    """Strength change for a non-reinforced trial (stimulus alone)."""
    return compute_delta(salience, learning_rate, target, total_strength)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp a computed strength into ``[low, high]``."""
    return max(low, min(high, value))
