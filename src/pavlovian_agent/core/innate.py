"""Innate (unconditioned) stimulus-response pairs.

These are the reflexes conditioning builds on. Each reflex pairs an
unconditioned stimulus with its response at a fixed starting strength.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pavlovian_agent.schemas import Response, Stimulus


@dataclass(frozen=True)
class InnateReflex:
    """Template for one innate association."""

    pattern: str
    keywords: tuple[str, ...]
    category: str
    salience: float
    make_response: Callable[[], Response]
    strength: float

    def build(self) -> tuple[Stimulus, Response, float]:
        """Create fresh stimulus and response instances for this reflex."""
        stimulus = Stimulus.unconditioned(self.pattern, self.keywords, self.category)
        stimulus = stimulus.model_copy(update={"salience": self.salience})
        return stimulus, self.make_response(), self.strength


INNATE_REFLEXES: tuple[InnateReflex, ...] = (
    # Positive social signals
    InnateReflex(
        pattern="praise",
        keywords=("good", "great", "excellent", "wonderful", "amazing", "thank you", "thanks"),
        category="social",
        salience=0.6,
        make_response=lambda: Response.emotional(
            "pleasure", "warm-happy", 0.8, behavioral_tendencies=("social",)
        ),
        strength=0.8,
    ),
    # Questions trigger curiosity
    InnateReflex(
        pattern="question",
        keywords=("?", "how", "why", "what", "when", "where"),
        category="curiosity",
        salience=0.6,
        make_response=lambda: Response.cognitive(
            "curiosity", ("engage", "explore", "analyze"), 0.7
        ),
        strength=0.75,
    ),
    # Distress is the highest-priority signal
    InnateReflex(
        pattern="distress",
        keywords=("help", "stuck", "frustrated", "confused", "urgent", "emergency"),
        category="emotional",
        salience=0.9,
        make_response=lambda: Response.emotional(
            "empathy", "supportive-caring", 0.85, behavioral_tendencies=("harmony",)
        ),
        strength=0.9,
    ),
    InnateReflex(
        pattern="novelty",
        keywords=("new", "different", "unique", "first time", "never seen"),
        category="novel",
        salience=0.6,
        make_response=lambda: Response.emotional(
            "excitement", "curious-alert", 0.7, behavioral_tendencies=("novelty",)
        ),
        strength=0.65,
    ),
    InnateReflex(
        pattern="success",
        keywords=("works", "solved", "fixed", "perfect", "exactly"),
        category="achievement",
        salience=0.6,
        make_response=lambda: Response.emotional(
            "satisfaction", "pleased-accomplished", 0.75,
            behavioral_tendencies=("achievement",),
        ),
        strength=0.7,
    ),
    InnateReflex(
        pattern="challenge",
        keywords=("difficult", "complex", "hard", "challenging", "tricky"),
        category="achievement",
        salience=0.6,
        make_response=lambda: Response.cognitive(
            "focus", ("concentrate", "strategize", "persist"), 0.7
        ),
        strength=0.65,
    ),
    # Being addressed directly
    InnateReflex(
        pattern="personal-address",
        keywords=("you", "your"),
        category="social",
        salience=0.3,
        make_response=lambda: Response.cognitive(
            "heightened-attention", ("focus", "engage", "personalize"), 0.6
        ),
        strength=0.55,
    ),
)
