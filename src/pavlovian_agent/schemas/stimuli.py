"""Stimulus and Response data contracts.

Stimuli are pattern-matchable triggers; responses are named reactions.
Both are value types: changes produce a new instance via ``model_copy``.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMERATIONS
# =============================================================================

class StimulusType(str, Enum):
    """The role a stimulus plays in classical conditioning."""
    UNCONDITIONED = "unconditioned"  # Naturally triggers a response
    CONDITIONED = "conditioned"      # Triggers a response through learning
    NEUTRAL = "neutral"              # No established association yet
    CONTEXT = "context"              # Environmental/situational cue
    TEMPORAL = "temporal"            # Time-based trigger
    SOCIAL = "social"                # Person-related trigger
    EMOTIONAL = "emotional"          # Feeling-based trigger


class ResponseType(str, Enum):
    """The kind of reaction a response represents."""
    UNCONDITIONED = "unconditioned"
    CONDITIONED = "conditioned"
    ANTICIPATORY = "anticipatory"
    EMOTIONAL = "emotional"
    BEHAVIORAL = "behavioral"
    COGNITIVE = "cognitive"


# Default salience per stimulus type at creation
NEUTRAL_SALIENCE: float = 0.5
UNCONDITIONED_SALIENCE: float = 0.9


def _new_id() -> str:
    return str(uuid.uuid4())


# =============================================================================
# STIMULUS
# =============================================================================

class Stimulus(BaseModel):
    """A trigger that can activate conditioned responses.

    A stimulus matches free text when any keyword, or the pattern itself,
    is a case-insensitive substring of the text.
    """

    stimulus_id: str = Field(default_factory=_new_id, description="Stable identifier")
    pattern: str = Field(..., description="Canonical pattern for this stimulus")
    keywords: frozenset[str] = Field(
        default_factory=frozenset,
        description="Keywords that activate this stimulus",
    )
    category: str | None = Field(
        default=None,
        description="Grouping category (used for attention priming and drives)",
    )
    stimulus_type: StimulusType = Field(default=StimulusType.NEUTRAL)
    salience: float = Field(
        default=NEUTRAL_SALIENCE,
        ge=0.0,
        le=1.0,
        description="How attention-grabbing this stimulus is",
    )
    first_encounter: datetime = Field(default_factory=datetime.now)
    last_encounter: datetime = Field(default_factory=datetime.now)
    encounter_count: int = Field(default=1, ge=1)

    model_config = {"frozen": True}

    @classmethod
    def neutral(
        cls,
        pattern: str,
        keywords: list[str] | tuple[str, ...] | frozenset[str],
        category: str | None = None,
    ) -> Stimulus:
        """Create a neutral stimulus (salience 0.5)."""
        return cls(
            pattern=pattern,
            keywords=frozenset(keywords),
            category=category,
            stimulus_type=StimulusType.NEUTRAL,
            salience=NEUTRAL_SALIENCE,
        )

    @classmethod
    def unconditioned(
        cls,
        pattern: str,
        keywords: list[str] | tuple[str, ...] | frozenset[str],
        category: str | None = None,
    ) -> Stimulus:
        """Create an unconditioned stimulus (salience 0.9)."""
        return cls(
            pattern=pattern,
            keywords=frozenset(keywords),
            category=category,
            stimulus_type=StimulusType.UNCONDITIONED,
            salience=UNCONDITIONED_SALIENCE,
        )

    def matches(self, text: str | None) -> bool:
        """Check whether free text contains this stimulus."""
        if not text:
            return False
        lower = text.lower()
        if any(k and k.lower() in lower for k in self.keywords):
            return True
        return bool(self.pattern) and self.pattern.lower() in lower

    def encountered(self, when: datetime) -> Stimulus:
        """Return a copy with the encounter recorded."""
        return self.model_copy(
            update={
                "last_encounter": when,
                "encounter_count": self.encounter_count + 1,
            }
        )


# =============================================================================
# RESPONSE
# =============================================================================

class Response(BaseModel):
    """A reaction that stimuli can trigger."""

    response_id: str = Field(default_factory=_new_id, description="Stable identifier")
    name: str = Field(..., description="Response name, unique within an engine")
    response_type: ResponseType = Field(default=ResponseType.EMOTIONAL)
    intensity: float = Field(default=0.7, ge=0.0, le=1.0)
    emotional_tone: str = Field(
        default="neutral",
        description="Primary emotional quality, hyphen-separated parts",
    )
    behavioral_tendencies: tuple[str, ...] = Field(default_factory=tuple)
    cognitive_patterns: tuple[str, ...] = Field(default_factory=tuple)
    voice_tone_modifier: str | None = Field(default=None)

    model_config = {"frozen": True}

    @classmethod
    def emotional(
        cls,
        name: str,
        emotional_tone: str,
        intensity: float = 0.7,
        behavioral_tendencies: tuple[str, ...] = (),
    ) -> Response:
        """Create an emotional response."""
        return cls(
            name=name,
            response_type=ResponseType.EMOTIONAL,
            intensity=intensity,
            emotional_tone=emotional_tone,
            behavioral_tendencies=tuple(behavioral_tendencies),
        )

    @classmethod
    def cognitive(
        cls,
        name: str,
        patterns: list[str] | tuple[str, ...],
        intensity: float = 0.6,
    ) -> Response:
        """Create a cognitive response carrying thought patterns."""
        return cls(
            name=name,
            response_type=ResponseType.COGNITIVE,
            intensity=intensity,
            emotional_tone="neutral",
            cognitive_patterns=tuple(patterns),
        )

    @property
    def is_emotional(self) -> bool:
        return self.response_type == ResponseType.EMOTIONAL
