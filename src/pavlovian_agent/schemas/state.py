"""Consciousness state: the per-cycle affect/attention snapshot."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ConsciousnessState(BaseModel):
    """Immutable snapshot recomputed on every processed input."""

    current_focus: str = Field(default="awaiting input")
    arousal: float = Field(default=0.5, ge=0.0, le=1.0, description="Activation intensity")
    valence: float = Field(default=0.3, ge=-1.0, le=1.0, description="Pleasantness")
    dominant_emotion: str = Field(default="neutral-curious")
    awareness: float = Field(default=0.6, ge=0.0, le=1.0)
    active_drives: dict[str, float] = Field(default_factory=dict)
    active_associations: tuple[str, ...] = Field(default_factory=tuple)
    attentional_spotlight: tuple[str, ...] = Field(default_factory=tuple)
    state_timestamp: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": True}

    @classmethod
    def baseline(cls) -> ConsciousnessState:
        """A neutral, slightly positive resting state."""
        return cls(active_drives={"curiosity": 0.5, "social": 0.4})

    def describe(self) -> str:
        """One-line human-readable description."""
        if self.arousal > 0.8:
            arousal_desc = "highly aroused"
        elif self.arousal > 0.6:
            arousal_desc = "alert"
        elif self.arousal > 0.4:
            arousal_desc = "calm"
        elif self.arousal > 0.2:
            arousal_desc = "relaxed"
        else:
            arousal_desc = "drowsy"

        if self.valence > 0.5:
            valence_desc = "positive"
        elif self.valence > 0.2:
            valence_desc = "slightly positive"
        elif self.valence > -0.2:
            valence_desc = "neutral"
        elif self.valence > -0.5:
            valence_desc = "slightly negative"
        else:
            valence_desc = "negative"

        return (
            f"[Consciousness: {arousal_desc}, {valence_desc}, "
            f"focused on '{self.current_focus}', feeling {self.dominant_emotion}, "
            f"awareness: {self.awareness:.0%}]"
        )

    def to_log_dict(self) -> dict[str, Any]:
        """Flat JSON-friendly representation for JSONL logs."""
        return {
            "timestamp": self.state_timestamp.isoformat(),
            "focus": self.current_focus,
            "arousal": round(self.arousal, 4),
            "valence": round(self.valence, 4),
            "dominant_emotion": self.dominant_emotion,
            "awareness": round(self.awareness, 4),
            "drives": {k: round(v, 4) for k, v in self.active_drives.items()},
            "associations": list(self.active_associations),
            "spotlight": list(self.attentional_spotlight),
        }
