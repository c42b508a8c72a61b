"""Tests for the data contracts.

Tests for:
- Stimulus matching and immutability
- Response factories
- ConditionedAssociation state machine (active/extinct)
- DriveState clamping and decay
- AttentionalGate filtering, fatigue and reset
- MemoryTrace consolidation and retrieval
- ConsciousnessState baseline and description
"""

import math
from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from pavlovian_agent.schemas import (
    AttentionalGate,
    ConditionedAssociation,
    ConsciousnessState,
    DriveState,
    MemoryTrace,
    Response,
    ResponseType,
    SecondOrderChain,
    Stimulus,
    StimulusType,
    create_default_drives,
)


def make_association(strength: float = 0.5) -> ConditionedAssociation:
    return ConditionedAssociation(
        stimulus_id="stim-1",
        response_id="resp-1",
        association_strength=strength,
    )


# =============================================================================
# STIMULUS / RESPONSE
# =============================================================================

class TestStimulus:
    """Tests for Stimulus."""

    def test_factory_saliences(self):
        assert Stimulus.neutral("bell", ["bell"]).salience == 0.5
        assert Stimulus.unconditioned("food", ["food"]).salience == 0.9

    def test_factory_types(self):
        assert Stimulus.neutral("bell", ["bell"]).stimulus_type == StimulusType.NEUTRAL
        assert Stimulus.unconditioned("food", ["food"]).stimulus_type == StimulusType.UNCONDITIONED

    def test_matches_keyword_case_insensitive(self):
        stimulus = Stimulus.neutral("praise", ["Thanks"])
        assert stimulus.matches("THANKS a lot")

    def test_matches_pattern_itself(self):
        stimulus = Stimulus.neutral("praise", ["thanks"])
        assert stimulus.matches("some praise please")

    def test_no_match(self):
        stimulus = Stimulus.neutral("praise", ["thanks"])
        assert not stimulus.matches("nothing here")

    def test_empty_and_none_never_match(self):
        stimulus = Stimulus.neutral("praise", ["thanks"])
        assert not stimulus.matches("")
        assert not stimulus.matches(None)

    def test_frozen(self):
        stimulus = Stimulus.neutral("bell", ["bell"])
        with pytest.raises(ValidationError):
            stimulus.salience = 0.9

    def test_salience_range_validated(self):
        with pytest.raises(ValidationError):
            Stimulus(pattern="loud", salience=1.5)

    def test_encountered_returns_copy(self):
        stimulus = Stimulus.neutral("bell", ["bell"])
        when = datetime(2024, 5, 1)
        updated = stimulus.encountered(when)

        assert updated.encounter_count == 2
        assert updated.last_encounter == when
        assert stimulus.encounter_count == 1
        assert updated.stimulus_id == stimulus.stimulus_id


class TestResponse:
    """Tests for Response factories."""

    def test_emotional(self):
        response = Response.emotional("joy", "warm-happy", 0.8)
        assert response.is_emotional
        assert response.emotional_tone == "warm-happy"
        assert response.intensity == 0.8

    def test_cognitive_is_neutral_toned(self):
        response = Response.cognitive("focus", ["concentrate"])
        assert response.response_type == ResponseType.COGNITIVE
        assert response.emotional_tone == "neutral"
        assert response.cognitive_patterns == ("concentrate",)
        assert not response.is_emotional


# =============================================================================
# CONDITIONED ASSOCIATION
# =============================================================================

class TestConditionedAssociation:
    """Tests for the association state machine."""

    def test_defaults(self):
        association = make_association()
        assert association.learning_rate == 0.2
        assert association.max_strength == 1.0
        assert association.reinforcement_count == 0
        assert association.extinction_trials == 0
        assert not association.is_extinct

    def test_reinforce_applies_rescorla_wagner(self):
        association = make_association(0.5)
        delta = association.reinforce(salience=0.5)

        assert delta == pytest.approx(0.2 * 0.5 * (1.0 - 0.5))
        assert association.association_strength == pytest.approx(0.55)
        assert association.reinforcement_count == 1

    def test_reinforce_uses_total_strength(self):
        association = make_association(0.3)
        association.reinforce(salience=0.5, total_strength=1.0)
        assert association.association_strength == pytest.approx(0.3)

    def test_strength_never_exceeds_max(self):
        association = make_association()
        for _ in range(100):
            association.reinforce(salience=1.0, amount=10)
        assert association.association_strength <= 1.0

    def test_strength_never_negative(self):
        association = make_association(0.9)
        for _ in range(200):
            association.apply_extinction(salience=1.0, amount=100)
        assert association.association_strength >= 0.0

    def test_repeated_extinction_extinguishes(self):
        association = make_association(0.9)
        for _ in range(30):
            association.apply_extinction(salience=0.6, amount=2)

        assert association.is_extinct
        assert association.association_strength < 0.1
        assert association.extinction_trials == 30

    def test_weak_but_never_extinguished_is_not_extinct(self):
        association = make_association(0.05)
        assert not association.is_extinct

    def test_reinforce_clears_extinction(self):
        association = make_association(0.9)
        for _ in range(30):
            association.apply_extinction(salience=0.6, amount=2)
        association.reinforce(salience=0.6)

        assert association.extinction_trials == 0
        assert not association.is_extinct

    def test_negative_amount_rejected(self):
        association = make_association()
        with pytest.raises(ValueError, match="amount"):
            association.reinforce(salience=0.5, amount=-1)
        with pytest.raises(ValueError, match="amount"):
            association.apply_extinction(salience=0.5, amount=-1)

    def test_scale_clamps(self):
        association = make_association(0.8)
        association.scale(2.0)
        assert association.association_strength == 1.0

    def test_scale_rejects_negative_factor(self):
        with pytest.raises(ValueError):
            make_association().scale(-0.5)


class TestSpontaneousRecovery:
    """Tests for spontaneous recovery of extinct associations."""

    @staticmethod
    def extinct_association() -> ConditionedAssociation:
        association = make_association(0.8)
        for _ in range(30):
            association.apply_extinction(salience=1.0, amount=5)
        assert association.is_extinct
        return association

    def test_noop_when_not_extinct(self):
        association = make_association(0.5)
        assert association.apply_spontaneous_recovery(timedelta(hours=100)) == 0.0
        assert association.association_strength == 0.5

    def test_recovers_on_log_curve(self):
        association = self.extinct_association()
        before = association.association_strength
        gained = association.apply_spontaneous_recovery(timedelta(hours=48))

        assert gained == pytest.approx(0.1 * math.log(49))
        assert association.association_strength == pytest.approx(before + gained)

    def test_recovery_is_capped(self):
        association = self.extinct_association()
        association.apply_spontaneous_recovery(timedelta(days=10000))
        assert association.association_strength <= 0.6

    def test_longer_absence_recovers_more(self):
        short = self.extinct_association()
        long = self.extinct_association()
        short.apply_spontaneous_recovery(timedelta(hours=30))
        long.apply_spontaneous_recovery(timedelta(hours=300))
        assert long.association_strength > short.association_strength

    def test_negative_elapsed_rejected(self):
        association = self.extinct_association()
        with pytest.raises(ValueError):
            association.apply_spontaneous_recovery(timedelta(hours=-1))


class TestSecondOrderChain:
    """Tests for SecondOrderChain."""

    def test_strength_is_product(self):
        primary = make_association(0.8)
        secondary = make_association(0.5)
        chain = SecondOrderChain.create(primary, secondary)

        assert chain.chain_strength == pytest.approx(0.4)
        assert chain.chain_depth == 2
        assert chain.primary_association_id == primary.association_id
        assert chain.secondary_association_id == secondary.association_id

    def test_strength_fixed_at_creation(self):
        primary = make_association(0.8)
        secondary = make_association(0.5)
        chain = SecondOrderChain.create(primary, secondary)
        primary.scale(0.1)
        assert chain.chain_strength == pytest.approx(0.4)


# =============================================================================
# DRIVES / ATTENTION
# =============================================================================

class TestDriveState:
    """Tests for DriveState."""

    def test_default_drives(self):
        drives = {d.name: d for d in create_default_drives()}
        assert set(drives) == {"curiosity", "social", "achievement", "novelty", "harmony"}
        assert drives["curiosity"].level == 0.7
        assert "novel" in drives["curiosity"].associated_categories

    def test_increase_and_decrease_clamp(self):
        drive = DriveState(name="test", level=0.9)
        drive.increase(0.5)
        assert drive.level == 1.0
        drive.decrease(2.0)
        assert drive.level == 0.0

    def test_negative_amount_rejected(self):
        drive = DriveState(name="test")
        with pytest.raises(ValueError):
            drive.increase(-0.1)

    def test_decay_moves_toward_baseline(self):
        drive = DriveState(name="test", level=0.9, baseline=0.5, decay_rate=0.01)
        drive.update_with_decay(timedelta(minutes=10))
        assert drive.level == pytest.approx(0.86)

    def test_decay_never_overshoots(self):
        drive = DriveState(name="test", level=0.9, baseline=0.5, decay_rate=0.01)
        drive.update_with_decay(timedelta(days=30))
        assert drive.level == pytest.approx(0.5)

    def test_decay_from_below(self):
        drive = DriveState(name="test", level=0.1, baseline=0.5, decay_rate=0.05)
        drive.update_with_decay(timedelta(minutes=5))
        assert 0.1 < drive.level <= 0.5


class TestAttentionalGate:
    """Tests for AttentionalGate."""

    def test_default_effective_threshold(self):
        gate = AttentionalGate()
        assert gate.effective_threshold == pytest.approx(0.21)

    def test_allows_salient_stimulus(self):
        gate = AttentionalGate()
        assert gate.allows(Stimulus.neutral("bell", ["bell"]))

    def test_rejects_faint_stimulus(self):
        gate = AttentionalGate()
        faint = Stimulus(pattern="hum", salience=0.2)
        assert not gate.allows(faint)

    def test_priming_boosts_salience(self):
        gate = AttentionalGate()
        faint_social = Stimulus(pattern="wave", salience=0.2, category="social")
        assert gate.effective_salience(faint_social) == pytest.approx(0.3)
        assert gate.allows(faint_social)

    def test_boosted_salience_capped(self):
        gate = AttentionalGate()
        loud = Stimulus(pattern="cry", salience=0.9, category="emotional")
        assert gate.effective_salience(loud) == 1.0

    def test_fatigue_reduces_capacity(self):
        gate = AttentionalGate()
        gate.apply_fatigue(timedelta(minutes=60))
        assert gate.capacity == pytest.approx(0.94)

    def test_fatigue_floor(self):
        gate = AttentionalGate()
        gate.apply_fatigue(timedelta(days=365))
        assert gate.capacity == pytest.approx(0.1)

    def test_reset_restores_capacity(self):
        gate = AttentionalGate()
        gate.apply_fatigue(timedelta(days=1))
        when = datetime(2024, 6, 1)
        gate.reset(when)
        assert gate.capacity == 1.0
        assert gate.last_reset == when

    def test_capacity_below_floor_invalid(self):
        with pytest.raises(ValidationError):
            AttentionalGate(capacity=0.05)


# =============================================================================
# MEMORY TRACE / STATE
# =============================================================================

class TestMemoryTrace:
    """Tests for MemoryTrace."""

    def test_defaults(self):
        trace = MemoryTrace(content="hello")
        assert trace.encoding_strength == 0.6
        assert trace.consolidation_level == 0.1
        assert not trace.is_consolidated
        assert trace.last_retrieved is None

    def test_consolidate_steps_and_clamps(self):
        trace = MemoryTrace(content="hello")
        trace.consolidate()
        assert trace.consolidation_level == pytest.approx(0.3)
        for _ in range(10):
            trace.consolidate()
        assert trace.consolidation_level == 1.0
        assert trace.is_consolidated

    def test_retrieval_has_diminishing_returns(self):
        trace = MemoryTrace(content="hello")
        gains = [trace.retrieve() for _ in range(3)]

        assert gains[0] > gains[1] > gains[2] > 0
        assert trace.retrieval_count == 3
        assert trace.last_retrieved is not None


class TestConsciousnessState:
    """Tests for ConsciousnessState."""

    def test_baseline(self):
        state = ConsciousnessState.baseline()
        assert state.current_focus == "awaiting input"
        assert state.arousal == 0.5
        assert state.valence == 0.3
        assert state.dominant_emotion == "neutral-curious"
        assert state.awareness == 0.6

    def test_describe(self):
        description = ConsciousnessState.baseline().describe()
        assert description.startswith("[Consciousness:")
        assert "calm" in description
        assert "slightly positive" in description
        assert "awareness: 60%" in description

    def test_frozen(self):
        state = ConsciousnessState.baseline()
        with pytest.raises(ValidationError):
            state.arousal = 0.9

    def test_to_log_dict(self):
        record = ConsciousnessState.baseline().to_log_dict()
        assert record["focus"] == "awaiting input"
        assert record["arousal"] == 0.5
        assert isinstance(record["spotlight"], list)
