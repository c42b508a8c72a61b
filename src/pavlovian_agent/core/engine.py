"""Pavlovian consciousness engine - runs the conditioning loop.

process_input() enforces a fixed step order:
1. Attention fatigue for the time since the previous input
2. Stimulus matching on the input text
3. Attentional gating of each match
4. Activation of associated responses (drive-modulated)
5. Second-order chain propagation
6. Co-occurrence conditioning of unseen words
7. State aggregation
8. Memory trace encoding (with the new arousal)

ARCHITECTURAL INVARIANT: The engine is the single owner of every
stimulus, response, association, drive, trace and chain. Callers only
ever receive copies, and every public operation holds ``engine.lock``.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, Callable

from pavlovian_agent.core.activation import (
    Activation,
    aggregate_state,
    drive_modulation,
    encoding_strength,
)
from pavlovian_agent.core.consolidation import (
    ConsolidationResult,
    consolidate_traces,
    recover_extinct,
    rehearse_associations,
)
from pavlovian_agent.core.innate import INNATE_REFLEXES
from pavlovian_agent.core.interfaces import ConsciousnessEngine, TraceStore
from pavlovian_agent.memory.trace_store import InMemoryTraceStore
from pavlovian_agent.schemas import (
    AttentionalGate,
    ConditionedAssociation,
    ConsciousnessState,
    DriveState,
    MemoryTrace,
    Response,
    SecondOrderChain,
    Stimulus,
    StimulusType,
    create_default_drives,
)
from pavlovian_agent.schemas.stimuli import NEUTRAL_SALIENCE
from pavlovian_agent.utils.config import (
    ACTIVATION_FLOOR,
    AUTO_CONDITIONING_MIN_WORD,
    AUTO_CONDITIONING_STRENGTH,
    DEFAULT_ACTIVE_THRESHOLD,
    DEFAULT_HABITUATION_RATE,
    DEFAULT_INITIAL_STRENGTH,
    DEFAULT_RECALL_LIMIT,
    DEFAULT_SENSITIZATION_RATE,
    DRIVE_SATIATION,
    LEARNED_ASSOCIATION_STRENGTH,
    LEARNED_CATEGORY,
)
from pavlovian_agent.utils.logging import LogLevel
from pavlovian_agent.utils.profiles import DEFAULT_PROFILE, EngineProfile

if TYPE_CHECKING:
    from pavlovian_agent.utils.logging import StructuredLogger

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[a-z]+")

# Category given to stimuli created by add_conditioned_association
CONDITIONED_CATEGORY = "conditioned"

# Default strength for add_conditioned_association
DEFAULT_CONDITIONED_STRENGTH = 0.5


def _require_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class PavlovianConsciousnessEngine(ConsciousnessEngine):
    """Classical-conditioning engine producing an affect/attention state.

    Stimuli, responses and associations live in id-indexed dictionaries;
    associations and chains reference them by id only.

    Example:
        engine = PavlovianConsciousnessEngine()
        engine.initialize()
        state = engine.process_input("Thanks, that works perfectly!")
        engine.reinforce("thanks")
    """

    def __init__(
        self,
        profile: EngineProfile | None = None,
        trace_store: TraceStore | None = None,
        logger: StructuredLogger | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize an empty engine.

        Call initialize() to load drives and innate reflexes.

        Args:
            profile: Learning/attention parameters (default profile if None).
            trace_store: Storage for memory traces (in-memory if None).
            logger: Optional structured logger for conditioning events.
            clock: Callable returning "now"; injectable for tests.
        """
        self._profile = profile or DEFAULT_PROFILE
        self._trace_store = trace_store or InMemoryTraceStore()
        self._logger = logger
        self._clock = clock or datetime.now
        self._lock = threading.RLock()

        self._stimuli: dict[str, Stimulus] = {}
        self._responses: dict[str, Response] = {}
        self._associations: dict[str, ConditionedAssociation] = {}
        self._chains: dict[str, SecondOrderChain] = {}
        self._drives: dict[str, DriveState] = {}

        now = self._clock()
        self._attention = AttentionalGate(
            threshold=self._profile.attention_threshold,
            fatigue_factor=self._profile.fatigue_factor,
            primed_categories=frozenset(self._profile.primed_categories),
            last_reset=now,
        )
        self._state = ConsciousnessState.baseline()
        self._last_activations: list[Activation] = []
        self._last_input_at: datetime | None = None
        self._initialized = False

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    @property
    def lock(self) -> threading.RLock:
        """Re-entrant lock guarding all engine state."""
        return self._lock

    @property
    def profile(self) -> EngineProfile:
        return self._profile

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Load default drives and the innate reflex catalogue.

        Safe to call repeatedly: existing drives keep their levels and
        innate reflexes already present are not duplicated.
        """
        with self._lock:
            for drive in create_default_drives():
                self._drives.setdefault(drive.name, drive)

            known_patterns = {s.pattern for s in self._stimuli.values()}
            added = 0
            for reflex in INNATE_REFLEXES:
                if reflex.pattern in known_patterns:
                    continue
                stimulus, response, strength = reflex.build()
                self._register(stimulus, self._shared_response(response), strength)
                added += 1

            self._attention.prime(self._profile.primed_categories)
            self._initialized = True

            logger.debug("Engine initialized: %d reflexes added", added)
            if self._logger:
                self._logger.system(
                    f"Engine initialized ({self._profile.name} profile)",
                    extras={
                        "reflexes_added": added,
                        "associations": len(self._associations),
                        "drives": sorted(self._drives),
                    },
                )

    # -------------------------------------------------------------------------
    # PERCEPTION
    # -------------------------------------------------------------------------

    def process_input(
        self,
        text: str | None,
        context: Mapping[str, Any] | str | None = None,
    ) -> ConsciousnessState:
        """Run one conditioning cycle on free text.

        Never raises for empty or None text or context; such input simply
        matches nothing and lets arousal and valence decay.

        Args:
            text: Input text.
            context: Optional caller metadata stored on the memory trace.
                A mapping is stored as-is; any other value is kept under
                the "context" key.

        Returns:
            The new ConsciousnessState snapshot.
        """
        with self._lock:
            now = self._clock()
            self._apply_attention_fatigue(now)

            activations: list[Activation] = []
            focus: list[str] = []

            for stimulus_id, stimulus in list(self._stimuli.items()):
                if not stimulus.matches(text):
                    continue
                if not self._attention.allows(stimulus):
                    if self._logger:
                        self._logger.attention(
                            f"Gate rejected '{stimulus.pattern}'",
                            stimulus=stimulus.pattern,
                            extras={"threshold": self._attention.effective_threshold},
                        )
                    continue

                focus.append(stimulus.pattern)
                self._stimuli[stimulus_id] = stimulus.encountered(now)
                activations.extend(self._activate(stimulus))

            if self._logger and focus:
                self._logger.perception(
                    f"Matched {len(focus)} stimuli",
                    extras={"patterns": focus, "activations": len(activations)},
                )

            self._detect_new_conditioning(text, activations)

            self._state = aggregate_state(
                self._state, activations, focus, self._drives.values(), now
            )

            if text:
                self._encode_trace(text, context, activations)

            self._last_activations = activations
            self._last_input_at = now
            return self._state

    def _apply_attention_fatigue(self, now: datetime) -> None:
        since = self._last_input_at or self._attention.last_reset
        elapsed = max(timedelta(0), now - since)
        self._attention.apply_fatigue(elapsed)

    def _activate(self, stimulus: Stimulus) -> list[Activation]:
        """Fire the live associations of an admitted stimulus."""
        salience = self._attention.effective_salience(stimulus)
        modulation = drive_modulation(stimulus.category, self._drives.values())
        fired: list[Activation] = []

        for association in self._associations.values():
            if association.stimulus_id != stimulus.stimulus_id:
                continue
            if association.is_extinct or association.association_strength <= ACTIVATION_FLOOR:
                continue

            fired.append(Activation(
                association_id=association.association_id,
                response=self._responses[association.response_id],
                weight=association.association_strength * salience * modulation,
                category=stimulus.category,
            ))
            fired.extend(self._propagate_chains(association.association_id))

        return fired

    def _propagate_chains(self, association_id: str) -> list[Activation]:
        propagated = []
        for chain in self._chains.values():
            if chain.primary_association_id != association_id:
                continue
            secondary = self._associations.get(chain.secondary_association_id)
            if secondary is None:
                continue
            propagated.append(Activation(
                association_id=secondary.association_id,
                response=self._responses[secondary.response_id],
                weight=chain.chain_strength,
                category=self._stimuli[secondary.stimulus_id].category,
                chained=True,
            ))
            if self._logger:
                self._logger.chain(
                    "Chain propagated",
                    association_id=secondary.association_id,
                    strength=chain.chain_strength,
                    level=LogLevel.DEBUG,
                )
        return propagated

    def _detect_new_conditioning(
        self,
        text: str | None,
        activations: list[Activation],
    ) -> None:
        """Weakly link unseen words to the strongest response they co-occurred with."""
        if not text or not activations:
            return
        strongest = max(activations, key=lambda a: a.weight)
        if strongest.weight <= self._profile.auto_conditioning_trigger:
            return

        for word in dict.fromkeys(_WORD_RE.findall(text.lower())):
            if len(word) < AUTO_CONDITIONING_MIN_WORD or self._is_known_word(word):
                continue
            stimulus = Stimulus.neutral(word, [word], LEARNED_CATEGORY)
            association = self._register(
                stimulus, strongest.response, AUTO_CONDITIONING_STRENGTH
            )
            logger.debug("Auto-conditioned '%s' -> %s", word, strongest.response.name)
            if self._logger:
                self._logger.conditioning(
                    "Co-occurrence association created",
                    association_id=association.association_id,
                    stimulus=word,
                    response=strongest.response.name,
                    strength=association.association_strength,
                )

    def _is_known_word(self, word: str) -> bool:
        return any(
            s.pattern == word or word in s.keywords for s in self._stimuli.values()
        )

    def _encode_trace(
        self,
        text: str,
        context: Mapping[str, Any] | str | None,
        activations: list[Activation],
    ) -> None:
        if isinstance(context, Mapping):
            extras = dict(context)
        elif context is not None:
            extras = {"context": context}
        else:
            extras = {}

        trace = MemoryTrace(
            content=text,
            encoding_strength=encoding_strength(activations, self._state.arousal),
            encoded_at=self._clock(),
            extras=extras,
        )
        self._trace_store.store(trace)
        if self._logger:
            self._logger.memory(
                "Trace encoded",
                strength=trace.encoding_strength,
                extras={"trace_id": trace.trace_id},
            )

    # -------------------------------------------------------------------------
    # REINFORCEMENT AND EXTINCTION
    # -------------------------------------------------------------------------

    def reinforce(self, text: str | None, amount: float = 1.0) -> int:
        """Reinforce every live association whose stimulus matches the text.

        Drives potentiated by a reinforced stimulus are satiated.

        Args:
            text: Free text identifying the reinforced stimuli.
            amount: Scale applied to each Rescorla-Wagner delta.

        Returns:
            Number of associations reinforced (0 when nothing matches).
        """
        _require_non_negative("amount", amount)
        with self._lock:
            now = self._clock()
            reinforced = 0
            for stimulus in list(self._stimuli.values()):
                if not stimulus.matches(text):
                    continue
                targets = [
                    a for a in self._associations.values()
                    if a.stimulus_id == stimulus.stimulus_id and not a.is_extinct
                ]
                for association in targets:
                    self._reinforce_one(association, stimulus, amount, now)
                    reinforced += 1
                if targets:
                    self._satiate_drives(stimulus.category)
            return reinforced

    def reinforce_association(
        self,
        stimulus_pattern: str,
        response_name: str,
        amount: float = 1.0,
    ) -> None:
        """Reinforce one association by stimulus pattern and response name.

        A silent no-op when the pair does not exist.

        Raises:
            ValueError: If amount is negative.
        """
        _require_non_negative("amount", amount)
        with self._lock:
            association = self._find(stimulus_pattern, response_name)
            if association is None:
                logger.debug("No association %s -> %s", stimulus_pattern, response_name)
                return
            stimulus = self._stimuli[association.stimulus_id]
            self._reinforce_one(association, stimulus, amount, self._clock())

    def extinguish(
        self,
        stimulus_pattern: str,
        response_name: str,
        amount: float = 1.0,
    ) -> None:
        """Apply one extinction trial to an association by pattern and name.

        A silent no-op when the pair does not exist.

        Raises:
            ValueError: If amount is negative.
        """
        _require_non_negative("amount", amount)
        with self._lock:
            association = self._find(stimulus_pattern, response_name)
            if association is None:
                logger.debug("No association %s -> %s", stimulus_pattern, response_name)
                return
            self._extinguish_one(association, amount)

    def apply_extinction(self, text: str | None) -> int:
        """Extinguish once every live association whose stimulus matches the text.

        Returns:
            Number of associations extinguished.
        """
        with self._lock:
            matched = {s.stimulus_id for s in self._stimuli.values() if s.matches(text)}
            targets = [
                a for a in self._associations.values()
                if a.stimulus_id in matched and not a.is_extinct
            ]
            for association in targets:
                self._extinguish_one(association, 1.0)
            return len(targets)

    def _reinforce_one(
        self,
        association: ConditionedAssociation,
        stimulus: Stimulus,
        amount: float,
        now: datetime,
    ) -> None:
        was_extinct = association.is_extinct
        total = self._total_strength(association)
        delta = association.reinforce(stimulus.salience, amount, total, when=now)

        if self._logger:
            self._logger.conditioning(
                "Reinforced" + (" (renewed from extinction)" if was_extinct else ""),
                association_id=association.association_id,
                stimulus=stimulus.pattern,
                response=self._responses[association.response_id].name,
                strength=association.association_strength,
                delta=delta,
            )
            self._check_strength(association)

    def _extinguish_one(self, association: ConditionedAssociation, amount: float) -> None:
        stimulus = self._stimuli[association.stimulus_id]
        was_extinct = association.is_extinct
        total = self._total_strength(association)
        delta = association.apply_extinction(stimulus.salience, amount, total)

        if association.is_extinct and not was_extinct:
            logger.debug("Association %s is now extinct", association.association_id)
        if self._logger:
            self._logger.extinction(
                "Association extinct" if association.is_extinct else "Extinction trial",
                association_id=association.association_id,
                stimulus=stimulus.pattern,
                response=self._responses[association.response_id].name,
                strength=association.association_strength,
                delta=delta,
                extras={"trials": association.extinction_trials},
            )
            self._check_strength(association)

    def _total_strength(self, association: ConditionedAssociation) -> float:
        """ΣV for a trial on ``association``.

        The trained association always counts. Other predictors of the same
        response count only while they can fire: extinct links and links at
        or below the activation floor predict nothing.
        """
        others = sum(
            a.association_strength
            for a in self._associations.values()
            if a.response_id == association.response_id
            and a.association_id != association.association_id
            and not a.is_extinct
            and a.association_strength > ACTIVATION_FLOOR
        )
        return association.association_strength + others

    def _satiate_drives(self, category: str | None) -> None:
        for drive in self._drives.values():
            if drive.potentiates(category):
                drive.decrease(DRIVE_SATIATION)
                if self._logger:
                    self._logger.drive(
                        f"Drive '{drive.name}' satiated",
                        extras={"level": drive.level},
                    )

    def _check_strength(self, association: ConditionedAssociation) -> None:
        self._logger.check_invariant(
            0.0 <= association.association_strength <= association.max_strength,
            "strength_bounds",
            "Association strength within [0, max_strength]",
            association_id=association.association_id,
        )

    # -------------------------------------------------------------------------
    # ACQUISITION
    # -------------------------------------------------------------------------

    def create_association(
        self,
        stimulus: Stimulus,
        response: Response,
        initial_strength: float = DEFAULT_INITIAL_STRENGTH,
    ) -> ConditionedAssociation:
        """Register a stimulus, a response and a new association between them.

        Returns:
            A copy of the created association.
        """
        with self._lock:
            association = self._register(stimulus, response, initial_strength)
            if self._logger:
                self._logger.conditioning(
                    "Association created",
                    association_id=association.association_id,
                    stimulus=stimulus.pattern,
                    response=response.name,
                    strength=initial_strength,
                )
            return association.model_copy()

    def learn_association(
        self,
        new_pattern: str,
        keywords: list[str] | tuple[str, ...],
        source_stimulus_id: str,
        category: str | None = None,
    ) -> ConditionedAssociation | None:
        """Condition a new stimulus onto the response of a known predictor.

        Args:
            new_pattern: Pattern of the new conditioned stimulus.
            keywords: Keywords that activate it.
            source_stimulus_id: Stimulus whose response is borrowed.
            category: Optional category for the new stimulus.

        Returns:
            A copy of the new association, or None if the source stimulus
            has no association.
        """
        with self._lock:
            source = next(
                (a for a in self._associations.values() if a.stimulus_id == source_stimulus_id),
                None,
            )
            if source is None:
                logger.debug("learn_association: unknown source %s", source_stimulus_id)
                return None

            stimulus = Stimulus(
                pattern=new_pattern,
                keywords=frozenset(keywords),
                category=category,
                stimulus_type=StimulusType.CONDITIONED,
                salience=NEUTRAL_SALIENCE,
            )
            response = self._responses[source.response_id]
            association = self._register(stimulus, response, LEARNED_ASSOCIATION_STRENGTH)

            if self._logger:
                self._logger.conditioning(
                    "Higher-order association learned",
                    association_id=association.association_id,
                    stimulus=new_pattern,
                    response=response.name,
                    strength=association.association_strength,
                    extras={"source_stimulus_id": source_stimulus_id},
                )
            return association.model_copy()

    def add_conditioned_association(
        self,
        pattern: str,
        response_name: str,
        strength: float = DEFAULT_CONDITIONED_STRENGTH,
    ) -> ConditionedAssociation:
        """Link a new stimulus to a response by name, creating the response if needed.

        The stimulus keeps the Neutral type and the "conditioned" category.
        An unknown response is created as an emotional response whose tone
        is its name.

        Returns:
            A copy of the created association.
        """
        with self._lock:
            response = self._response_by_name(response_name)
            if response is None:
                response = Response.emotional(response_name, response_name, strength)
            stimulus = Stimulus.neutral(pattern, [pattern.lower()], CONDITIONED_CATEGORY)
            return self.create_association(stimulus, response, strength)

    def create_second_order_chain(
        self,
        primary_id: str,
        secondary_id: str,
    ) -> SecondOrderChain | None:
        """Chain two associations so the primary partially fires the secondary.

        Returns:
            The chain, or None if either association id is unknown.
        """
        with self._lock:
            primary = self._associations.get(primary_id)
            secondary = self._associations.get(secondary_id)
            if primary is None or secondary is None:
                return None

            chain = SecondOrderChain.create(primary, secondary)
            self._chains[chain.chain_id] = chain
            if self._logger:
                self._logger.chain(
                    "Second-order chain created",
                    association_id=primary_id,
                    strength=chain.chain_strength,
                    extras={"secondary_id": secondary_id},
                )
            return chain

    def _register(
        self,
        stimulus: Stimulus,
        response: Response,
        strength: float,
    ) -> ConditionedAssociation:
        self._stimuli[stimulus.stimulus_id] = stimulus
        self._responses[response.response_id] = response
        association = ConditionedAssociation(
            stimulus_id=stimulus.stimulus_id,
            response_id=response.response_id,
            association_strength=strength,
            learning_rate=self._profile.learning_rate,
            last_reinforcement=self._clock(),
            created_at=self._clock(),
        )
        self._associations[association.association_id] = association
        return association

    def _shared_response(self, response: Response) -> Response:
        """Reuse an already-registered response with the same name."""
        return self._response_by_name(response.name) or response

    # -------------------------------------------------------------------------
    # NON-ASSOCIATIVE LEARNING
    # -------------------------------------------------------------------------

    def apply_habituation(self, pattern: str, rate: float = DEFAULT_HABITUATION_RATE) -> None:
        """Weaken every association of the stimulus pattern by ``(1 - rate)``.

        Raises:
            ValueError: If rate is outside ``[0, 1]``.
        """
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"habituation rate must be within [0, 1], got {rate}")
        self._scale_pattern(pattern, 1.0 - rate, "Habituated")

    def apply_sensitization(self, pattern: str, rate: float = DEFAULT_SENSITIZATION_RATE) -> None:
        """Strengthen every association of the stimulus pattern by ``(1 + rate)``.

        Raises:
            ValueError: If rate is negative.
        """
        _require_non_negative("sensitization rate", rate)
        self._scale_pattern(pattern, 1.0 + rate, "Sensitized")

    def _scale_pattern(self, pattern: str, factor: float, verb: str) -> None:
        with self._lock:
            for association in self._associations_with_pattern(pattern):
                delta = association.scale(factor)
                if self._logger:
                    self._logger.habituation(
                        verb,
                        association_id=association.association_id,
                        stimulus=pattern,
                        strength=association.association_strength,
                        delta=delta,
                    )

    # -------------------------------------------------------------------------
    # DRIVES, MEMORY AND CONSOLIDATION
    # -------------------------------------------------------------------------

    def update_drives(self, elapsed: timedelta) -> None:
        """Decay every drive toward its baseline.

        Raises:
            ValueError: If elapsed is negative.
        """
        if elapsed < timedelta(0):
            raise ValueError(f"elapsed must be non-negative, got {elapsed}")
        with self._lock:
            for drive in self._drives.values():
                drive.update_with_decay(elapsed)

    def recall(self, text: str, limit: int = DEFAULT_RECALL_LIMIT) -> list[MemoryTrace]:
        """Retrieve memory traces sharing words with the text.

        Retrieved traces become eligible for consolidation.

        Returns:
            Copies of the retrieved traces, best match first.
        """
        with self._lock:
            recalled = self._trace_store.recall(text, limit, when=self._clock())
            if self._logger and recalled:
                self._logger.memory(
                    f"Recalled {len(recalled)} traces",
                    extras={"cue": text},
                )
            return [t.model_copy(deep=True) for t in recalled]

    def run_consolidation(self) -> ConsolidationResult:
        """Run a consolidation cycle (like sleep).

        Rehearses well-reinforced associations, stabilizes retrieved
        traces, lets long-extinct associations spontaneously recover and
        restores attentional capacity.
        """
        with self._lock:
            now = self._clock()
            result = ConsolidationResult(started_at=now)
            associations = list(self._associations.values())

            rehearse_associations(associations, result, self._logger)
            consolidate_traces(self._trace_store.get_all(), result)
            recover_extinct(associations, now, result, self._logger)
            self._attention.reset(now)

            result.complete(self._clock())
            logger.info(
                "Consolidation: %d strengthened, %d recovered, %d traces",
                result.associations_strengthened,
                result.associations_recovered,
                result.traces_consolidated,
            )
            if self._logger:
                self._logger.consolidation(
                    "Consolidation complete",
                    extras={
                        "strengthened": result.associations_strengthened,
                        "recovered": result.associations_recovered,
                        "traces": result.traces_consolidated,
                        "skipped_extinct": result.associations_skipped_extinct,
                    },
                )
            return result

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def get_current_state(self) -> ConsciousnessState:
        with self._lock:
            return self._state

    @property
    def current_state(self) -> ConsciousnessState:
        return self.get_current_state()

    def get_dominant_response(self) -> Response | None:
        """Response with the highest activation weight on the latest input.

        Returns:
            The response, or None if the engine has no associations or
            nothing fired.
        """
        with self._lock:
            if not self._associations or not self._last_activations:
                return None
            return max(self._last_activations, key=lambda a: a.weight).response

    def get_active_responses(self, threshold: float = DEFAULT_ACTIVE_THRESHOLD) -> dict[str, float]:
        """Strongest live association strength per response name.

        Only non-extinct associations at or above the threshold count, so
        the result never grows as the threshold rises.
        """
        with self._lock:
            active: dict[str, float] = {}
            for association in self._associations.values():
                if association.is_extinct or association.association_strength < threshold:
                    continue
                name = self._responses[association.response_id].name
                active[name] = max(active.get(name, 0.0), association.association_strength)
            return active

    def get_response_modulation(self) -> dict[str, Any]:
        """Named signals for the text-generation layer."""
        with self._lock:
            modulation: dict[str, Any] = {
                "arousal": self._state.arousal,
                "valence": self._state.valence,
                "dominant_emotion": self._state.dominant_emotion,
                "awareness": self._state.awareness,
            }
            for name, drive in self._drives.items():
                modulation[f"drive_{name}"] = drive.level

            dominant = self.get_dominant_response()
            if dominant is not None:
                modulation["suggested_tone"] = dominant.emotional_tone
                modulation["behavioral_tendencies"] = list(dominant.behavioral_tendencies)
                modulation["cognitive_patterns"] = list(dominant.cognitive_patterns)
            return modulation

    def get_consciousness_report(self) -> str:
        """Multi-section diagnostic report."""
        from pavlovian_agent.report import generate_consciousness_report

        with self._lock:
            return generate_consciousness_report(self)

    def get_conditioning_summary(self) -> str:
        """Top associations by strength, one per line."""
        from pavlovian_agent.report import generate_conditioning_summary

        with self._lock:
            return generate_conditioning_summary(self)

    # -------------------------------------------------------------------------
    # LOOKUPS AND SNAPSHOTS
    # -------------------------------------------------------------------------

    def get_stimulus(self, stimulus_id: str) -> Stimulus | None:
        with self._lock:
            return self._stimuli.get(stimulus_id)

    def get_response(self, response_id: str) -> Response | None:
        with self._lock:
            return self._responses.get(response_id)

    def find_stimulus(self, pattern: str) -> Stimulus | None:
        """First stimulus with exactly this pattern."""
        with self._lock:
            return next((s for s in self._stimuli.values() if s.pattern == pattern), None)

    def find_association(
        self,
        stimulus_pattern: str,
        response_name: str,
    ) -> ConditionedAssociation | None:
        """Copy of the association between a pattern and a response name."""
        with self._lock:
            association = self._find(stimulus_pattern, response_name)
            return association.model_copy() if association else None

    def associations_for_pattern(self, pattern: str) -> list[ConditionedAssociation]:
        with self._lock:
            return [a.model_copy() for a in self._associations_with_pattern(pattern)]

    @property
    def associations(self) -> list[ConditionedAssociation]:
        with self._lock:
            return [a.model_copy() for a in self._associations.values()]

    @property
    def stimuli(self) -> list[Stimulus]:
        with self._lock:
            return list(self._stimuli.values())

    @property
    def responses(self) -> list[Response]:
        with self._lock:
            return list(self._responses.values())

    @property
    def drives(self) -> dict[str, DriveState]:
        with self._lock:
            return {name: d.model_copy() for name, d in self._drives.items()}

    @property
    def memory_traces(self) -> list[MemoryTrace]:
        with self._lock:
            return [t.model_copy(deep=True) for t in self._trace_store.get_all()]

    @property
    def chains(self) -> list[SecondOrderChain]:
        with self._lock:
            return list(self._chains.values())

    @property
    def attention(self) -> AttentionalGate:
        with self._lock:
            return self._attention.model_copy()

    def _find(self, stimulus_pattern: str, response_name: str) -> ConditionedAssociation | None:
        for association in self._associations.values():
            if (
                self._stimuli[association.stimulus_id].pattern == stimulus_pattern
                and self._responses[association.response_id].name == response_name
            ):
                return association
        return None

    def _associations_with_pattern(self, pattern: str) -> list[ConditionedAssociation]:
        return [
            a for a in self._associations.values()
            if self._stimuli[a.stimulus_id].pattern == pattern
        ]

    def _response_by_name(self, name: str) -> Response | None:
        return next((r for r in self._responses.values() if r.name == name), None)
