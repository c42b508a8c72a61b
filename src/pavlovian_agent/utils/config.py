"""Configuration constants for the Pavlovian conditioning engine."""

# Log format version for JSONL records
LOG_VERSION: str = "v1"

# =============================================================================
# Learning (Rescorla-Wagner)
# =============================================================================

# Default β for new associations
DEFAULT_LEARNING_RATE: float = 0.2

# Default λ ceiling for association strength
DEFAULT_MAX_STRENGTH: float = 1.0

# Strength assigned when nothing else is specified
DEFAULT_INITIAL_STRENGTH: float = 0.3

# Fixed strength for one-shot higher-order learning via a known predictor
LEARNED_ASSOCIATION_STRENGTH: float = 0.3

# =============================================================================
# Extinction and Recovery
# =============================================================================

# Below this strength an extinguished association counts as extinct
EXTINCTION_THRESHOLD: float = 0.1

# Recovered strength never exceeds this fraction of max strength
SPONTANEOUS_RECOVERY_CAP: float = 0.6

# Maximum recovery factor and log-time scale of the recovery curve
SPONTANEOUS_RECOVERY_MAX_FACTOR: float = 0.5
SPONTANEOUS_RECOVERY_SCALE: float = 0.1

# Hours since last reinforcement before recovery is considered
SPONTANEOUS_RECOVERY_MIN_HOURS: float = 24.0

# =============================================================================
# Activation
# =============================================================================

# Associations must exceed this strength to fire
ACTIVATION_FLOOR: float = 0.1

# Arousal offset added to the mean activation weight
AROUSAL_OFFSET: float = 0.3

# Multiplicative decay when nothing matched
AROUSAL_DECAY: float = 0.9
VALENCE_DECAY: float = 0.95

# Awareness = base + per-focus step + arousal weight
AWARENESS_BASE: float = 0.5
AWARENESS_FOCUS_STEP: float = 0.1
AWARENESS_AROUSAL_WEIGHT: float = 0.2

# Maximum patterns kept in the attentional spotlight
SPOTLIGHT_SIZE: int = 3

# Drive modulation: per-drive gain and overall cap
DRIVE_MODULATION_GAIN: float = 0.5
DRIVE_MODULATION_CAP: float = 2.0

# Drive satiation applied on reinforcement
DRIVE_SATIATION: float = 0.1

# =============================================================================
# Auto-conditioning (co-occurrence)
# =============================================================================

# Activation weight above which co-occurring words get conditioned
AUTO_CONDITIONING_TRIGGER: float = 0.6

# Strength of auto-created associations
AUTO_CONDITIONING_STRENGTH: float = 0.1

# Minimum word length considered for auto-conditioning
AUTO_CONDITIONING_MIN_WORD: int = 4

# Category given to auto-conditioned stimuli
LEARNED_CATEGORY: str = "learned"

# =============================================================================
# Attention
# =============================================================================

DEFAULT_ATTENTION_THRESHOLD: float = 0.3
DEFAULT_FATIGUE_FACTOR: float = 0.001   # Capacity lost per minute
MIN_ATTENTION_CAPACITY: float = 0.1
PRIMED_CATEGORY_BOOST: float = 1.5
CAPACITY_THRESHOLD_RELIEF: float = 0.3  # How much full capacity lowers the threshold

# =============================================================================
# Consolidation
# =============================================================================

# Reinforcement count an association must exceed to be consolidated
CONSOLIDATION_MIN_REINFORCEMENTS: int = 3

# Multiplicative rehearsal boost for consolidated associations
CONSOLIDATION_BOOST: float = 1.1

# Ceiling raise applied alongside the rehearsal boost
CONSOLIDATION_CEILING_BOOST: float = 1.05

# =============================================================================
# Memory Traces
# =============================================================================

DEFAULT_ENCODING_STRENGTH: float = 0.6
DEFAULT_CONSOLIDATION_LEVEL: float = 0.1
TRACE_CONSOLIDATION_STEP: float = 0.2
TRACE_CONSOLIDATED_THRESHOLD: float = 0.7
RETRIEVAL_BOOST: float = 0.1
RETRIEVAL_DIMINISH: float = 0.1

# Oldest traces are evicted past this many in the default store
DEFAULT_MAX_TRACES: int = 10000

# Encoding strength components
ENCODING_BASE: float = 0.3
ENCODING_EMOTION_WEIGHT: float = 0.3
ENCODING_AROUSAL_WEIGHT: float = 0.2
ENCODING_NOVELTY_BONUS: float = 0.2

# Default number of traces returned by recall
DEFAULT_RECALL_LIMIT: int = 5

# =============================================================================
# Habituation / Sensitization
# =============================================================================

DEFAULT_HABITUATION_RATE: float = 0.2
DEFAULT_SENSITIZATION_RATE: float = 0.2

# =============================================================================
# Queries
# =============================================================================

DEFAULT_ACTIVE_THRESHOLD: float = 0.3

# =============================================================================
# Affect
# =============================================================================

# Valence of emotional tone parts (tones are hyphen-separated, e.g. "warm-happy")
TONE_VALENCE: dict[str, float] = {
    "happy": 0.8,
    "pleased": 0.6,
    "satisfied": 0.5,
    "warm": 0.6,
    "curious": 0.4,
    "interested": 0.4,
    "engaged": 0.3,
    "alert": 0.2,
    "neutral": 0.0,
    "calm": 0.1,
    "relaxed": 0.2,
    "supportive": 0.5,
    "caring": 0.6,
    "empathy": 0.4,
    "accomplished": 0.7,
    "proud": 0.7,
    "focused": 0.2,
    "determined": 0.3,
    "anxious": -0.4,
    "frustrated": -0.5,
    "sad": -0.6,
}

# Focus reported when nothing passed the attentional gate
DEFAULT_FOCUS: str = "general"

# Category whose firing counts as a novelty response for encoding
NOVELTY_CATEGORY: str = "novel"
