from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

# Kannada Unicode block, used by the token cleaner and the script gate
SCRIPT_BLOCK = "ಀ-೿"
# sentence-final marks: danda plus ASCII terminals
TERMINAL_MARKS = "।.!?"
SCRIPT_THRESHOLD = 70.0
MIN_TOKEN_LENGTH = 3
SIMILARITY_EPSILON = 1e-4

DOMAIN_KEYWORDS: Tuple[str, ...] = (
    "ಮುಖ್ಯ", "ಪ್ರಮುಖ", "ಮುಖ್ಯವಾಗಿ", "ಆದರೆ", "ಹೀಗಾಗಿ",
    "important", "main", "significant", "however", "therefore",
)


class Variant(str, Enum):
    SIMPLE = "simple"
    ADVANCED = "advanced"
    TEXTRANK = "textrank"
    HYBRID = "hybrid"


DEFAULT_VARIANT = Variant.ADVANCED


@dataclass(frozen=True)
class StrategyConfig:
    """
    Selection policy of one summarization strategy.

    Score formula pieces that a strategy does not use are left at zero:
      - rank_weight > 0 turns on the graph ranking (damping, iterations)
      - frequency_weight scales the length-normalized frequency score
      - position bonuses are either additive (first, last and lead all apply)
        or exclusive (only the first matching one applies)
    length_bonuses is a list of (min_words, max_words, bonus) bands, first match wins.
    """
    variant: Variant
    description: str
    short_circuit: int
    returns_original_on_short_circuit: bool
    fraction: float
    min_sentences: int
    damping: float = 0.85
    iterations: int = 0
    rank_weight: float = 0.0
    frequency_weight: float = 1.0
    first_bonus: float = 0.0
    last_bonus: float = 0.0
    lead_bonus: float = 0.0
    lead_count: int = 3
    additive_position_bonus: bool = True
    position_bonus_normalized: bool = True
    length_bonuses: Tuple[Tuple[int, int, float], ...] = ()
    keywords: Tuple[str, ...] = ()
    keyword_bonus: float = 0.0
    numeric_bonus: float = 0.0

    @property
    def uses_frequency(self) -> bool:
        return self.frequency_weight > 0

    @property
    def uses_rank(self) -> bool:
        return self.rank_weight > 0 and self.iterations > 0


SIMPLE = StrategyConfig(
    variant=Variant.SIMPLE,
    description="Concise frequency-based summary (25% of original)",
    short_circuit=2,
    returns_original_on_short_circuit=False,
    fraction=0.25,
    min_sentences=2,
    first_bonus=3.0,
)

ADVANCED = StrategyConfig(
    variant=Variant.ADVANCED,
    description="Balanced summary with position & keywords (35% of original)",
    short_circuit=3,
    returns_original_on_short_circuit=False,
    fraction=0.35,
    min_sentences=3,
    first_bonus=8.0,
    last_bonus=5.0,
    lead_bonus=3.0,
    length_bonuses=((8, 30, 5.0), (5, 40, 2.0)),
    keywords=DOMAIN_KEYWORDS,
    keyword_bonus=4.0,
    numeric_bonus=2.0,
)

TEXTRANK = StrategyConfig(
    variant=Variant.TEXTRANK,
    description="Comprehensive graph-based summary (45% of original)",
    short_circuit=3,
    returns_original_on_short_circuit=True,
    fraction=0.45,
    min_sentences=3,
    iterations=50,
    rank_weight=1.0,
    frequency_weight=0.0,
)

HYBRID = StrategyConfig(
    variant=Variant.HYBRID,
    description="Combined TextRank + Frequency (40% of original)",
    short_circuit=3,
    returns_original_on_short_circuit=True,
    fraction=0.40,
    min_sentences=3,
    iterations=30,
    rank_weight=0.6,
    frequency_weight=0.4,
    first_bonus=0.3,
    last_bonus=0.15,
    lead_bonus=0.1,
    additive_position_bonus=False,
    position_bonus_normalized=False,
)

STRATEGIES: Dict[Variant, StrategyConfig] = {
    Variant.SIMPLE: SIMPLE,
    Variant.ADVANCED: ADVANCED,
    Variant.TEXTRANK: TEXTRANK,
    Variant.HYBRID: HYBRID,
}
