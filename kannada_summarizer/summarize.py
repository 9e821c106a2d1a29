from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence, Union
from .config import StrategyConfig, Variant, STRATEGIES, DEFAULT_VARIANT
from .datatypes import Sentence, ScoreVector
from .errors import SummarizationError, UnrecognizedVariant
from .preprocessing import clean_text, segment
from .scoring import score_sentences

logger = logging.getLogger(__name__)

def selection_size(n: int, cfg: StrategyConfig) -> int:
    k = max(cfg.min_sentences, math.ceil(n * cfg.fraction))
    return min(k, n)

def select_sentences(sentences: Sequence[Sentence], scores: ScoreVector, k: int) -> List[Sentence]:
    # sorted() is stable, so equal scores keep index order
    ranked = sorted(sentences, key=lambda s: scores[s.idx], reverse=True)[:k]
    return sorted(ranked, key=lambda s: s.idx)  # restore original order

def generate_summary(sentences: Sequence[Sentence], scores: ScoreVector, cfg: StrategyConfig) -> str:
    k = selection_size(len(sentences), cfg)
    return " ".join(s.text for s in select_sentences(sentences, scores, k))

def summarize(text: str, cfg: StrategyConfig) -> str:
    """Run one strategy end to end: segment, score, select, join."""
    sentences = segment(text)
    if len(sentences) <= cfg.short_circuit:
        return text if cfg.returns_original_on_short_circuit else clean_text(text)
    scores = score_sentences(sentences, cfg)
    return generate_summary(sentences, scores, cfg)

def summarize_simple(text: str) -> str:
    return summarize(text, STRATEGIES[Variant.SIMPLE])

def summarize_advanced(text: str) -> str:
    return summarize(text, STRATEGIES[Variant.ADVANCED])

def summarize_textrank(text: str) -> str:
    return summarize(text, STRATEGIES[Variant.TEXTRANK])

def summarize_hybrid(text: str) -> str:
    return summarize(text, STRATEGIES[Variant.HYBRID])

def resolve_variant(variant: Union[str, Variant, None], strict: bool = False) -> Variant:
    """
    Map a variant id onto the closed set of strategies.

    Unknown or missing ids fall back to DEFAULT_VARIANT with a warning,
    or raise UnrecognizedVariant when strict is set. Matching is case-sensitive.
    """
    try:
        return Variant(variant)
    except ValueError:
        if strict:
            raise UnrecognizedVariant(variant) from None
        logger.warning("Unknown summarization variant %r, falling back to %s",
                       variant, DEFAULT_VARIANT.value)
        return DEFAULT_VARIANT

def dispatch(text: str, variant: Union[str, Variant, None] = None, strict: bool = False) -> str:
    v = resolve_variant(variant, strict=strict)
    cfg = STRATEGIES[v]
    logger.info("Using summarization algorithm: %s", v.value)
    logger.debug("%s: %s", v.value, cfg.description)
    return summarize(text, cfg)

def summarize_with_model(text: str, model: Optional[str] = None, strict: bool = False) -> str:
    """Dispatch and report any unexpected failure as a SummarizationError."""
    try:
        return dispatch(text, model, strict=strict)
    except SummarizationError:
        raise
    except Exception as e:
        logger.exception("Summarization error")
        raise SummarizationError(f"Summarization failed: {e}") from e
