from __future__ import annotations
import re
from typing import Dict, List, Optional, Sequence
from .config import StrategyConfig
from .datatypes import Sentence, FrequencyTable, SimilarityMatrix, ScoreVector
from .features import build_frequency, compute_similarity_matrix, frequency_sum, normalize_by_length

_DIGIT_RE = re.compile(r"[0-9]")

def rank(simM: SimilarityMatrix, damping: float = 0.85, iterations: int = 50) -> ScoreVector:
    """
    Graph ranking by power iteration over a similarity matrix.

    PR(Si) = (1-d) + d × Σ_{j≠i} (M[j][i] / rowSum(j)) × PR(Sj)

    Args:
        simM: Square similarity matrix
        damping: Damping factor
        iterations: Exact number of sweeps to run; there is no convergence check

    Returns:
        One score per sentence, starting from 1.0 everywhere
    """
    n = len(simM)
    if n == 0:
        return []

    scores = [1.0] * n
    row_sums = [sum(row) for row in simM]

    for _ in range(iterations):
        new_scores = [0.0] * n
        for i in range(n):
            total = 0.0
            for j in range(n):
                # rows summing to zero contribute nothing
                if j == i or row_sums[j] <= 0:
                    continue
                total += (simM[j][i] / row_sums[j]) * scores[j]
            new_scores[i] = (1.0 - damping) + damping * total
        scores = new_scores

    return scores

def position_bonus(idx: int, n: int, cfg: StrategyConfig) -> float:
    if cfg.additive_position_bonus:
        bonus = 0.0
        if idx == 0:
            bonus += cfg.first_bonus
        if idx == n - 1:
            bonus += cfg.last_bonus
        if idx < cfg.lead_count:
            bonus += cfg.lead_bonus
        return bonus
    if idx == 0:
        return cfg.first_bonus
    if idx == n - 1:
        return cfg.last_bonus
    if idx < cfg.lead_count:
        return cfg.lead_bonus
    return 0.0

def length_bonus(word_count: int, cfg: StrategyConfig) -> float:
    for low, high, bonus in cfg.length_bonuses:
        if low <= word_count <= high:
            return bonus
    return 0.0

def keyword_bonus(text: str, cfg: StrategyConfig) -> float:
    lowered = text.lower()
    return cfg.keyword_bonus * sum(1 for k in cfg.keywords if k in lowered)

def numeric_bonus(text: str, cfg: StrategyConfig) -> float:
    return cfg.numeric_bonus if _DIGIT_RE.search(text) else 0.0

def score_components(sentences: Sequence[Sentence],
                     cfg: StrategyConfig,
                     simM: Optional[SimilarityMatrix] = None,
                     table: Optional[FrequencyTable] = None) -> List[Dict[str, float]]:
    """
    Per-sentence breakdown of a strategy's score.

    Each row holds "rank", "frequency" (length-normalized, bonuses that the
    strategy normalizes included), "bonus" (bonuses added after weighting)
    and the final "score".
    """
    n = len(sentences)
    ranks = [0.0] * n
    if cfg.uses_rank:
        if simM is None:
            simM = compute_similarity_matrix(sentences)
        ranks = rank(simM, damping=cfg.damping, iterations=cfg.iterations)
    if cfg.uses_frequency and table is None:
        table = build_frequency(sentences)

    rows: List[Dict[str, float]] = []
    for s in sentences:
        pos = position_bonus(s.idx, n, cfg)
        freq = 0.0
        if cfg.uses_frequency:
            raw = frequency_sum(s, table)
            raw += length_bonus(s.word_count, cfg)
            raw += keyword_bonus(s.text, cfg)
            raw += numeric_bonus(s.text, cfg)
            if cfg.position_bonus_normalized:
                raw += pos
            freq = normalize_by_length(raw, s)
        bonus = 0.0 if cfg.position_bonus_normalized else pos
        score = cfg.rank_weight * ranks[s.idx] + cfg.frequency_weight * freq + bonus
        rows.append({"rank": ranks[s.idx], "frequency": freq, "bonus": bonus, "score": score})
    return rows

def score_sentences(sentences: Sequence[Sentence],
                    cfg: StrategyConfig,
                    simM: Optional[SimilarityMatrix] = None,
                    table: Optional[FrequencyTable] = None) -> ScoreVector:
    return [r["score"] for r in score_components(sentences, cfg, simM=simM, table=table)]
