from __future__ import annotations
import logging
from collections import Counter
from typing import List, Set, Sequence
from .config import SIMILARITY_EPSILON
from .datatypes import Sentence, FrequencyTable, SimilarityMatrix
from .preprocessing import raw_words, tokenize

logger = logging.getLogger(__name__)

def build_frequency(sentences: Sequence[Sentence]) -> FrequencyTable:
    # counts run across the whole input, not per sentence
    tf: Counter = Counter()
    for s in sentences:
        tf.update(tokenize(s.text))
    return dict(tf)

def frequency_sum(sentence: Sentence, table: FrequencyTable) -> float:
    """Sum of table counts over the sentence's words, repeats included."""
    return float(sum(table.get(w, 0) for w in raw_words(sentence.text)))

def normalize_by_length(value: float, sentence: Sentence) -> float:
    if sentence.word_count == 0:
        logger.debug("Sentence %d has no words, scoring it 0", sentence.idx)
        return 0.0
    return value / sentence.word_count

def score_sentence(sentence: Sentence, table: FrequencyTable) -> float:
    """Frequency score normalized by the raw whitespace word count."""
    return normalize_by_length(frequency_sum(sentence, table), sentence)

def token_set(sentence: Sentence) -> Set[str]:
    return set(tokenize(sentence.text))

def jaccard(a: Set[str], b: Set[str], eps: float = SIMILARITY_EPSILON) -> float:
    """|a & b| / (|a | b| + eps); two empty sets give 0."""
    return len(a & b) / (len(a | b) + eps)

def compute_similarity_matrix(sentences: Sequence[Sentence],
                              eps: float = SIMILARITY_EPSILON) -> SimilarityMatrix:
    """
    Word-overlap similarity between every pair of sentences.
    Symmetric with a zero diagonal; O(n^2) pairs.
    """
    n = len(sentences)
    sets = [token_set(s) for s in sentences]
    M: List[List[float]] = [[0.0]*n for _ in range(n)]
    for i in range(n):
        for j in range(i+1, n):
            sim = jaccard(sets[i], sets[j], eps)
            M[i][j] = M[j][i] = sim
    return M
