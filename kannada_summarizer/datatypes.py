from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str
    word_count: int

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # jaccard overlap

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge] = field(default_factory=list)  # undirected weighted edges

FrequencyTable = Dict[str, int]        # token -> count over the whole input
SimilarityMatrix = List[List[float]]   # n x n, symmetric, zero diagonal
ScoreVector = List[float]              # one score per sentence, index order
