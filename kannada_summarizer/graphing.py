from __future__ import annotations
from typing import List, Sequence
import networkx as nx
from .datatypes import Graph, Edge, Sentence, SimilarityMatrix

def build_graph(sentences: Sequence[Sentence], simM: SimilarityMatrix, threshold: float = 0.1) -> Graph:
    """Keep only the sentence pairs whose overlap reaches the threshold."""
    nodes = list(sentences)
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i+1, n):
            w = simM[i][j]
            if w > 0 and w >= threshold:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)

def build_adjacency(graph: Graph) -> List[List[int]]:
    n = len(graph.nodes)
    A = [[0]*n for _ in range(n)]
    for e in graph.edges:
        A[e.i][e.j] = 1
        A[e.j][e.i] = 1
    return A

def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    for s in graph.nodes:
        preview = s.text[:30] + "..." if len(s.text) > 30 else s.text
        G.add_node(s.idx, label=f"S{s.idx+1}", preview=preview)
    for e in graph.edges:
        G.add_edge(e.i, e.j, weight=e.weight)
    return G
