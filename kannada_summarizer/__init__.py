from .datatypes import Sentence, Edge, Graph, FrequencyTable, SimilarityMatrix, ScoreVector
from .errors import SummarizationError, EmptySegmentation, UnrecognizedVariant
from .config import Variant, StrategyConfig, STRATEGIES, DEFAULT_VARIANT
from .preprocessing import clean_text, split_sentences, segment, tokenize
from .features import build_frequency, score_sentence, compute_similarity_matrix
from .graphing import build_graph, build_adjacency, to_networkx
from .scoring import rank, score_sentences, score_components
from .summarize import (summarize, summarize_simple, summarize_advanced, summarize_textrank,
                        summarize_hybrid, dispatch, summarize_with_model, select_sentences,
                        selection_size, generate_summary)
from .validation import ScriptValidation, validate_script
from .loaders import load_text
