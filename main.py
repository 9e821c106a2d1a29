from __future__ import annotations
import streamlit as st
import logging
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import networkx as nx
import io

from kannada_summarizer.config import STRATEGIES, Variant, DEFAULT_VARIANT
from kannada_summarizer.errors import SummarizationError
from kannada_summarizer.preprocessing import segment, clean_text
from kannada_summarizer.features import build_frequency, compute_similarity_matrix
from kannada_summarizer.graphing import build_graph, to_networkx
from kannada_summarizer.scoring import score_components
from kannada_summarizer.summarize import summarize_with_model, selection_size, select_sentences
from kannada_summarizer.validation import validate_script
from kannada_summarizer.loaders import load_text, file_extension, SUPPORTED_EXTENSIONS

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("kannada_summarizer.app")

# graph strategies grow quadratically with the sentence count
MAX_GRAPH_SENTENCES = 500

def _preview(text: str, width: int = 80) -> str:
    return text[:width] + "..." if len(text) > width else text

def draw_graph_visualization(G: nx.Graph, selected):
    """Draw the overlap graph, selected sentences highlighted."""
    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Sentence Overlap Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
        colors = ['gold' if n in selected else 'lightblue' for n in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=800, alpha=0.8)

        edges = G.edges(data=True)
        if edges:
            weights = [d['weight'] for _, _, d in edges]
            max_weight = max(weights) if weights else 1
            nx.draw_networkx_edges(G, pos, ax=ax,
                                   width=[3 * (w / max_weight) for w in weights],
                                   alpha=0.6, edge_color='gray')

        labels = {i: f"S{i+1}" for i in G.nodes()}
        nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=10, font_weight='bold')

        if len(G.nodes) <= 10:
            edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Algorithm")
    variants = [v.value for v in Variant]
    variant = st.sidebar.selectbox(
        "Summarization model",
        variants,
        index=variants.index(DEFAULT_VARIANT.value),
        format_func=lambda v: f"{v} - {STRATEGIES[Variant(v)].description}",
    )
    threshold = st.sidebar.slider(
        "Graph display threshold",
        min_value=0.0,
        max_value=1.0,
        value=0.1,
        step=0.05,
        help="Only pairs with at least this overlap are drawn",
    )

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")
    return variant, threshold, debug_mode

def debug_pipeline(text: str, variant: str, display_threshold: float):
    """Show every step of the chosen strategy on this text."""
    cfg = STRATEGIES[Variant(variant)]

    st.header("Step 1: Segmentation")
    sentences = segment(text)
    st.success(f"Found {len(sentences)} sentences")
    st.dataframe(pd.DataFrame([
        {"Sentence #": s.idx + 1, "Words": s.word_count, "Text": _preview(s.text)}
        for s in sentences
    ]), use_container_width=True)

    if len(sentences) <= cfg.short_circuit:
        st.info(f"{len(sentences)} sentence(s) is at or below the {variant} threshold "
                f"of {cfg.short_circuit}: text is returned without ranking.")
        return

    table = None
    if cfg.uses_frequency:
        st.header("Step 2: Word Frequency")
        table = build_frequency(sentences)
        top = sorted(table.items(), key=lambda x: (-x[1], x[0]))[:30]
        st.metric("Unique Terms", len(table))
        st.dataframe(pd.DataFrame(top, columns=["Term", "Count"]), use_container_width=True)

    simM = None
    if cfg.uses_rank:
        st.header("Step 3: Similarity Matrix")
        if len(sentences) > MAX_GRAPH_SENTENCES:
            st.warning(f"{len(sentences)} sentences: graph ranking may be slow.")
        simM = compute_similarity_matrix(sentences)
        n = len(simM)
        if n <= 50:
            labels = [f"S{i+1}" for i in range(n)]
            st.dataframe(pd.DataFrame(simM, columns=labels, index=labels), use_container_width=True)
        else:
            flat = np.array([simM[i][j] for i in range(n) for j in range(i+1, n)])
            col1, col2, col3, col4 = st.columns(4)
            col1.metric("Min Similarity", f"{flat.min():.3f}")
            col2.metric("Max Similarity", f"{flat.max():.3f}")
            col3.metric("Mean Similarity", f"{flat.mean():.3f}")
            col4.metric("Std Similarity", f"{flat.std():.3f}")

    st.header("Step 4: Sentence Scoring")
    rows = score_components(sentences, cfg, simM=simM, table=table)
    scores = [r["score"] for r in rows]
    k = selection_size(len(sentences), cfg)
    selected = {s.idx for s in select_sentences(sentences, scores, k)}
    st.dataframe(pd.DataFrame([
        {
            "Sentence #": s.idx + 1,
            "Rank": f"{r['rank']:.4f}",
            "Frequency": f"{r['frequency']:.4f}",
            "Bonus": f"{r['bonus']:.2f}",
            "Score": f"{r['score']:.4f}",
            "Selected": "yes" if s.idx in selected else "no",
            "Text": _preview(s.text),
        }
        for s, r in zip(sentences, rows)
    ]), use_container_width=True)

    col1, col2 = st.columns(2)
    col1.metric("Target Sentences", k)
    col2.metric("Ratio", f"{k / len(sentences):.2%}")

    if simM is not None and len(sentences) <= 50:
        st.header("Step 5: Graph")
        graph = build_graph(sentences, simM, threshold=display_threshold)
        try:
            st.image(draw_graph_visualization(to_networkx(graph), selected),
                     caption="Edges above the display threshold; selected sentences in gold")
        except Exception as e:
            logger.exception("Graph rendering failed")
            st.error(f"Could not generate graph visualization: {e}")

def read_input():
    """Return text from an uploaded file, or from the text box."""
    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=list(SUPPORTED_EXTENSIONS),
        help="Upload a Kannada text file (.txt, .md, .rtf)",
    )
    if uploaded_file is not None:
        text = load_text(uploaded_file.name, uploaded_file.read())
        st.subheader(f"Original Text ({file_extension(uploaded_file.name).upper()} format)")
        st.text_area("Content", text, height=200, disabled=True)
        return text
    return st.text_area("Paste Kannada text (ಕನ್ನಡ)", height=200)

def main():
    st.title("Kannada Text Summarizer")
    st.write("Extract the most representative sentences from Kannada text")

    variant, threshold, debug_mode = create_sidebar_controls()
    text = read_input()

    if st.button("Generate Summary", type="primary"):
        if not text or not text.strip():
            st.error("Please provide some text to summarize")
            return

        validation = validate_script(text)
        if not validation.is_valid:
            st.error(validation.message)
            st.metric("Kannada Characters", f"{validation.percentage:.2f}%")
            return

        try:
            if debug_mode:
                st.markdown("---")
                st.title("Pipeline Debug Mode")
                debug_pipeline(text, variant, threshold)
            with st.spinner("Generating summary..."):
                result = summarize_with_model(text, variant)
        except SummarizationError as e:
            st.error(str(e))
            return

        st.markdown("---")
        st.header("Final Summary")
        st.text_area("Generated Summary", result, height=150, disabled=True)

        original_words = len(clean_text(text).split())
        summary_words = len(result.split())
        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Kannada Characters", f"{validation.percentage:.2f}%")
        col2.metric("Original Length", original_words)
        col3.metric("Summary Length", summary_words)
        col4.metric("Actual Compression", f"{summary_words / original_words:.2%}" if original_words else "-")

if __name__ == "__main__":
    main()
