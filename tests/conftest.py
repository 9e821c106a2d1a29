"""Shared sample texts."""

import pytest

from kannada_summarizer.preprocessing import segment


ENGLISH_TEXT = """
Natural language processing is a field of computer science. It studies how
computers process human language. Extractive summarization selects important
sentences from a document. The selected sentences keep their original order.
Graph methods rank sentences by their overlap with other sentences. Frequency
methods reward sentences that use common document words. In 2023 many tools
used both methods together. However, every method here is deterministic.
"""

KANNADA_TEXT = (
    "ಕನ್ನಡ ಕರ್ನಾಟಕ ರಾಜ್ಯದ ಅಧಿಕೃತ ಭಾಷೆ। "
    "ಕನ್ನಡ ಭಾಷೆಗೆ ಎರಡು ಸಾವಿರ ವರ್ಷಗಳ ಇತಿಹಾಸವಿದೆ। "
    "ಕನ್ನಡ ಸಾಹಿತ್ಯಕ್ಕೆ ಎಂಟು ಜ್ಞಾನಪೀಠ ಪ್ರಶಸ್ತಿಗಳು ಬಂದಿವೆ। "
    "ಬೆಂಗಳೂರು ಕರ್ನಾಟಕ ರಾಜ್ಯದ ರಾಜಧಾನಿ। "
    "ಮೈಸೂರು ದಸರಾ ಹಬ್ಬಕ್ಕೆ ಪ್ರಸಿದ್ಧವಾಗಿದೆ। "
    "ಆದರೆ ಕನ್ನಡ ಭಾಷೆಯ ಬಳಕೆ ನಗರಗಳಲ್ಲಿ ಕಡಿಮೆಯಾಗುತ್ತಿದೆ। "
    "ಹೀಗಾಗಿ ಕನ್ನಡ ಉಳಿಸುವುದು ಮುಖ್ಯ।"
)

TEN_SENTENCES = "S1. S2. S3. S4. S5. S6. S7. S8. S9. S10."


@pytest.fixture
def english_text():
    return ENGLISH_TEXT


@pytest.fixture
def kannada_text():
    return KANNADA_TEXT


@pytest.fixture
def ten_sentences():
    return TEN_SENTENCES


def selected_indices(summary, original):
    """Original sentence indices of every sentence in a summary."""
    texts = [s.text for s in segment(original)]
    return [texts.index(s.text) for s in segment(summary)]
