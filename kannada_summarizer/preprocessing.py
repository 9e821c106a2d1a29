from __future__ import annotations
import re
from typing import List
from .config import SCRIPT_BLOCK, TERMINAL_MARKS, MIN_TOKEN_LENGTH
from .datatypes import Sentence
from .errors import EmptySegmentation

_WS_RE = re.compile(r"\s+")
# a run of non-terminal characters closed by one or more terminal marks
_SENTENCE_RE = re.compile(rf"[^{re.escape(TERMINAL_MARKS)}]+[{re.escape(TERMINAL_MARKS)}]+")
# \w is ASCII-only here; the script block is kept explicitly
_STRIP_RE = re.compile(rf"[^\w{SCRIPT_BLOCK}]", re.ASCII)

def clean_text(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return _WS_RE.sub(" ", text or "").strip()

def split_sentences(text: str) -> List[str]:
    """
    Split already-cleaned text into terminal-punctuated runs.

    A trailing fragment without a terminal mark is not a sentence. When the
    text holds no terminal mark at all the whole text is the only sentence.
    """
    parts = [p.strip() for p in _SENTENCE_RE.findall(text)]
    parts = [p for p in parts if p]
    return parts or ([text] if text else [])

def word_count(text: str) -> int:
    # raw whitespace split, before any token cleaning
    return len(text.split())

def segment(text: str) -> List[Sentence]:
    cleaned = clean_text(text)
    if not cleaned:
        raise EmptySegmentation()
    return [Sentence(idx=i, text=s, word_count=word_count(s))
            for i, s in enumerate(split_sentences(cleaned))]

def clean_token(word: str) -> str:
    return _STRIP_RE.sub("", word.lower())

def raw_words(text: str) -> List[str]:
    """Lowercased whitespace words with the cleaning rule applied, no length filter."""
    return [clean_token(w) for w in text.lower().split()]

def tokenize(text: str) -> List[str]:
    """Cleaned tokens long enough to carry weight in frequency and overlap."""
    return [t for t in raw_words(text) if len(t) >= MIN_TOKEN_LENGTH]
