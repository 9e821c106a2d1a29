from __future__ import annotations
import re
import unicodedata
from dataclasses import dataclass
from .config import SCRIPT_BLOCK, SCRIPT_THRESHOLD

_SCRIPT_RE = re.compile(f"[{SCRIPT_BLOCK}]")
_SPACE_DIGIT_RE = re.compile(r"[\s0-9]")

@dataclass(frozen=True)
class ScriptValidation:
    is_valid: bool
    percentage: float
    message: str

def _strip_non_letters(text: str) -> str:
    # drop whitespace, ASCII digits and Unicode punctuation (categories P*)
    text = _SPACE_DIGIT_RE.sub("", text)
    return "".join(ch for ch in text if not unicodedata.category(ch).startswith("P"))

def validate_script(text: str, threshold: float = SCRIPT_THRESHOLD) -> ScriptValidation:
    """
    Check that Kannada code points make up at least `threshold` percent of
    the text once spaces, digits and punctuation are removed.
    """
    matches = len(_SCRIPT_RE.findall(text or ""))
    remaining = _strip_non_letters(text or "")
    if matches == 0 or not remaining:
        return ScriptValidation(
            is_valid=False,
            percentage=0.0,
            message="No Kannada text detected. Please provide text in Kannada script (ಕನ್ನಡ).",
        )

    ratio = matches / len(remaining) * 100
    percentage = round(ratio, 2)
    if ratio < threshold:
        return ScriptValidation(
            is_valid=False,
            percentage=percentage,
            message=(f"Text contains only {percentage:.2f}% Kannada characters. "
                     f"Please provide text primarily in Kannada script (minimum {threshold:g}% required)."),
        )
    return ScriptValidation(is_valid=True, percentage=percentage, message="Valid Kannada text detected.")
