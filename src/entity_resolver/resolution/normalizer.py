"""
Text normalization shared by the alias index and query handling.
"""
import re

_PUNCTUATION = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """
    Lowercase, replace punctuation with spaces, collapse whitespace.

    "St. Louis  Blues!" -> "st louis blues"
    """
    if not text:
        return ""
    lowered = _PUNCTUATION.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()
