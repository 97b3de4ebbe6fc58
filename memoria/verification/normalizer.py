"""
Text folding shared by every verifier.

Two normalizers exist on purpose. ``normalize`` folds accents and drops
punctuation for order-based recall; ``normalize_loose`` keeps accents so
fill-blanks answers must match accented words exactly.

``normalize`` turns tabs and newlines into spaces before it strips
characters outside ``[a-z0-9 ]``, so words on separate lines stay separate
instead of merging.
"""

import re

# Only Latin vowels and ñ are folded; other scripts are not supported.
_ACCENT_FOLD = str.maketrans("áéíóúüñ", "aeiouun")

_WHITESPACE = re.compile(r"\s+")
_OUTSIDE_ALPHABET = re.compile(r"[^a-z0-9 ]")
_LOOSE_PUNCTUATION = re.compile(r"[,;.]")


def normalize(text: str) -> str:
    """
    Canonical form for comparison: lowercase, accent-folded, [a-z0-9 ] only,
    single-spaced and trimmed. Idempotent.
    """
    folded = text.lower().translate(_ACCENT_FOLD)
    # Tabs and newlines separate words like spaces do
    folded = _WHITESPACE.sub(" ", folded)
    folded = _OUTSIDE_ALPHABET.sub("", folded)
    return _WHITESPACE.sub(" ", folded).strip()


def normalize_loose(text: str) -> str:
    """Lowercase, turn ``,;.`` into spaces, collapse whitespace, trim. Keeps accents."""
    loose = _LOOSE_PUNCTUATION.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", loose).strip()


def strip_loose_punctuation(word: str) -> str:
    """Lowercase a single word and drop ``,;.`` from it."""
    return _LOOSE_PUNCTUATION.sub("", word.lower()).strip()


def tokenize(text: str) -> list[str]:
    """Whitespace tokenization used for verses and answers alike."""
    return text.split()
