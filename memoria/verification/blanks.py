"""
Blank selection: which words of a verse get hidden.

Longer verses get more blanks, clamped to a tractable range. Short words
(articles, conjunctions) are not eligible because recalling them says
little about whether the verse was memorized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from loguru import logger

from memoria.content.randomness import RandomSource, default_random, pick_index
from memoria.content.verse import Difficulty, Verse
from memoria.exceptions import InvalidVerse

from .base import round_half_up
from .normalizer import normalize, normalize_loose, strip_loose_punctuation

DEFAULT_RATIO = 0.4
ADVANCED_RATIO = 0.6
MIN_BLANKS = 3
MAX_BLANKS = 5
SHORT_VERSE_TOKENS = 3
MIN_ELIGIBLE_LENGTH = 4  # loose-normalized length must exceed 3


@dataclass(frozen=True)
class Blank:
    """A hidden word position."""

    index: int
    word: str  # token as it appears in the verse
    expected: str  # what fill-blanks accepts (accents kept)
    canonical: str  # accent-folded form

    @classmethod
    def from_token(cls, index: int, token: str) -> "Blank":
        return cls(
            index=index,
            word=token,
            expected=strip_loose_punctuation(token),
            canonical=normalize(token),
        )


@dataclass(frozen=True)
class BlankSpec:
    """The blanks chosen for one practice attempt, ordered by index."""

    tokens: tuple[str, ...]
    blanks: tuple[Blank, ...]

    @classmethod
    def for_indices(cls, tokens: Sequence[str], indices: Sequence[int]) -> "BlankSpec":
        """Build a spec from explicit indices (sorted and deduplicated)."""
        ordered = sorted(set(indices))
        for index in ordered:
            if not 0 <= index < len(tokens):
                raise IndexError(f"Blank index {index} outside verse of {len(tokens)} words")
        return cls(
            tokens=tuple(tokens),
            blanks=tuple(Blank.from_token(i, tokens[i]) for i in ordered),
        )

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(b.index for b in self.blanks)

    @property
    def expected_words(self) -> list[str]:
        return [b.expected for b in self.blanks]

    def masked_text(self, placeholder: str = "_____") -> str:
        """The verse with every blank replaced by ``placeholder``."""
        hidden = set(self.indices)
        return " ".join(
            placeholder if i in hidden else token for i, token in enumerate(self.tokens)
        )

    def __len__(self) -> int:
        return len(self.blanks)


def target_blank_count(
    token_count: int,
    difficulty: Difficulty,
    *,
    ratio: float = DEFAULT_RATIO,
    advanced_ratio: float = ADVANCED_RATIO,
    min_blanks: int = MIN_BLANKS,
    max_blanks: int = MAX_BLANKS,
) -> int:
    """How many blanks a verse of ``token_count`` words should get."""
    share = advanced_ratio if Difficulty.parse(difficulty) is Difficulty.ADVANCED else ratio
    return max(min_blanks, min(max_blanks, round_half_up(token_count * share)))


def is_eligible(token: str) -> bool:
    """Whether a token is long enough to be worth hiding."""
    return len(normalize_loose(token)) >= MIN_ELIGIBLE_LENGTH


def select_blanks(
    tokens: Sequence[str],
    difficulty: Difficulty | str = Difficulty.BEGINNER,
    rng: RandomSource | None = None,
    *,
    ratio: float = DEFAULT_RATIO,
    advanced_ratio: float = ADVANCED_RATIO,
    min_blanks: int = MIN_BLANKS,
    max_blanks: int = MAX_BLANKS,
) -> BlankSpec:
    """
    Choose which tokens to hide.

    Verses of three words or fewer get a single blank at index 0. Longer
    verses get up to the target count of eligible words, drawn uniformly
    without replacement; fewer when eligible words run out. A verse with no
    eligible word at all gets one blank drawn from every position.

    Raises:
        InvalidVerse: If there are no tokens
    """
    tokens = list(tokens)
    if not any(t.strip() for t in tokens):
        raise InvalidVerse("Cannot select blanks in an empty verse")

    if len(tokens) <= SHORT_VERSE_TOKENS:
        logger.debug(f"Short verse ({len(tokens)} words): blanking first word")
        return BlankSpec.for_indices(tokens, [0])

    target = target_blank_count(
        len(tokens),
        Difficulty.parse(difficulty),
        ratio=ratio,
        advanced_ratio=advanced_ratio,
        min_blanks=min_blanks,
        max_blanks=max_blanks,
    )
    rng = rng or default_random()

    remaining = [i for i, token in enumerate(tokens) if is_eligible(token)]
    if not remaining:
        index = pick_index(rng, len(tokens))
        logger.debug(f"No eligible words; falling back to position {index}")
        return BlankSpec.for_indices(tokens, [index])

    chosen: list[int] = []
    while remaining and len(chosen) < target:
        chosen.append(remaining.pop(pick_index(rng, len(remaining))))

    logger.debug(f"Selected {len(chosen)}/{target} blanks at {sorted(chosen)}")
    return BlankSpec.for_indices(tokens, chosen)


def blank_verse(verse: Verse, rng: RandomSource | None = None, **overrides) -> BlankSpec:
    """Select blanks for a verse using its own difficulty."""
    if verse.is_blank:
        raise InvalidVerse(f"Verse {verse.reference!r} has no text")
    return select_blanks(verse.tokens, verse.difficulty, rng, **overrides)
