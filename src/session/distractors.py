"""Synthetic wrong answers for words with too few known forms."""

import random
from typing import List, Optional

from ..puzzle.options import OPTION_COUNT


SUFFIXES = ['a', 'e', 'i', 'u', 'd', 't', 'n', 's']

# Final vowel -> vowels it is swapped for
VOWEL_SWAPS = {
    'a': ['e', 'i'],
    'e': ['a', 'i'],
    'i': ['a', 'e'],
}


def create_dummy_options(word: str, rng: Optional[random.Random] = None) -> List[str]:
    """
    Make three plausible-looking but wrong variants of a word.

    Swaps a final a/e/i for the other two vowels, or appends a, e and i
    otherwise; then adds random suffixes until three variants exist.

    Args:
        word: The word to imitate
        rng: Random source

    Returns:
        Three distinct lowercase strings, none equal to the word
    """
    rng = rng or random.Random()
    word = word.lower()

    if word and word[-1] in VOWEL_SWAPS:
        variations = [word[:-1] + vowel for vowel in VOWEL_SWAPS[word[-1]]]
    else:
        variations = [word + 'a', word + 'e', word + 'i']
    rng.shuffle(variations)

    options: List[str] = []
    for variation in variations:
        if len(options) < OPTION_COUNT and variation not in options and variation != word:
            options.append(variation)

    while len(options) < OPTION_COUNT:
        candidate = word + rng.choice(SUFFIXES)
        if candidate not in options:
            options.append(candidate)

    return options


def pad_options(
    options: List[str],
    word: str,
    rng: Optional[random.Random] = None,
    target: int = OPTION_COUNT,
) -> List[str]:
    """Top up an option list with synthetic distractors until it holds `target` entries."""
    padded = list(dict.fromkeys(options))
    if len(padded) >= target:
        return padded[:target]

    rng = rng or random.Random()
    while len(padded) < target:
        for dummy in create_dummy_options(word, rng):
            if len(padded) < target and dummy not in padded:
                padded.append(dummy)
        # The dummies of a word can collide with real forms; vary the stem
        word = word + rng.choice(SUFFIXES)

    rng.shuffle(padded)
    return padded
