"""Selection of the three candidate answers shown for a word."""

import random
from typing import Iterable, List, Optional, Protocol

from .errors import InvalidInput
from .models import OptionSet


OPTION_COUNT = 3
MIN_FORM_LENGTH = 2
_DASHES = {"-", "–", "—"}


class Shuffler(Protocol):
    def shuffle(self, x: List[str]) -> None: ...


def is_usable_form(form: Optional[str]) -> bool:
    """Reject empty, whitespace-only, dash-only and single-character forms."""
    if not form or not form.strip():
        return False
    if form.strip() in _DASHES:
        return False
    return len(form) >= MIN_FORM_LENGTH


def normalize_forms(forms: Iterable[Optional[str]]) -> List[str]:
    """Filter unusable forms and drop exact duplicates, keeping first-seen order."""
    unique: List[str] = []
    for form in forms:
        if is_usable_form(form) and form not in unique:
            unique.append(form)
    return unique


def select_options(
    candidate_forms: Iterable[Optional[str]],
    correct_form: Optional[str],
    rng: Optional[Shuffler] = None,
) -> OptionSet:
    """
    Build the option set for one word.

    With three or more usable forms, picks two distractors at random and mixes
    them with the correct form. With fewer, returns what is available plus the
    correct form without padding; topping up to three is left to the caller.

    Args:
        candidate_forms: Known inflected forms of the word (may be empty)
        correct_form: The form the learner must pick
        rng: Source of randomness with a shuffle() method

    Returns:
        OptionSet whose options always contain correct_form

    Raises:
        InvalidInput: If there are no candidate forms and no correct form
    """
    candidates = list(candidate_forms or [])
    if not candidates and not correct_form:
        raise InvalidInput("At least one form or a correct form is required")
    correct_form = correct_form or ""

    rng = rng or random.Random()
    unique = normalize_forms(candidates)

    if len(unique) < OPTION_COUNT:
        options = list(unique)
        if correct_form not in options:
            options.append(correct_form)
        rng.shuffle(options)
        return OptionSet(correct=correct_form, options=options)

    pool = [f for f in unique if f != correct_form]
    rng.shuffle(pool)

    distractors: List[str] = []
    for form in pool:
        if len(distractors) < OPTION_COUNT - 1 and form != correct_form and form not in distractors:
            distractors.append(form)

    options = [correct_form]
    for form in distractors:
        if form not in options:
            options.append(form)

    # Top up from the pool if the distractors came up short
    for form in pool:
        if len(options) >= OPTION_COUNT:
            break
        if form not in options:
            options.append(form)

    rng.shuffle(options)
    return OptionSet(correct=correct_form, options=options[:OPTION_COUNT])
