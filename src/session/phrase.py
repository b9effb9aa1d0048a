"""Turning a phrase into the per-word entries a puzzle session plays through."""

import logging
import re
from typing import Dict, List, Optional

from ..puzzle.options import normalize_forms
from .forms import FormsProvider, lookup_forms
from .models import WordEntry
from .translator import Translator


logger = logging.getLogger(__name__)


def extract_words(text: str) -> List[str]:
    """Split a phrase into words, dropping quotes and punctuation."""
    text = re.sub(r'["“”„]', '', text)
    text = re.sub(r'[.,!?;:]', '', text)
    return [word for word in text.split() if word]


def build_entries(
    words: List[str],
    forms_provider: FormsProvider,
    root_words: Optional[Dict[str, str]] = None,
) -> List[WordEntry]:
    """
    Look up the known forms of each word.

    Words are looked up by their root word when one is known. Forms are
    lowercased before filtering; the correct form is the word itself in
    lowercase.

    Args:
        words: Words of the phrase, in order
        forms_provider: Where inflected forms come from
        root_words: Optional mapping from inflected word to its base form

    Returns:
        One WordEntry per word
    """
    root_words = root_words or {}
    entries: List[WordEntry] = []

    for word in words:
        lookup_word = root_words.get(word, word)
        forms = normalize_forms(form.lower() for form in lookup_forms(forms_provider, lookup_word) if form)
        logger.debug("Word %r (lookup %r): %d usable forms", word, lookup_word, len(forms))
        entries.append(WordEntry(
            word=word,
            correct_form=word.lower(),
            known_forms=forms,
            lookup_word=lookup_word if lookup_word != word else None,
        ))

    return entries


def prepare_phrase(
    phrase: str,
    forms_provider: FormsProvider,
    translator: Optional[Translator] = None,
) -> List[WordEntry]:
    """
    Prepare a phrase for play.

    With a translator, the phrase is translated first and its root-word
    mapping is used for the forms lookup. Without one, the phrase is taken to
    be in the target language already.
    """
    root_words: Dict[str, str] = {}
    if translator is not None:
        result = translator.translate(phrase)
        phrase, root_words = result.translation, result.root_words

    words = extract_words(phrase)
    logger.info("Prepared phrase %r: %d words", phrase, len(words))
    return build_entries(words, forms_provider, root_words)
