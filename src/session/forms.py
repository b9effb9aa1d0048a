"""Sources of known inflected forms for a word."""

import logging
from typing import Dict, Iterable, List, Mapping, Protocol


logger = logging.getLogger(__name__)


class FormsProvider(Protocol):
    """Anything that can list the known inflected forms of a word."""

    def forms_for(self, word: str) -> List[str]: ...


class StaticFormsProvider:
    """
    Forms looked up from an in-memory lexicon.

    Keys are matched case-insensitively; a word with no entry has no known
    forms.
    """

    def __init__(self, lexicon: Mapping[str, Iterable[str]] | None = None):
        self._lexicon: Dict[str, List[str]] = {
            key.lower(): list(forms) for key, forms in (lexicon or {}).items()
        }

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._lexicon

    def forms_for(self, word: str) -> List[str]:
        forms = self._lexicon.get(word.lower())
        if forms is None:
            logger.debug("No forms known for %r", word)
            return []
        return list(forms)


def lookup_forms(provider: FormsProvider, word: str) -> List[str]:
    """Ask a provider for forms, degrading to an empty list if the lookup fails."""
    try:
        return list(provider.forms_for(word) or [])
    except Exception:
        logger.warning("Forms lookup failed for %r; continuing without forms", word, exc_info=True)
        return []
