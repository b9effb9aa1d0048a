"""
Phrase translation through an LLM.

The model is asked for JSON of the form
{"translation": "...", "rootWords": {"inflected": "base"}}. Anything that
goes wrong (API errors, unparsable output) degrades to using the input text
untranslated with no root words, so a session can always continue.
"""

import json
import logging
import re
from typing import Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from .llm_client import LLMClient
from .models import TranslationResult, TranslatorConfig
from .prompts import SYSTEM_PROMPT, build_translate_prompt


logger = logging.getLogger(__name__)

# Labels a model sometimes echoes around a bare translation
RESPONSE_LABELS = [
    'Translate:',
    'Translation:',
    'English:',
    'Estonian:',
    'Response:',
    'JSON:',
    'Result:',
]


def parse_translation(response_text: str, original: str) -> TranslationResult:
    """
    Parse a model response into a TranslationResult.

    Tries the first {...} block as JSON. Once that block parses, its content
    decides: an invalid or empty translation falls back to the original text.
    Only when no JSON block parses is a bare translation salvaged from the
    text, provided it looks like something other than plain English.

    Args:
        response_text: Raw model output
        original: The phrase that was sent for translation

    Returns:
        TranslationResult, never raising on malformed output
    """
    match = re.search(r'\{.*\}', response_text, re.DOTALL)
    if match:
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError:
            logger.warning("Could not parse translation JSON: %r", response_text)
        else:
            return _validate_translation(data, original)

    cleaned = response_text
    for label in RESPONSE_LABELS:
        cleaned = re.sub(re.escape(label), '', cleaned, flags=re.IGNORECASE)
    cleaned = re.sub(r'^[\s"“”\[\]{}.,;:!?]+|[\s"“”\[\]{}.,;:!?]+$', '', cleaned)
    cleaned = re.sub(r'\s+', ' ', cleaned).strip()

    # Plain ASCII letters most likely means the model answered in English
    if len(cleaned) > 2 and not re.fullmatch(r'[a-zA-Z\s]*', cleaned):
        return TranslationResult(translation=cleaned)

    return TranslationResult(translation=original)


def _validate_translation(data, original: str) -> TranslationResult:
    """Check decoded JSON, falling back to the original text when unusable."""
    if not isinstance(data, dict):
        logger.warning("Translation JSON is not an object: %r", data)
        return TranslationResult(translation=original)

    if data.get("rootWords") is None:
        data = {**data, "rootWords": {}}

    try:
        result = TranslationResult.model_validate(data, strict=True)
    except PydanticValidationError as e:
        logger.warning("Invalid translation JSON %r: %s", data, e)
        return TranslationResult(translation=original)

    if not result.translation.strip():
        logger.warning("Empty translation for %r", original)
        return TranslationResult(translation=original)
    return result


class Translator:
    """
    Translates English phrases for the puzzle, caching results per phrase.

    Attributes:
        client: LLM client used for the requests
    """

    def __init__(self, client: LLMClient):
        self.client = client
        self._cache: Dict[str, TranslationResult] = {}

    @classmethod
    def from_config(cls, config: TranslatorConfig) -> "Translator":
        """Create a translator from its config section."""
        extra = config.__pydantic_extra__ or {}
        client = LLMClient(
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            **extra
        )
        return cls(client)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.debug("Translation cache cleared")

    def translate(self, text: str) -> TranslationResult:
        """
        Translate a phrase.

        Args:
            text: English phrase

        Returns:
            TranslationResult; the input text itself if translation failed
        """
        key = text.lower().strip()
        cached: Optional[TranslationResult] = self._cache.get(key)
        if cached is not None:
            logger.debug("Translation for %r found in cache", text)
            return cached

        self.client.clear_messages()
        self.client.add_message("system", SYSTEM_PROMPT)
        self.client.add_message("user", build_translate_prompt(text))

        try:
            response_text = self.client.complete_text()
        except Exception:
            logger.exception("Translation request failed; using the original phrase")
            return TranslationResult(translation=text)

        result = parse_translation(response_text, text)
        self._cache[key] = result
        logger.info("Translated %r -> %r (root words: %s)", text, result.translation, result.root_words)
        return result
