"""Play sessions: round sequencing and the collaborators feeding it."""

from .models import (
    Message,
    Role,
    Outcome,
    WordEntry,
    TranslationResult,
    AttemptResult,
    BoardConfig,
    TranslatorConfig,
    SessionConfig,
)
from .llm_client import LLMClient
from .translator import Translator, parse_translation
from .forms import FormsProvider, StaticFormsProvider, lookup_forms
from .distractors import create_dummy_options, pad_options
from .phrase import extract_words, build_entries, prepare_phrase
from .controller import RoundController

__all__ = [
    "Message",
    "Role",
    "Outcome",
    "WordEntry",
    "TranslationResult",
    "AttemptResult",
    "BoardConfig",
    "TranslatorConfig",
    "SessionConfig",
    "LLMClient",
    "Translator",
    "parse_translation",
    "FormsProvider",
    "StaticFormsProvider",
    "lookup_forms",
    "create_dummy_options",
    "pad_options",
    "extract_words",
    "build_entries",
    "prepare_phrase",
    "RoundController",
]
