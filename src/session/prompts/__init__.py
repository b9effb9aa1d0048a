"""Prompt templates for the translation model."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .translate_prompt import build_translate_prompt

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "build_translate_prompt",
]
