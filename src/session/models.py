"""
Pydantic models for the session layer.

Configuration loaded from YAML, the per-word data handed over by the
collaborators, and the results of a learner's attempts. The logic classes
(RoundController, Translator, LLMClient) live in their own modules.
"""

from typing import Dict, List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict

from ..puzzle.models import Placement, Round


# Type aliases
Role = Literal["system", "user", "assistant"]
Outcome = Literal["WRONG_WORD", "ILLEGAL_PLACEMENT", "PLACED", "ALL_COMPLETE"]


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class WordEntry(BaseModel):
    """One word of the phrase together with the forms known for it."""
    word: str
    correct_form: str
    known_forms: List[str] = Field(default_factory=list)
    lookup_word: Optional[str] = None  # Root word used for the forms lookup, if different


class TranslationResult(BaseModel):
    """Translated phrase plus the inflected-to-root mapping for its words."""
    translation: str
    root_words: Dict[str, str] = Field(default_factory=dict, alias="rootWords")

    model_config = ConfigDict(populate_by_name=True)


class AttemptResult(BaseModel):
    """Outcome of a single drop of a card onto the board."""
    outcome: Outcome
    reason: str = ""
    placement: Optional[Placement] = None
    round: Optional[Round] = None  # The round active after the attempt

    @property
    def accepted(self) -> bool:
        return self.outcome in ("PLACED", "ALL_COMPLETE") and self.placement is not None


class BoardConfig(BaseModel):
    """Size of the board as drawn in the terminal."""
    cols: int = Field(default=6, ge=1)
    rows: int = Field(default=4, ge=1)


class TranslatorConfig(BaseModel):
    """Configuration for the translation model."""
    model_config = ConfigDict(extra='allow')

    model: str
    temperature: float = 0.2
    max_tokens: Optional[int] = None
    # Additional kwargs are allowed and passed to LiteLLM


class SessionConfig(BaseModel):
    """Configuration for a play session."""
    seed: Optional[int] = None
    phrase: Optional[str] = None
    board: BoardConfig = Field(default_factory=BoardConfig)
    translator: Optional[TranslatorConfig] = None
    lexicon: Dict[str, List[str]] = Field(default_factory=dict)
