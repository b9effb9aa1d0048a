"""Data models for the puzzle engine."""

from typing import List, Literal, NamedTuple
from pydantic import BaseModel, ConfigDict, Field


ValidationCode = Literal[
    "POSITION_OCCUPIED",
    "FIRST_CARD",
    "NOT_ADJACENT",
    "MULTIPLE_ADJACENT",
    "VALID",
]


class CellPosition(NamedTuple):
    """A cell on the hex board, addressed by column and row."""
    col: int
    row: int


class Placement(BaseModel):
    """A tile confirmed and recorded on the board."""
    model_config = ConfigDict(frozen=True)

    id: str
    position: CellPosition
    correct_word: str
    timestamp: float


class ValidationResult(BaseModel):
    """Outcome of checking a candidate placement."""
    is_valid: bool
    reason: str
    code: ValidationCode


class OptionSet(BaseModel):
    """The correct form plus the candidate options shown for one word."""
    correct: str
    options: List[str] = Field(default_factory=list)


class Round(BaseModel):
    """One word's challenge as presented to the learner."""
    word: str
    correct_form: str
    options: List[str] = Field(default_factory=list)
