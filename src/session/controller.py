import logging
import random
import time
import uuid
from typing import Callable, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..puzzle.ledger import PlacementLedger
from ..puzzle.models import CellPosition, Placement, Round
from ..puzzle.options import OPTION_COUNT, select_options
from ..puzzle.validator import PlacementValidator
from .distractors import pad_options
from .models import AttemptResult, WordEntry


logger = logging.getLogger(__name__)


def new_tile_id() -> str:
    return f"tile-{uuid.uuid4().hex[:12]}"


class RoundController(BaseModel):
    """
    Walks the learner through the words of one phrase.

    Builds a round for the current word, checks each attempt (word first,
    then cell), records accepted tiles in the ledger and moves on to the next
    word. Wrong words and illegal cells leave everything as it was so the
    learner can retry the same round.

    Attributes:
        ledger: Placements made for the current phrase
        entries: Words of the current phrase with their known forms
        cursor: Index of the word being played
        current_round: The round on display, None once the phrase is done
        is_complete: Whether every word of the phrase has been placed
        seed: Optional random seed for reproducible option order
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    ledger: PlacementLedger = Field(default_factory=PlacementLedger, frozen=True)
    entries: List[WordEntry] = Field(default_factory=list)
    cursor: int = 0
    current_round: Optional[Round] = None
    is_complete: bool = False
    seed: Optional[int] = None
    id_factory: Callable[[], str] = new_tile_id
    clock: Callable[[], float] = time.time
    distractors: Callable[..., List[str]] = pad_options
    _rng: random.Random = PrivateAttr(default=None)
    _validator: PlacementValidator = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and the validator over the ledger."""
        self._rng = random.Random(self.seed)
        self._validator = PlacementValidator(self.ledger)

    @property
    def validator(self) -> PlacementValidator:
        return self._validator

    @property
    def rng(self) -> random.Random:
        return self._rng

    def start_phrase(self, entries: List[WordEntry]) -> Optional[Round]:
        """
        Begin a new phrase, clearing the board.

        Args:
            entries: The phrase's words in play order

        Returns:
            The first round, or None if the phrase has no words
        """
        self.ledger.reset()
        self.entries = list(entries)
        self.cursor = 0
        self.is_complete = False
        self.current_round = None
        logger.info("Starting phrase with %d words", len(self.entries))
        return self.advance()

    def build_round(self, entry: WordEntry) -> Round:
        """
        Build the three-option round for a word.

        Known forms go through the option selector; when it returns fewer
        than three options the rest are synthetic distractors. A word with
        no correct form is played as itself.
        """
        correct = entry.correct_form.strip()
        if not correct:
            logger.warning("No correct form for %r; using the word itself", entry.word)
            correct = entry.word
        selection = select_options(entry.known_forms, correct, rng=self._rng)

        options = selection.options
        if len(options) < OPTION_COUNT:
            logger.debug("Only %d options for %r; padding with distractors", len(options), entry.word)
            options = self.distractors(options, selection.correct, self._rng)

        return Round(word=entry.word, correct_form=selection.correct, options=options)

    def advance(self) -> Optional[Round]:
        """
        Present the round for the word at the cursor.

        Returns:
            The new current round, or None when every word has been placed
        """
        if self.cursor >= len(self.entries):
            self.current_round = None
            self.is_complete = True
            logger.info("All %d words completed", len(self.entries))
            return None

        self.current_round = self.build_round(self.entries[self.cursor])
        logger.debug(
            "Round %d/%d: %r with options %s",
            self.cursor + 1, len(self.entries), self.current_round.word, self.current_round.options,
        )
        return self.current_round

    def submit(self, position: Tuple[int, int], chosen_word: str) -> AttemptResult:
        """
        Handle the learner dropping a card on a cell.

        Args:
            position: The (col, row) cell the card was dropped on
            chosen_word: The option written on the card

        Returns:
            AttemptResult describing what happened
        """
        if self.is_complete or self.current_round is None:
            return AttemptResult(outcome="ALL_COMPLETE", reason="All words completed")

        current = self.current_round
        if chosen_word != current.correct_form:
            logger.debug("Wrong word %r for %r", chosen_word, current.word)
            return AttemptResult(outcome="WRONG_WORD", reason="Try again!", round=current)

        position = CellPosition(*position)
        validation = self._validator.validate(position, is_first_card=not self.ledger.history())
        if not validation.is_valid:
            return AttemptResult(outcome="ILLEGAL_PLACEMENT", reason=validation.reason, round=current)

        placement = Placement(
            id=self.id_factory(),
            position=position,
            correct_word=current.correct_form,
            timestamp=self.clock(),
        )
        self.ledger.record(placement)
        self.cursor += 1
        next_round = self.advance()

        return AttemptResult(
            outcome="ALL_COMPLETE" if next_round is None else "PLACED",
            reason=validation.reason,
            placement=placement,
            round=next_round,
        )

    def valid_positions(self) -> List[CellPosition]:
        """Free cells where the next card could legally go (empty while the board is)."""
        return self._validator.valid_positions()

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing session state
        """
        return {
            "words": [entry.word for entry in self.entries],
            "cursor": self.cursor,
            "is_complete": self.is_complete,
            "board_state": self._validator.state,
            "current_round": self.current_round.model_dump() if self.current_round else None,
            **self.ledger.get_state(),
        }
