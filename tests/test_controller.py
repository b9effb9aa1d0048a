"""Tests for the round controller."""

import itertools

import pytest
from pydantic import ValidationError

from src.puzzle import CellPosition, DuplicatePosition, PlacementLedger, Placement
from src.session import RoundController, WordEntry


def make_entries():
    return [
        WordEntry(word="mina", correct_form="mina", known_forms=["mina", "minu", "mind", "mulle"]),
        WordEntry(word="armastan", correct_form="armastan",
                  known_forms=["armastan", "armastad", "armastab", "armastame"]),
    ]


@pytest.fixture
def controller():
    counter = itertools.count(1)
    return RoundController(
        seed=7,
        id_factory=lambda: f"tile-{next(counter)}",
        clock=lambda: 1234.5,
    )


class TestSequencing:
    """Test moving through a phrase."""

    def test_end_to_end(self, controller):
        """Two correct words on legal cells complete the phrase."""
        first = controller.start_phrase(make_entries())
        assert first.word == "mina"
        assert len(first.options) == 3
        assert "mina" in first.options

        result = controller.submit((0, 0), "mina")
        assert result.outcome == "PLACED"
        assert result.round.word == "armastan"
        assert result.placement.id == "tile-1"
        assert result.placement.timestamp == 1234.5

        result = controller.submit((1, 0), "armastan")
        assert result.outcome == "ALL_COMPLETE"
        assert result.round is None
        assert result.accepted

        assert controller.is_complete
        assert controller.current_round is None
        assert len(controller.ledger.history()) == 2
        assert [p.correct_word for p in controller.ledger.history()] == ["mina", "armastan"]

    def test_empty_phrase_completes_immediately(self, controller):
        assert controller.start_phrase([]) is None
        assert controller.is_complete

    def test_submit_after_complete(self, controller):
        controller.start_phrase(make_entries()[:1])
        controller.submit((0, 0), "mina")
        result = controller.submit((0, 1), "mina")
        assert result.outcome == "ALL_COMPLETE"
        assert result.placement is None
        assert len(controller.ledger) == 1

    def test_new_phrase_resets(self, controller):
        controller.start_phrase(make_entries())
        controller.submit((0, 0), "mina")

        controller.start_phrase(make_entries())

        assert controller.cursor == 0
        assert len(controller.ledger) == 0
        assert controller.current_round.word == "mina"
        # The old cell is free again
        assert controller.submit((0, 0), "mina").outcome == "PLACED"


class TestRejections:
    """Wrong words and illegal cells keep the round active."""

    def test_wrong_word(self, controller):
        current = controller.start_phrase(make_entries())
        wrong = next(o for o in current.options if o != "mina")

        result = controller.submit((0, 0), wrong)

        assert result.outcome == "WRONG_WORD"
        assert result.round == current
        assert controller.current_round == current
        assert controller.cursor == 0
        assert len(controller.ledger) == 0

    def test_wrong_word_not_validated(self, controller):
        """A wrong word on an occupied cell reports the word, not the cell."""
        controller.start_phrase(make_entries())
        controller.submit((0, 0), "mina")
        result = controller.submit((0, 0), "nope")
        assert result.outcome == "WRONG_WORD"

    def test_unlimited_retries(self, controller):
        controller.start_phrase(make_entries())
        for _ in range(25):
            assert controller.submit((0, 0), "wrong").outcome == "WRONG_WORD"
        assert controller.submit((0, 0), "mina").outcome == "PLACED"

    def test_illegal_placement(self, controller):
        controller.start_phrase(make_entries())
        controller.submit((0, 0), "mina")

        result = controller.submit((4, 4), "armastan")

        assert result.outcome == "ILLEGAL_PLACEMENT"
        assert result.reason == "Card must be adjacent to exactly one previous card"
        assert controller.current_round.word == "armastan"
        assert controller.cursor == 1
        assert len(controller.ledger) == 1

    def test_occupied_cell(self, controller):
        controller.start_phrase(make_entries())
        controller.submit((0, 0), "mina")
        result = controller.submit((0, 0), "armastan")
        assert result.outcome == "ILLEGAL_PLACEMENT"
        assert result.reason == "Position already occupied"


class TestRoundBuilding:
    """Test option building and padding."""

    def test_scarce_forms_padded_to_three(self, controller):
        entry = WordEntry(word="läheb", correct_form="läheb", known_forms=[])
        round_ = controller.build_round(entry)
        assert len(round_.options) == 3
        assert len(set(round_.options)) == 3
        assert "läheb" in round_.options

    def test_two_forms_padded(self, controller):
        entry = WordEntry(word="sul", correct_form="sul", known_forms=["sina", "sinu"])
        round_ = controller.build_round(entry)
        assert len(round_.options) == 3
        assert "sul" in round_.options

    def test_missing_correct_form_falls_back_to_word(self, controller):
        entry = WordEntry(word="tere", correct_form="", known_forms=[])
        round_ = controller.build_round(entry)
        assert round_.correct_form == "tere"
        assert "tere" in round_.options
        assert len(round_.options) == 3

    @pytest.mark.parametrize("correct_form", ["", "   "])
    def test_forms_without_correct_form_use_word(self, controller, correct_form):
        """Known forms but no correct form: the word is the answer, never a blank option."""
        entry = WordEntry(word="tere", correct_form=correct_form, known_forms=["tere", "terve", "tervist"])
        round_ = controller.build_round(entry)
        assert round_.correct_form == "tere"
        assert sorted(round_.options) == ["tere", "terve", "tervist"]
        assert all(option.strip() for option in round_.options)

    def test_custom_distractor_collaborator(self):
        calls = []

        def distractors(options, word, rng):
            calls.append((list(options), word))
            return options + ["xx", "yy"]

        controller = RoundController(seed=1, distractors=distractors)
        round_ = controller.build_round(WordEntry(word="tere", correct_form="tere"))
        assert calls == [(["tere"], "tere")]
        assert round_.options == ["tere", "xx", "yy"]

    def test_seeded_rounds_reproducible(self):
        a = RoundController(seed=3).start_phrase(make_entries())
        b = RoundController(seed=3).start_phrase(make_entries())
        assert a.options == b.options


class TestState:
    """Test shared ledger and state reporting."""

    def test_shares_injected_ledger(self):
        ledger = PlacementLedger()
        controller = RoundController(ledger=ledger)
        controller.start_phrase(make_entries())
        controller.submit((2, 2), "mina")
        assert len(ledger) == 1
        assert controller.validator.ledger is ledger

    def test_ledger_cannot_be_replaced(self, controller):
        """The validator always reads the controller's own ledger."""
        original = controller.ledger
        with pytest.raises(ValidationError):
            controller.ledger = PlacementLedger()
        assert controller.ledger is original
        assert controller.validator.ledger is original

    def test_valid_positions(self, controller):
        controller.start_phrase(make_entries())
        assert controller.valid_positions() == []
        controller.submit((0, 0), "mina")
        positions = controller.valid_positions()
        assert CellPosition(0, 1) in positions
        assert len(positions) == 6

    def test_get_state(self, controller):
        controller.start_phrase(make_entries())
        controller.submit((0, 0), "mina")
        state = controller.get_state()
        assert state["words"] == ["mina", "armastan"]
        assert state["cursor"] == 1
        assert state["is_complete"] is False
        assert state["board_state"] == "IN_PROGRESS"
        assert state["total_placements"] == 1
        assert state["last_correct_word"] == "mina"
        assert state["current_round"]["word"] == "armastan"

    def test_ledger_refuses_duplicates_directly(self, controller):
        """Bypassing the controller still cannot stack two tiles."""
        controller.start_phrase(make_entries())
        controller.submit((0, 0), "mina")
        with pytest.raises(DuplicatePosition):
            controller.ledger.record(Placement(
                id="rogue", position=CellPosition(0, 0), correct_word="x", timestamp=0.0,
            ))
