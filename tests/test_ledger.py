"""Tests for the placement ledger."""

import pytest

from src.puzzle import CellPosition, Placement, PlacementLedger, DuplicatePosition


def make_placement(col: int, row: int, word: str = "mina", tile_id: str = None) -> Placement:
    return Placement(
        id=tile_id or f"tile-{col}-{row}",
        position=CellPosition(col, row),
        correct_word=word,
        timestamp=1000.0,
    )


class TestRecording:
    """Test recording placements."""

    def test_empty_ledger(self):
        ledger = PlacementLedger()
        assert len(ledger) == 0
        assert ledger.history() == ()
        assert ledger.last_placement() is None
        assert ledger.last_correct_word() is None
        assert ledger.last_position() is None

    def test_record_marks_occupied(self):
        ledger = PlacementLedger()
        ledger.record(make_placement(2, 1))
        assert ledger.is_occupied((2, 1))
        assert ledger.is_occupied(CellPosition(2, 1))
        assert not ledger.is_occupied((1, 2))

    def test_history_keeps_game_order(self):
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0, "mina"))
        ledger.record(make_placement(1, 0, "armastan"))
        ledger.record(make_placement(2, 0, "sind"))

        assert [p.correct_word for p in ledger.history()] == ["mina", "armastan", "sind"]
        assert ledger.last_correct_word() == "sind"
        assert ledger.last_position() == (2, 0)

    def test_history_is_read_only(self):
        """history() hands out a tuple, so callers cannot append to it."""
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0))
        history = ledger.history()
        assert isinstance(history, tuple)
        with pytest.raises(AttributeError):
            history.append(make_placement(1, 0))

    def test_placement_is_frozen(self):
        placement = make_placement(0, 0)
        with pytest.raises(Exception):  # Pydantic frozen instance error
            placement.correct_word = "sina"

    def test_duplicate_position_rejected(self):
        """A second tile on the same cell raises and leaves the ledger unchanged."""
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0, tile_id="first"))

        with pytest.raises(DuplicatePosition) as excinfo:
            ledger.record(make_placement(0, 0, tile_id="second"))

        assert excinfo.value.position == (0, 0)
        assert len(ledger) == 1
        assert ledger.last_placement().id == "first"

    def test_duplicate_position_is_logged(self, caplog):
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0))
        with caplog.at_level("ERROR"):
            with pytest.raises(DuplicatePosition):
                ledger.record(make_placement(0, 0, tile_id="again"))
        assert "already holds" in caplog.text

    def test_from_placements(self):
        """Placements given up front are recorded and occupy their cells."""
        ledger = PlacementLedger.from_placements([make_placement(0, 0), make_placement(1, 0)])
        assert len(ledger) == 2
        assert ledger.is_occupied((1, 0))

    def test_from_placements_with_duplicates(self):
        with pytest.raises(DuplicatePosition):
            PlacementLedger.from_placements([make_placement(0, 0), make_placement(0, 0, tile_id="x")])

    def test_no_public_placement_list(self):
        """Placements can only be added through record(), which checks occupancy."""
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0))
        assert not hasattr(ledger, "placements")
        assert "placements" not in PlacementLedger.model_fields
        with pytest.raises(DuplicatePosition):
            ledger.record(make_placement(0, 0, tile_id="again"))
        assert len(ledger.history()) == 1


class TestAdjacencyQueries:
    """Test neighbour counting over the full history."""

    def test_count_adjacent(self):
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0))
        ledger.record(make_placement(1, 0))

        assert ledger.count_adjacent_placements((0, 1)) == 2
        assert ledger.count_adjacent_placements((2, 0)) == 1
        assert ledger.count_adjacent_placements((5, 5)) == 0

    def test_adjacent_placement_single(self):
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0, "mina"))
        ledger.record(make_placement(1, 0, "armastan"))

        neighbour = ledger.adjacent_placement((2, 0))
        assert neighbour is not None
        assert neighbour.correct_word == "armastan"

    def test_adjacent_placement_none_for_zero_or_many(self):
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0))
        ledger.record(make_placement(1, 0))

        assert ledger.adjacent_placement((0, 1)) is None
        assert ledger.adjacent_placement((5, 5)) is None

    def test_counts_older_tiles_not_just_last(self):
        """Tiles placed long ago still count as neighbours."""
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0, "first"))
        ledger.record(make_placement(0, 1, "second"))
        ledger.record(make_placement(0, 2, "third"))

        assert ledger.count_adjacent_placements((0, -1)) == 1
        assert ledger.adjacent_placement((0, -1)).correct_word == "first"


class TestReset:
    """Test clearing the ledger."""

    def test_reset_clears_everything(self):
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0))
        ledger.record(make_placement(1, 0))
        ledger.reset()

        assert len(ledger) == 0
        assert not ledger.is_occupied((0, 0))
        assert ledger.count_adjacent_placements((0, 1)) == 0

    def test_cell_reusable_after_reset(self):
        ledger = PlacementLedger()
        ledger.record(make_placement(0, 0))
        ledger.reset()
        ledger.record(make_placement(0, 0))
        assert len(ledger) == 1

    def test_get_state(self):
        ledger = PlacementLedger()
        assert ledger.get_state() == {
            "total_placements": 0,
            "last_correct_word": None,
            "last_position": None,
        }
        ledger.record(make_placement(3, 2, "sind"))
        assert ledger.get_state() == {
            "total_placements": 1,
            "last_correct_word": "sind",
            "last_position": (3, 2),
        }
