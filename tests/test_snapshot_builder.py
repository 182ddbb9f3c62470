"""
Tests unitaires pour la construction du snapshot
"""

import pytest

from minebot.lib.s1_snapshot import (
    Board,
    CellStatus,
    MalformedObservation,
    RawObservation,
    build_board,
)


def obs(x, y, status, clue=None):
    return RawObservation(x=x, y=y, status=status, clue=clue)


class TestBuildBoard:
    """Tests pour build_board"""

    def test_indexes_cells_by_position(self):
        board = build_board([
            obs(0, 0, CellStatus.OPENED, 1),
            obs(1, 0, CellStatus.COVERED),
            obs(2, 0, CellStatus.FLAGGED),
        ])

        assert isinstance(board, Board)
        assert len(board) == 3
        assert board.get((0, 0)).clue == 1
        assert board.get((1, 0)).status == CellStatus.COVERED
        assert board.get((2, 0)).status == CellStatus.FLAGGED
        assert board.get((5, 5)) is None

    def test_keeps_enumeration_order(self):
        board = build_board([obs(2, 0, "covered"), obs(0, 0, "covered"), obs(1, 0, "covered")])
        assert [c.position for c in board] == [(2, 0), (0, 0), (1, 0)]

    def test_accepts_status_labels(self):
        board = build_board([obs(0, 0, "opened", 0), obs(1, 0, "mine")])
        assert board.get((0, 0)).status == CellStatus.OPENED
        assert board.get((1, 0)).status == CellStatus.MINE

    def test_clue_on_covered_cell_is_ignored(self):
        board = build_board([obs(0, 0, CellStatus.COVERED, 3)])
        assert board.get((0, 0)).clue is None

    def test_opened_cell_without_clue(self):
        board = build_board([obs(0, 0, CellStatus.OPENED)])
        cell = board.get((0, 0))
        assert cell.is_opened
        assert not cell.is_clued

    def test_numeric_string_clue_is_coerced(self):
        board = build_board([obs(0, 0, CellStatus.OPENED, "2")])
        assert board.get((0, 0)).clue == 2

    def test_empty_observation_gives_empty_board(self):
        assert len(build_board([])) == 0

    def test_duplicate_position_is_rejected(self):
        with pytest.raises(MalformedObservation):
            build_board([obs(0, 0, CellStatus.COVERED), obs(0, 0, CellStatus.OPENED, 1)])

    @pytest.mark.parametrize("status", [CellStatus.OPENED, CellStatus.COVERED, CellStatus.FLAGGED])
    def test_negative_clue_is_rejected(self, status):
        with pytest.raises(MalformedObservation):
            build_board([obs(0, 0, status, -1)])

    @pytest.mark.parametrize("clue", ["x", 1.5, True, [1], "²", "①", "٣", " 2"])
    def test_non_numeric_clue_is_rejected(self, clue):
        with pytest.raises(MalformedObservation):
            build_board([obs(0, 0, CellStatus.COVERED, clue)])

    @pytest.mark.parametrize("clue", ["²", "①", "٣"])
    def test_unicode_digit_clue_on_opened_cell_is_rejected(self, clue):
        with pytest.raises(MalformedObservation):
            build_board([obs(0, 0, CellStatus.OPENED, clue)])

    def test_ascii_digit_string_clue_is_accepted(self):
        board = build_board([obs(0, 0, CellStatus.OPENED, "3")])
        assert board.get((0, 0)).clue == 3

    def test_unknown_status_is_rejected(self):
        with pytest.raises(MalformedObservation):
            build_board([obs(0, 0, "hdd_weird")])

    def test_non_integer_coordinates_are_rejected(self):
        with pytest.raises(MalformedObservation):
            build_board([obs("a", 0, CellStatus.COVERED)])

    def test_malformed_observation_is_a_value_error(self):
        assert issubclass(MalformedObservation, ValueError)


class TestBoard:
    """Tests pour les accès du Board"""

    def test_neighbors_on_edge_and_corner(self):
        board = build_board([
            obs(x, y, CellStatus.COVERED) for y in range(3) for x in range(3)
        ])
        assert len(board.neighbors((1, 1))) == 8
        assert len(board.neighbors((0, 0))) == 3
        assert len(board.neighbors((1, 0))) == 5

    def test_neighbors_ignore_missing_cells(self):
        board = build_board([obs(0, 0, CellStatus.OPENED, 1), obs(5, 5, CellStatus.COVERED)])
        assert board.neighbors((0, 0)) == []

    def test_eligible_and_clued_cells(self):
        board = build_board([
            obs(0, 0, CellStatus.OPENED, 1),
            obs(1, 0, CellStatus.OPENED),
            obs(2, 0, CellStatus.COVERED),
            obs(3, 0, CellStatus.FLAGGED),
            obs(4, 0, CellStatus.MINE),
        ])
        assert [c.position for c in board.clued_cells] == [(0, 0)]
        assert [c.position for c in board.eligible_cells] == [(2, 0), (3, 0)]
        assert board.count_by_status() == {"opened": 2, "covered": 1, "flagged": 1, "mine": 1}
