"""
Tests unitaires pour la surface simulée
"""

import pytest

from minebot.lib.s0_interface import ActionRejected, GameOutcome, SurfaceUnavailable
from minebot.lib.s1_snapshot import CellStatus, build_board
from minebot.lib.s4_simulator import MemoryBoardSurface


def statuses(surface):
    return {(o.x, o.y): o.status for o in surface.observe()}


def test_observe_before_start_is_unavailable():
    surface = MemoryBoardSurface(3, 3, [(0, 0)])
    with pytest.raises(SurfaceUnavailable):
        surface.observe()


def test_fresh_game_is_fully_covered():
    surface = MemoryBoardSurface(3, 2, [(0, 0)])
    surface.start_game()
    observed = surface.observe()
    assert len(observed) == 6
    assert all(o.status == CellStatus.COVERED for o in observed)
    assert surface.outcome() == GameOutcome.IN_PROGRESS


def test_reveal_numbered_cell_opens_only_that_cell():
    surface = MemoryBoardSurface(3, 1, [(0, 0)])
    surface.start_game()
    surface.reveal((1, 0))
    board = build_board(surface.observe())
    assert board.get((1, 0)).clue == 1
    assert board.get((2, 0)).status == CellStatus.COVERED


def test_reveal_zero_cell_flood_fills():
    surface = MemoryBoardSurface(4, 4, [(3, 3)])
    surface.start_game()
    surface.reveal((0, 0))
    status = statuses(surface)
    assert status[(3, 3)] == CellStatus.COVERED
    assert sum(1 for s in status.values() if s == CellStatus.OPENED) == 15
    assert surface.outcome() == GameOutcome.WON


def test_reveal_mine_loses_and_shows_all_mines():
    surface = MemoryBoardSurface(3, 3, [(0, 0), (2, 2)])
    surface.start_game()
    surface.reveal((0, 0))
    status = statuses(surface)
    assert status[(0, 0)] == CellStatus.MINE
    assert status[(2, 2)] == CellStatus.MINE
    assert surface.outcome() == GameOutcome.LOST


def test_reveal_rejections():
    surface = MemoryBoardSurface(3, 1, [(0, 0)])
    surface.start_game()
    with pytest.raises(ActionRejected):
        surface.reveal((9, 9))
    surface.reveal((1, 0))
    with pytest.raises(ActionRejected):
        surface.reveal((1, 0))
    surface.reveal((0, 0))
    with pytest.raises(ActionRejected):
        surface.reveal((2, 0))


def test_start_game_resets_the_round():
    surface = MemoryBoardSurface(2, 1, [(0, 0)])
    surface.start_game()
    surface.reveal((0, 0))
    assert surface.outcome() == GameOutcome.LOST
    surface.start_game()
    assert surface.outcome() == GameOutcome.IN_PROGRESS
    assert all(o.status == CellStatus.COVERED for o in surface.observe())


def test_random_layout_is_reproducible():
    first = MemoryBoardSurface.random(9, 9, 10, seed=42)
    second = MemoryBoardSurface.random(9, 9, 10, seed=42)
    assert first.mines == second.mines
    assert len(first.mines) == 10


@pytest.mark.parametrize("width, height, mines", [(0, 3, []), (2, 2, [(5, 5)]), (1, 1, [(0, 0)])])
def test_invalid_layouts(width, height, mines):
    with pytest.raises(ValueError):
        MemoryBoardSurface(width, height, mines)
