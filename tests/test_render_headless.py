import pytest

pytest.importorskip("arcade")

from konane.components.piece_color import PieceColor
from konane.engine import KonaneEngine
from konane.systems.render import RenderSystem
from tests.helpers import click_cells


class DummyWindow:
    def __init__(self, width=960, height=640):
        self.width = width
        self.height = height


def test_layout_cache_mirrors_the_snapshot():
    engine = KonaneEngine()
    render = RenderSystem(engine, DummyWindow())
    click_cells(engine, (3, 3), (3, 4), (1, 3))
    render.process()

    selected = render.cell_layout(1, 3)
    assert selected["selected"] is True
    assert selected["piece"] == PieceColor.BLACK
    assert render.cell_layout(3, 3)["destination"] is True
    assert render.cell_layout(3, 3)["piece"] is None
    assert render.cell_layout(0, 0)["destination"] is False
    # Row 0 is drawn above row 7.
    assert render.cell_layout(0, 0)["center"][1] > render.cell_layout(7, 0)["center"][1]


def test_pending_removal_is_marked():
    engine = KonaneEngine()
    render = RenderSystem(engine, DummyWindow())
    engine.handle_cell_select(4, 4)
    render.process()
    assert render.cell_layout(4, 4)["pending"] is True
    assert render.cell_layout(4, 4)["piece"] is None


def test_status_lines_follow_the_game():
    engine = KonaneEngine()
    render = RenderSystem(engine, DummyWindow())
    render.process()
    assert render.status_lines[:2] == ["Konane", "Remove two adjacent pieces to begin"]

    click_cells(engine, (3, 3), (3, 4), (5, 3), (3, 3))
    render.process()
    lines = render.status_lines
    assert lines[1] == "White's Turn"
    assert "Turns played: 1" in lines
    assert lines[-1] == "Black d3-d5 x1"


def test_last_jump_tracked_and_cleared_on_reset():
    engine = KonaneEngine()
    render = RenderSystem(engine, DummyWindow())
    click_cells(engine, (3, 3), (3, 4), (5, 3), (3, 3))
    assert render.last_jump == {"src": (5, 3), "dst": (3, 3), "captured": (4, 3)}
    engine.reset()
    assert render.last_jump is None


def test_smaller_board_is_drawn_and_named_at_its_own_size():
    engine = KonaneEngine(rows=6, cols=6)
    render = RenderSystem(engine, DummyWindow())
    click_cells(engine, (2, 2), (2, 3), (4, 2), (2, 2))
    render.process()

    assert render.cell_layout(5, 5) is not None
    assert render.cell_layout(6, 0) is None
    assert render.cell_layout(0, 6) is None
    assert render.cell_layout(0, 0)["center"][1] > render.cell_layout(5, 0)["center"][1]
    assert render.status_lines[-1] == "Black c2-c4 x1"
