import dataclasses

import pytest

from konane.components.game_state import GamePhase
from konane.components.piece_color import PieceColor
from konane.engine import EngineSnapshot, KonaneEngine
from tests.helpers import click_cells

B = PieceColor.BLACK
W = PieceColor.WHITE


def test_fresh_engine_state():
    snap = KonaneEngine().snapshot()
    assert isinstance(snap, EngineSnapshot)
    assert snap.phase == GamePhase.SETUP
    assert snap.active_color == B
    assert snap.selection is None
    assert snap.pending_removal is None
    assert snap.winner is None
    assert snap.move_count == 0
    assert snap.legal_destinations == ()
    assert snap.history == ()
    assert sum(1 for row in snap.board for value in row if value is not None) == 64


def test_snapshot_is_frozen():
    snap = KonaneEngine().snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.phase = GamePhase.PLAYING  # type: ignore[misc]


def test_snapshot_cached_until_state_changes():
    engine = KonaneEngine()
    first = engine.snapshot()
    assert engine.snapshot() is first
    engine.handle_cell_select(3, 3)
    second = engine.snapshot()
    assert second is not first
    assert second.version > first.version
    assert second.pending_removal == (3, 3)
    # The earlier snapshot is untouched by later play.
    assert first.pending_removal is None
    assert first.board[3][3] == B


def test_rejected_setup_partner_keeps_version():
    engine = KonaneEngine()
    engine.handle_cell_select(3, 3)
    version = engine.version
    engine.handle_cell_select(5, 5)
    assert engine.version == version
    assert engine.board[5][5] == B


def test_ignored_clicks_keep_version():
    engine = KonaneEngine()
    click_cells(engine, (3, 3), (3, 4))
    version = engine.version
    click_cells(engine, (3, 3), (2, 3), (-1, 4), (8, 8))
    assert engine.version == version


def test_version_bumps_on_each_kind_of_change():
    engine = KonaneEngine()
    versions = [engine.version]
    for cell in ((3, 3), (3, 4), (1, 3), (3, 3)):
        engine.handle_cell_select(*cell)
        versions.append(engine.version)
    assert versions == sorted(set(versions))


def test_status_message_and_round_number():
    engine = KonaneEngine()
    assert engine.status_message == "Remove two adjacent pieces to begin"
    assert engine.round_number == 1
    click_cells(engine, (3, 3), (3, 4))
    assert engine.status_message == "Black's Turn"
    click_cells(engine, (5, 3), (3, 3))
    assert engine.status_message == "White's Turn"
    assert engine.round_number == 1
    white_move = engine.all_legal_moves()[0]
    click_cells(engine, *white_move)
    assert engine.move_count == 2
    assert engine.round_number == 2


def test_legal_moves_query_outside_play_is_empty():
    engine = KonaneEngine()
    assert engine.legal_moves((1, 3)) == []
    click_cells(engine, (3, 3), (3, 4))
    assert engine.legal_moves((1, 3)) == [(3, 3)]
    assert engine.legal_moves((1, 3), forced_direction=(0, 1)) == []


def test_all_legal_moves_query_outside_play_is_empty():
    engine = KonaneEngine()
    engine.handle_cell_select(3, 3)
    # The gap left by the first removal would already admit hops.
    assert engine.all_legal_moves() == []
    assert engine.all_legal_moves(PieceColor.WHITE) == []
    engine.handle_cell_select(3, 4)
    assert engine.all_legal_moves() == [
        ((1, 3), (3, 3)),
        ((3, 1), (3, 3)),
        ((5, 3), (3, 3)),
    ]
