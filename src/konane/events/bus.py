from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"  # payload: x, y, button, modifiers
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, press_id
EVENT_CELL_CLICK = "cell_click"            # payload: row, col
EVENT_SETUP_CLICK = "setup_click"          # payload: row, col (in bounds, phase SETUP)
EVENT_PLAY_CLICK = "play_click"            # payload: row, col (in bounds, phase PLAYING)


# ============================================================================
# SETUP HANDSHAKE
# ============================================================================
EVENT_SETUP_PIECE_REMOVED = "setup_piece_removed"    # payload: row, col, color=PieceColor, removed=int
EVENT_SETUP_PIECE_RESTORED = "setup_piece_restored"  # payload: row, col, color=PieceColor, pending=(r,c)
EVENT_SETUP_COMPLETE = "setup_complete"              # payload: removed=[(r,c),(r,c)]


# ============================================================================
# SELECTION & MOVES
# ============================================================================
EVENT_PIECE_SELECTED = "piece_selected"      # payload: row, col, color=PieceColor
EVENT_PIECE_DESELECTED = "piece_deselected"  # payload: reason=str, prev_row, prev_col
EVENT_JUMP_EXECUTED = "jump_executed"        # payload: src=(r,c), dst=(r,c), captured=(r,c), color=PieceColor, direction=(dr,dc)
EVENT_CHAIN_CONTINUED = "chain_continued"    # payload: position=(r,c), direction=(dr,dc), destinations=[(r,c),...]
EVENT_CHAIN_ENDED = "chain_ended"            # payload: color=PieceColor, path=[(r,c),...], captured=[(r,c),...], reason=str
EVENT_BOARD_CHANGED = "board_changed"        # payload: reason=str, positions=[(r,c),...]


# ============================================================================
# TURN SYSTEM
# ============================================================================
EVENT_TURN_ADVANCED = "turn_advanced"        # payload: previous_color=PieceColor, new_color=PieceColor, move_count=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_PHASE_CHANGED = "phase_changed"        # payload: previous_phase=GamePhase|None, new_phase=GamePhase
EVENT_GAME_FINISHED = "game_finished"        # payload: winner=PieceColor, move_count=int
EVENT_GAME_RESET_REQUEST = "game_reset_request"  # payload: reason=str|None
EVENT_GAME_RESET = "game_reset"              # payload: reason=str|None
