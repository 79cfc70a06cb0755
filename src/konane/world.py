from esper import World

from .events.bus import EventBus
from konane.components.game_state import GameState, GamePhase
from konane.components.move_history import MoveHistory
from konane.components.selection import PendingRemoval, Selection
from konane.components.turn_state import TurnState


def create_world(
    event_bus: EventBus,
    initial_phase: GamePhase = GamePhase.SETUP,
) -> World:
    """Create the world holding the game state resource.

    The board and its cells are owned by BoardSystem, which is expected to be
    constructed against the returned world.
    """
    world = World()
    world.create_entity(
        GameState(phase=initial_phase),
        Selection(),
        PendingRemoval(),
        TurnState(),
        MoveHistory(),
    )
    return world
