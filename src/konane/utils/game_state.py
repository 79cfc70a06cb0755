from __future__ import annotations

from typing import Type, TypeVar

from esper import World
from loguru import logger

from konane.components.game_state import GamePhase, GameState
from konane.components.move_history import MoveHistory
from konane.components.selection import PendingRemoval, Selection
from konane.components.turn_state import TurnState
from konane.events.bus import EVENT_PHASE_CHANGED, EventBus

T = TypeVar("T")


def _singleton(world: World, component_type: Type[T]) -> T:
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} resource not found")


def get_game_state(world: World) -> GameState:
    return _singleton(world, GameState)


def get_selection(world: World) -> Selection:
    return _singleton(world, Selection)


def get_pending_removal(world: World) -> PendingRemoval:
    return _singleton(world, PendingRemoval)


def get_move_history(world: World) -> MoveHistory:
    return _singleton(world, MoveHistory)


def set_phase(world: World, event_bus: EventBus, phase: GamePhase) -> None:
    """Update the game phase and emit a change event when it differs."""

    state = get_game_state(world)
    previous_phase = state.phase
    if previous_phase == phase:
        return
    state.phase = phase
    logger.info("Phase {} -> {}", previous_phase.name, phase.name)
    event_bus.emit(
        EVENT_PHASE_CHANGED,
        previous_phase=previous_phase,
        new_phase=phase,
    )


def get_turn_state(world: World) -> TurnState:
    return _singleton(world, TurnState)
