"""Advancing the turn and detecting defeat or victory."""

from __future__ import annotations

from dungeoncrawl.components import AmuletOfYala, Health, Player
from dungeoncrawl.ecs import World
from dungeoncrawl.geometry import Point
from dungeoncrawl.turn_state import TurnState

_NEXT = {
    TurnState.PLAYER_TURN: TurnState.MONSTER_TURN,
    TurnState.MONSTER_TURN: TurnState.AWAITING_INPUT,
}


def end_turn(world: World, turn_state: TurnState) -> TurnState:
    """The state that follows turn_state in the current world."""
    amulet = next(world.query(Point, AmuletOfYala), None)
    if amulet is None:
        raise LookupError("the world holds no amulet")
    _, amulet_pos, _ = amulet

    if turn_state is TurnState.AWAITING_INPUT:
        return turn_state
    new_state = _NEXT.get(turn_state, turn_state)

    for _, health, pos, _ in world.query(Health, Point, Player):
        if health.current < 1:
            new_state = TurnState.GAME_OVER
        if pos == amulet_pos:
            new_state = TurnState.VICTORY
    return new_state