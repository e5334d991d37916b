"""Turning a key press into the player's action for the turn."""

from __future__ import annotations

from enum import Enum, auto

from dungeoncrawl.components import Enemy, Health, Player, WantsToAttack, WantsToMove
from dungeoncrawl.ecs import CommandBuffer, World
from dungeoncrawl.geometry import Point
from dungeoncrawl.turn_state import TurnState


class Key(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    KEY1 = auto()
    OTHER = auto()


_DELTAS = {
    Key.LEFT: Point(-1, 0),
    Key.RIGHT: Point(1, 0),
    Key.UP: Point(0, -1),
    Key.DOWN: Point(0, 1),
}


def player_input(
    world: World, commands: CommandBuffer, key: Key | None, turn_state: TurnState
) -> TurnState:
    """Queue a move or attack for an arrow key, heal for any other key; None waits."""
    if key is None:
        return turn_state

    delta = _DELTAS.get(key, Point(0, 0))
    player = next(world.query(Point, Player), None)
    if player is None:
        raise LookupError("the world holds no player")
    player_entity, pos, _ = player
    destination = pos + delta

    did_something = False
    if delta != Point(0, 0):
        for enemy, enemy_pos, _ in world.query(Point, Enemy):
            if enemy_pos == destination:
                did_something = True
                commands.push(WantsToAttack(attacker=player_entity, target=enemy))
        if not did_something:
            did_something = True
            commands.push(WantsToMove(entity=player_entity, destination=destination))

    if not did_something:
        health = world.get(player_entity, Health)
        if health is not None:
            health.current = min(health.max, health.current + 1)

    return TurnState.PLAYER_TURN