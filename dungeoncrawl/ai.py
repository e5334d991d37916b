"""Monster behaviour: chasing the player and wandering at random."""

from __future__ import annotations

import random

from dungeoncrawl.components import (
    ChasingPlayer,
    FieldOfView,
    Health,
    MovingRandomly,
    Player,
    WantsToAttack,
    WantsToMove,
)
from dungeoncrawl.ecs import CommandBuffer, Entity, World
from dungeoncrawl.geometry import Point, distance2d
from dungeoncrawl.map import SCREEN_HEIGHT, SCREEN_WIDTH, Map, map_idx
from dungeoncrawl.pathfinding import DijkstraMap

_RANDOM_DELTAS = (Point(-1, 0), Point(1, 0), Point(0, -1))
_LAST_DELTA = Point(0, 1)


def _step_or_attack(
    world: World, commands: CommandBuffer, entity: Entity, destination: Point
) -> None:
    """Attack the player at destination, stay put if anything else with health is there, else move."""
    occupied = False
    for target, target_pos, _ in world.query(Point, Health):
        if target_pos != destination:
            continue
        if world.has(target, Player):
            commands.push(WantsToAttack(attacker=entity, target=target))
        occupied = True
    if not occupied:
        commands.push(WantsToMove(entity=entity, destination=destination))


def chasing(world: World, commands: CommandBuffer, game_map: Map) -> None:
    """Monsters that can see the player step toward it, or attack when adjacent."""
    player = next(world.query(Point, Player), None)
    if player is None:
        raise LookupError("the world holds no player")
    _, player_pos, _ = player

    dijkstra_map = DijkstraMap(
        SCREEN_WIDTH,
        SCREEN_HEIGHT,
        [map_idx(player_pos.x, player_pos.y)],
        game_map,
        1024.0,
    )

    for entity, pos, _, view in world.query(Point, ChasingPlayer, FieldOfView):
        if player_pos not in view.visible_tiles:
            continue
        lowest = dijkstra_map.find_lowest_exit(map_idx(pos.x, pos.y), game_map)
        if lowest is None:
            continue
        if distance2d(pos, player_pos) > 1.2:
            destination = game_map.index_to_point(lowest)
        else:
            destination = player_pos
        _step_or_attack(world, commands, entity, destination)


def random_move(world: World, commands: CommandBuffer, rng: random.Random) -> None:
    """Wandering monsters pick one of the four directions at random."""
    for entity, pos, _ in world.query(Point, MovingRandomly):
        choice = rng.randrange(0, 4)
        delta = _RANDOM_DELTAS[choice] if choice < len(_RANDOM_DELTAS) else _LAST_DELTA
        _step_or_attack(world, commands, entity, pos + delta)