"""Resources shared by systems, and the ordered system schedules."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Sequence

from dungeoncrawl.ai import chasing, random_move
from dungeoncrawl.camera import Camera
from dungeoncrawl.combat import combat
from dungeoncrawl.draw import DrawBatch
from dungeoncrawl.ecs import CommandBuffer, World
from dungeoncrawl.end_turn import end_turn
from dungeoncrawl.fov import fov
from dungeoncrawl.geometry import Point
from dungeoncrawl.map import Map
from dungeoncrawl.movement import movement
from dungeoncrawl.player_input import Key, player_input
from dungeoncrawl.render import (
    ENTITY_Z,
    HUD_Z,
    MAP_Z,
    TOOLTIP_Z,
    entity_render,
    hud,
    map_render,
    tooltips,
)
from dungeoncrawl.turn_state import TurnState


@dataclass
class Resources:
    """Global game state that systems read and change."""

    map: Map
    camera: Camera
    turn_state: TurnState = TurnState.AWAITING_INPUT
    key: Key | None = None
    mouse_pos: Point = field(default_factory=Point)
    rng: random.Random = field(default_factory=random.Random)
    draw_batches: list[tuple[DrawBatch, int]] = field(default_factory=list)

    def draw(self, batch: DrawBatch, z_order: int) -> None:
        self.draw_batches.append((batch, z_order))

    def take_draw_batches(self) -> list[tuple[DrawBatch, int]]:
        """The queued batches; the queue is left empty."""
        batches, self.draw_batches = self.draw_batches, []
        return batches


System = Callable[[World, CommandBuffer, Resources], None]


class Schedule:
    """Stages of systems; queued commands are applied after each stage."""

    def __init__(self, *stages: Sequence[System]) -> None:
        self.stages = [tuple(stage) for stage in stages]

    def execute(self, world: World, resources: Resources) -> None:
        commands = CommandBuffer()
        for stage in self.stages:
            for system in stage:
                system(world, commands, resources)
            commands.flush(world)


def _player_input(world: World, commands: CommandBuffer, res: Resources) -> None:
    res.turn_state = player_input(world, commands, res.key, res.turn_state)


def _fov(world: World, commands: CommandBuffer, res: Resources) -> None:
    fov(world, res.map)


def _map_render(world: World, commands: CommandBuffer, res: Resources) -> None:
    res.draw(map_render(world, res.map, res.camera), MAP_Z)


def _entity_render(world: World, commands: CommandBuffer, res: Resources) -> None:
    res.draw(entity_render(world, res.camera), ENTITY_Z)


def _hud(world: World, commands: CommandBuffer, res: Resources) -> None:
    res.draw(hud(world), HUD_Z)


def _tooltips(world: World, commands: CommandBuffer, res: Resources) -> None:
    res.draw(tooltips(world, res.mouse_pos, res.camera), TOOLTIP_Z)


def _combat(world: World, commands: CommandBuffer, res: Resources) -> None:
    combat(world, commands)


def _movement(world: World, commands: CommandBuffer, res: Resources) -> None:
    movement(world, commands, res.map, res.camera)


def _end_turn(world: World, commands: CommandBuffer, res: Resources) -> None:
    res.turn_state = end_turn(world, res.turn_state)


def _random_move(world: World, commands: CommandBuffer, res: Resources) -> None:
    random_move(world, commands, res.rng)


def _chasing(world: World, commands: CommandBuffer, res: Resources) -> None:
    chasing(world, commands, res.map)


def build_input_scheduler() -> Schedule:
    return Schedule(
        [_player_input, _fov],
        [_map_render, _entity_render, _hud, _tooltips],
    )


def build_player_scheduler() -> Schedule:
    return Schedule(
        [_combat],
        [_movement],
        [_fov],
        [_map_render, _entity_render, _hud, _end_turn],
    )


def build_monster_scheduler() -> Schedule:
    return Schedule(
        [_random_move, _chasing],
        [_combat],
        [_movement],
        [_fov],
        [_map_render, _entity_render, _hud, _end_turn],
    )