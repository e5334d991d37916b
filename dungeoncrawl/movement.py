"""Applying movement requests."""

from __future__ import annotations

from dungeoncrawl.camera import Camera
from dungeoncrawl.components import FieldOfView, Player, WantsToMove
from dungeoncrawl.ecs import CommandBuffer, World
from dungeoncrawl.map import Map, map_idx


def movement(world: World, commands: CommandBuffer, game_map: Map, camera: Camera) -> None:
    """Move entities onto enterable tiles; the player also moves the camera and reveals the map."""
    for message, wants in list(world.query(WantsToMove)):
        if game_map.can_enter_tile(wants.destination):
            commands.add_component(wants.entity, wants.destination)
            if wants.entity in world:
                view = world.get(wants.entity, FieldOfView)
                if view is not None:
                    commands.add_component(wants.entity, view.clone_dirty())
                    if world.has(wants.entity, Player):
                        camera.on_player_move(wants.destination)
                        for pos in view.visible_tiles:
                            game_map.revealed_tiles[map_idx(pos.x, pos.y)] = True
        commands.remove(message)