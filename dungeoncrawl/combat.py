"""Resolving attack requests."""

from __future__ import annotations

from dungeoncrawl.components import Health, Player, WantsToAttack
from dungeoncrawl.ecs import CommandBuffer, World


def combat(world: World, commands: CommandBuffer) -> None:
    """Each attack costs its target one health; slain non-players are removed."""
    attacks = [(message, attack.target) for message, attack in world.query(WantsToAttack)]
    for message, target in attacks:
        is_player = world.has(target, Player)
        health = world.get(target, Health)
        if health is not None:
            health.current -= 1
            if health.current < 1 and not is_player:
                commands.remove(target)
        commands.remove(message)