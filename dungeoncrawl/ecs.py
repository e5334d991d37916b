"""A small entity-component store with deferred commands."""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterator, TypeVar

Entity = int
T = TypeVar("T")


class World:
    """Entities as integer ids, each holding at most one component per type."""

    def __init__(self) -> None:
        self._entities: dict[Entity, dict[type, Any]] = {}
        self._ids = itertools.count(1)

    def spawn(self, *args: Any) -> Entity:
        """Create an entity holding the given components and return its id."""
        entity = next(self._ids)
        self._entities[entity] = {type(component): component for component in args}
        return entity

    def despawn(self, entity: Entity) -> bool:
        """Remove an entity; False if it did not exist."""
        return self._entities.pop(entity, None) is not None

    def add_component(self, entity: Entity, component: Any) -> None:
        """Attach a component, replacing any of the same type."""
        try:
            self._entities[entity][type(component)] = component
        except KeyError:
            raise KeyError(f"no such entity: {entity}") from None

    def get(self, entity: Entity, component_type: type[T]) -> T | None:
        """The entity's component of that type, or None if it has none."""
        try:
            components = self._entities[entity]
        except KeyError:
            raise KeyError(f"no such entity: {entity}") from None
        return components.get(component_type)

    def has(self, entity: Entity, component_type: type) -> bool:
        components = self._entities.get(entity)
        return components is not None and component_type in components

    def query(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield (entity, component, ...) for entities holding all given types."""
        for entity, components in list(self._entities.items()):
            if all(t in components for t in args):
                yield (entity, *(components[t] for t in args))

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities


class CommandBuffer:
    """World changes recorded now and applied later by flush."""

    def __init__(self) -> None:
        self._commands: list[Callable[[World], None]] = []

    def __len__(self) -> int:
        return len(self._commands)

    def push(self, *args: Any) -> None:
        self._commands.append(lambda world: world.spawn(*args))

    def remove(self, entity: Entity) -> None:
        self._commands.append(lambda world: world.despawn(entity))

    def add_component(self, entity: Entity, component: Any) -> None:
        def apply(world: World) -> None:
            if entity in world:
                world.add_component(entity, component)

        self._commands.append(apply)

    def flush(self, world: World) -> None:
        """Apply the recorded commands in order and forget them."""
        commands, self._commands = self._commands, []
        for command in commands:
            command(world)