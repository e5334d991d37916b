import pytest

from dungeoncrawl.components import Enemy, Health, Name, Player
from dungeoncrawl.ecs import CommandBuffer, World
from dungeoncrawl.geometry import Point


def test_spawn_and_get():
    world = World()
    e = world.spawn(Player(), Point(1, 2), Health(10, 10))
    assert e in world
    assert world.get(e, Point) == Point(1, 2)
    assert world.get(e, Name) is None
    assert world.has(e, Player)
    assert not world.has(e, Enemy)


def test_spawn_gives_distinct_ids():
    world = World()
    ids = [world.spawn() for _ in range(5)]
    assert len(set(ids)) == 5


def test_get_missing_entity_raises():
    with pytest.raises(KeyError):
        World().get(99, Point)


def test_despawn():
    world = World()
    e = world.spawn(Point(0, 0))
    assert world.despawn(e) is True
    assert e not in world
    assert world.despawn(e) is False
    assert not world.has(e, Point)


def test_add_component_replaces():
    world = World()
    e = world.spawn(Point(0, 0))
    world.add_component(e, Point(5, 5))
    world.add_component(e, Name("Orc"))
    assert world.get(e, Point) == Point(5, 5)
    assert world.get(e, Name) == Name("Orc")
    with pytest.raises(KeyError):
        world.add_component(12345, Point(0, 0))


def test_query_filters_and_keeps_order():
    world = World()
    p = world.spawn(Player(), Point(1, 1))
    a = world.spawn(Enemy(), Point(2, 2))
    b = world.spawn(Enemy(), Point(3, 3), Health(1, 1))
    assert [row[0] for row in world.query(Enemy, Point)] == [a, b]
    assert list(world.query(Player, Point)) == [(p, Player(), Point(1, 1))]
    assert [row[0] for row in world.query(Health)] == [b]


def test_query_allows_mutation_while_iterating():
    world = World()
    for _ in range(3):
        world.spawn(Enemy())
    for entity, _ in world.query(Enemy):
        world.despawn(entity)
    assert list(world.query(Enemy)) == []


def test_command_buffer_defers_until_flush():
    world = World()
    e = world.spawn(Point(0, 0))
    commands = CommandBuffer()
    commands.push(Name("Goblin"))
    commands.add_component(e, Point(4, 4))
    assert world.get(e, Point) == Point(0, 0)
    assert len(commands) == 2
    commands.flush(world)
    assert len(commands) == 0
    assert world.get(e, Point) == Point(4, 4)
    assert [row[1] for row in world.query(Name)] == [Name("Goblin")]


def test_command_buffer_double_remove_and_late_add_are_safe():
    world = World()
    e = world.spawn(Health(1, 1))
    commands = CommandBuffer()
    commands.remove(e)
    commands.remove(e)
    commands.add_component(e, Point(1, 1))
    commands.flush(world)
    assert e not in world
    assert list(world.query(Point)) == []