"""The game state machine driving schedules and end screens."""

from __future__ import annotations

import random

from dungeoncrawl.camera import Camera
from dungeoncrawl.draw import BLACK, GREEN, RED, WHITE, YELLOW, ColorPair, DrawBatch, Terminal
from dungeoncrawl.ecs import World
from dungeoncrawl.geometry import Point
from dungeoncrawl.map import DISPLAY_HEIGHT, DISPLAY_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from dungeoncrawl.map_builder import MapBuilder
from dungeoncrawl.player_input import Key
from dungeoncrawl.render import TEXT_LAYER
from dungeoncrawl.schedule import (
    Resources,
    build_input_scheduler,
    build_monster_scheduler,
    build_player_scheduler,
)
from dungeoncrawl.spawner import spawn_amulet_of_yala, spawn_monster, spawn_player
from dungeoncrawl.turn_state import TurnState

LAYER_SIZES = (
    (DISPLAY_WIDTH, DISPLAY_HEIGHT),
    (DISPLAY_WIDTH, DISPLAY_HEIGHT),
    (SCREEN_WIDTH * 2, SCREEN_HEIGHT * 2),
)

_GAME_OVER_LINES = (
    (2, RED, "Your quest has ended."),
    (4, WHITE, "Slain by a monster, your hero's journey has come to a premature end."),
    (5, WHITE, "The Amulet of Yala remains unclaimed, and your home town is not saved."),
    (8, YELLOW, "Don't worry, you can always try again with a new hero."),
    (9, GREEN, "Press 1 to play again."),
)

_VICTORY_LINES = (
    (2, GREEN, "You have won!"),
    (4, WHITE, "You put on the Amulet of Yala and feel its power course through your veins."),
    (5, WHITE, "Your town is saved, and you can return to your normal life."),
    (7, GREEN, "Press 1 to play again."),
)


class State:
    """A running game: the world, its resources and the three schedules."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.input_systems = build_input_scheduler()
        self.player_systems = build_player_scheduler()
        self.monster_systems = build_monster_scheduler()
        self.reset_game_state()

    def reset_game_state(self) -> None:
        """Start over with a freshly generated dungeon."""
        self.world = World()
        builder = MapBuilder(self.rng)
        spawn_player(self.world, builder.player_start)
        spawn_amulet_of_yala(self.world, builder.amulet_start)
        for room in builder.rooms[1:]:
            spawn_monster(self.world, self.rng, room.center())
        self.resources = Resources(
            map=builder.map,
            camera=Camera.centered_on(builder.player_start),
            turn_state=TurnState.AWAITING_INPUT,
            rng=self.rng,
        )

    def _end_screen(self, terminal: Terminal, key: Key | None, lines) -> None:
        batch = DrawBatch(TEXT_LAYER)
        for y, colour, text in lines:
            batch.print_color_centered(y, text, ColorPair(colour, BLACK))
        terminal.submit(batch, 0)
        if key is Key.KEY1:
            self.reset_game_state()

    def game_over(self, terminal: Terminal, key: Key | None) -> None:
        self._end_screen(terminal, key, _GAME_OVER_LINES)

    def victory(self, terminal: Terminal, key: Key | None) -> None:
        self._end_screen(terminal, key, _VICTORY_LINES)

    def tick(self, terminal: Terminal, key: Key | None, mouse_pos: Point) -> None:
        """Run one frame: the schedule for the current turn, then draw."""
        terminal.cls()
        self.resources.key = key
        self.resources.mouse_pos = mouse_pos

        match self.resources.turn_state:
            case TurnState.AWAITING_INPUT:
                self.input_systems.execute(self.world, self.resources)
            case TurnState.PLAYER_TURN:
                self.player_systems.execute(self.world, self.resources)
            case TurnState.MONSTER_TURN:
                self.monster_systems.execute(self.world, self.resources)
            case TurnState.GAME_OVER:
                self.game_over(terminal, key)
            case TurnState.VICTORY:
                self.victory(terminal, key)

        for batch, z_order in self.resources.take_draw_batches():
            terminal.submit(batch, z_order)
        terminal.render()