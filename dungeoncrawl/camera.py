"""The viewport that follows the player."""

from __future__ import annotations

from dataclasses import dataclass

from dungeoncrawl.geometry import Point
from dungeoncrawl.map import DISPLAY_HEIGHT, DISPLAY_WIDTH


@dataclass
class Camera:
    left_x: int
    right_x: int
    top_y: int
    bottom_y: int

    @classmethod
    def centered_on(cls, player_position: Point) -> Camera:
        camera = cls(0, 0, 0, 0)
        camera.on_player_move(player_position)
        return camera

    def on_player_move(self, player_position: Point) -> None:
        self.left_x = player_position.x - DISPLAY_WIDTH // 2
        self.right_x = player_position.x + DISPLAY_WIDTH // 2
        self.top_y = player_position.y - DISPLAY_HEIGHT // 2
        self.bottom_y = player_position.y + DISPLAY_HEIGHT // 2