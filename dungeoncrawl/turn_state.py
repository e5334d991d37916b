"""Whose turn it is, and whether the game has ended."""

from enum import Enum, auto


class TurnState(Enum):
    AWAITING_INPUT = auto()
    PLAYER_TURN = auto()
    MONSTER_TURN = auto()
    GAME_OVER = auto()
    VICTORY = auto()