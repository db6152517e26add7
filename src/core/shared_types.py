"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


class Seat(StrEnum):
    """Which pawn a registered player controls. Player one starts on the top row, player two on the bottom row."""

    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"


class WallOrientation(StrEnum):
    HORIZONTAL = "h"
    VERTICAL = "v"
