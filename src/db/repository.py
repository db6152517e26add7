"""
Storage contract for Quoridor games.

The service only talks to this Protocol. SQLGameRepository implements it on top of SQLAlchemy,
the service tests use a dictionary-backed stand-in.
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Stores GameModels (state notation, history, action list, seats, status) keyed by game ID"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """None if no game is stored under this ID"""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a game that has no ID yet. Returns the stored record and the ID assigned to it."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the record after a join, a move or a wall placement. None if the ID is unknown (nothing gets created)."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove the record and return what was stored, or None if the ID is unknown."""
        ...
