"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JoinGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    WallRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.db.repository import GameRepository
from src.quoridor.game import Game

logger = logging.getLogger(__name__)


class QuoridorService:
    """Orchestration of layers for a game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """First player requested to create a new game."""

        new_game = Game.new_game(
            player=request.player_name,
            seat=request.seat,
            rows=request.rows,
            cols=request.cols,
            walls_per_player=request.walls_per_player,
        )
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def join_game(self, request: JoinGameRequest) -> GameResponse:
        """Second player requested to join a game."""

        game = Game.from_model(self._fetch_game(request.game_id))
        game.register_player(request.player_name)
        return self._store(request.game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        winner = Game.from_model(game_model).winner
        return self._create_game_response(request.game_id, game_model, winner)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal pawn moves."""

        game = Game.from_model(self._fetch_game(request.game_id))
        legal_moves = game.legal_moves(request.player_name)
        return LegalMovesResponse(
            game_id=request.game_id,
            player_name=request.player_name,
            seat=next(
                player.seat
                for player, name in game.players.items()
                if name == request.player_name
            ),
            legal_moves=legal_moves,
        )

    def move_pawn(self, request: MoveRequest) -> GameResponse:
        """Move attempt. Rejections surface as IllegalActionError (nothing gets stored)."""
        return self._take_action(request.game_id, request.player_name, request.to_notation())

    def place_wall(self, request: WallRequest) -> GameResponse:
        """Wall placement attempt. Rejections surface as IllegalActionError (nothing gets stored)."""
        return self._take_action(request.game_id, request.player_name, request.to_notation())

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Local play (interactive shell) --
    def save_game(self, game: Game, game_id: UUID | None = None) -> UUID:
        """Store a game played at the keyboard. Creates a record on the first save, overwrites it afterwards."""
        model = game.to_model()
        if game_id is None:
            _, game_id = self.repo.create_game(model)
            logger.info("Saved new game %s", game_id)
            return game_id
        if self.repo.update_game(game_id, model) is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        logger.info("Saved game %s", game_id)
        return game_id

    def load_game(self, game_id: UUID) -> Game:
        """Rebuild a stored game (to resume it at the keyboard)."""
        return Game.from_model(self._fetch_game(game_id))

    # -- Internal helpers --
    def _take_action(self, game_id: UUID, player_name: str, notation: str) -> GameResponse:
        game = Game.from_model(self._fetch_game(game_id))
        game.take_action(notation, player_name)
        return self._store(game_id, game)

    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        """Capture updated state in GameModel, persist it and build the response"""
        model = game.to_model()
        self.repo.update_game(game_id, model)
        return self._create_game_response(game_id, model, game.winner)

    def _create_game_response(
        self, game_id: UUID, model: GameModel, winner: str | None = None
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""

        # Before the first action, the starting state equals the current state. Otherwise it is the first recorded state in history.
        starting_state = model.history[0] if model.history else model.current_state
        return GameResponse(
            game_id=game_id,
            players=model.registered_players,
            state=model.current_state,
            starting_state=starting_state,
            action_history=model.actions,
            status=Status(model.status),
            winner=winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
