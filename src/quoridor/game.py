"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    IllegalActionError,
    InvalidActionNotationError,
    InvalidNotationError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Seat
from src.quoridor.actions import Action, ActionType
from src.quoridor.notation import state_from_notation, state_to_notation
from src.quoridor.players import Player
from src.quoridor.rules import apply, is_terminal, legal_move_targets, validate, winner
from src.quoridor.state import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_WALLS_PER_PLAYER,
    GameState,
)

logger = logging.getLogger(__name__)


class Status(Enum):
    WAITING_FOR_PLAYERS = auto()
    IN_PROGRESS = auto()
    FINISHED = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    state: GameState
    actions: list[Action]
    history: list[str]  # list of state notations, before every action
    players: dict[Player, str]
    status: Status

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )

        invalid_seats = set(model.registered_players) - {seat.value for seat in Seat}
        if invalid_seats:
            raise GameStateError(
                f"Invalid seat(s): {', '.join(sorted(invalid_seats))}. \nPick one from {','.join(seat.value for seat in Seat)}"
            )

        try:
            actions = [Action.from_notation(notation) for notation in model.actions]
        except InvalidActionNotationError as err:
            raise GameStateError(f"Stored action history is corrupt: {err}") from err

        try:
            state = state_from_notation(model.current_state)
        except InvalidNotationError as err:
            raise GameStateError(f"Stored state is corrupt: {err}") from err

        players = {
            Player.from_seat(Seat(seat)): name
            for seat, name in model.registered_players.items()
        }
        return cls(state, actions, list(model.history), players, Status[status_name])

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            current_state=state_to_notation(self.state),
            history=list(self.history),
            actions=[action.to_notation() for action in self.actions],
            registered_players={
                player.seat.value: name for player, name in self.players.items()
            },
            status=self.status.name.lower().replace("_", " "),
        )

    @classmethod
    def new_game(
        cls,
        player: str,
        seat: Seat = Seat.PLAYER_ONE,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        walls_per_player: int = DEFAULT_WALLS_PER_PLAYER,
    ) -> Self:
        """To start a new game with the player controlling the pawn of the given seat."""
        state = GameState.initial(rows, cols, walls_per_player)
        logger.info("New %sx%s game created by %s (%s)", rows, cols, player, seat)
        return cls(
            state=state,
            actions=[],
            history=[],
            players={Player.from_seat(seat): player},
            status=Status.WAITING_FOR_PLAYERS,
        )

    @classmethod
    def local_game(
        cls,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        walls_per_player: int = DEFAULT_WALLS_PER_PLAYER,
    ) -> Self:
        """Both seats taken at the same keyboard (used by the interactive shell)."""
        game = cls.new_game(Player.ONE.label, Seat.PLAYER_ONE, rows, cols, walls_per_player)
        game.register_player(Player.TWO.label)
        return game

    @property
    def winner(self) -> Optional[str]:
        """Name of the player whose pawn reached its goal row (None while the game is still running)"""
        winning_player = winner(self.state)
        if winning_player is None:
            return None
        return self.players[winning_player]

    @property
    def turn_player(self) -> str:
        return self.players[self.state.turn]

    def register_player(self, player: str) -> None:
        """Registering the 2nd player to an open game"""
        if self.status != Status.WAITING_FOR_PLAYERS:
            raise GameStateError(
                f"Cannot join this game. Game is not accepting new players. status: {self.status}"
            )
        if player in self.players.values():
            raise GameStateError(f"Player {player!r} already registered in this game.")

        taken = next(iter(self.players))
        self.players[taken.opponent] = player
        self._change_status(Status.IN_PROGRESS)
        logger.info("%s joined as %s, game in progress", player, taken.opponent.label)

    def legal_moves(self, player: str) -> list[str]:
        """
        Pawn moves the player could make right now, in action notation.
        ----

        NOTE: wall placements are not enumerated. Almost every anchor is available, so listing them tells a user very little.
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        return [
            Action.move(target.row, target.col).to_notation()
            for target in legal_move_targets(self.state, self.state.turn)
        ]

    def take_action(self, action_notation: str, player: str) -> None:
        """
        Attempt to make a move or place a wall
        -----

        1. make sure the game is running and it is your turn
        2. let the rules engine validate the action (raises IllegalActionError with the reason if rejected)
        3. record the state before the action, then replace it by the next state
        4. update game status (if a pawn reached its goal row)
        """
        self._assert_in_progress()
        self._assert_your_turn(player)

        action = Action.from_notation(action_notation)
        rejection = validate(self.state, action)
        if rejection is not None:
            logger.warning(
                "Rejected %r from %s: %s", action_notation, player, rejection.message
            )
            raise IllegalActionError(rejection)

        self.history.append(state_to_notation(self.state))
        self.state = apply(self.state, action)
        self.actions.append(action)
        logger.info("%s played %r", player, action.to_notation())

        self._update_game_status()

    def walls_placed(self) -> int:
        return sum(1 for action in self.actions if action.type != ActionType.MOVE)

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before listing moves / taking an action."""
        if player != self.turn_player:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {self.turn_player} to make a move first."
            )

    def _update_game_status(self) -> None:
        if is_terminal(self.state):
            self._change_status(Status.FINISHED)
            logger.info("Game over, winner: %s", self.winner)

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
