"""Unit tests for /src/quoridor/game.py"""

import pytest

from src.core.exceptions import (
    GameStateError,
    IllegalActionError,
    InvalidActionNotationError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Seat
from src.quoridor.game import Game, Status
from src.quoridor.players import Player
from src.quoridor.position import Position
from src.quoridor.rules import RejectionReason
from src.quoridor.state import GameState

STARTING_STATE = "9x9 - - 0,4/8,4 10/10 1"


@pytest.fixture
def running_game() -> Game:
    game = Game.new_game(player="alice", seat=Seat.PLAYER_ONE)
    game.register_player("bob")
    return game


# -- CREATION LOGIC --
def test_game_creation_from_model_roundtrip() -> None:
    expected_model = GameModel(
        current_state="9x9 7.3 2.5 1,4/8,4 9/9 1",
        history=["9x9 - - 0,4/8,4 10/10 1", "9x9 - - 1,4/8,4 10/10 2", "9x9 7.3 - 1,4/8,4 10/9 1"],
        actions=["move 1 4", "wall h 7 3", "wall v 2 5"],
        registered_players={"player_one": "alice", "player_two": "bob"},
        status="in progress",
    )
    game = Game.from_model(expected_model)
    assert game.to_model() == expected_model


def test_game_from_model_builds_domain_objects() -> None:
    model = GameModel(
        current_state=STARTING_STATE,
        history=[],
        actions=[],
        registered_players={"player_two": "bob"},
        status="waiting_for_players",
    )
    game = Game.from_model(model)
    assert isinstance(game.state, GameState)
    assert game.status == Status.WAITING_FOR_PLAYERS
    assert game.players == {Player.TWO: "bob"}


def test_invalid_status_name() -> None:
    model = GameModel(
        current_state=STARTING_STATE,
        history=[],
        actions=[],
        registered_players={"player_one": "alice"},
        status="not_existing",
    )
    with pytest.raises(GameStateError):
        _ = Game.from_model(model)


@pytest.mark.parametrize(
    "field, corrupt_value",
    [
        ("registered_players", {"player_three": "carol"}),
        ("actions", ["fly 3 3"]),
        ("current_state", "9x9 - - 0,4/0,4 10/10 1"),
        ("current_state", "not a state"),
    ],
)
def test_corrupt_record_raises_game_state_error(field: str, corrupt_value: object) -> None:
    record = {
        "current_state": STARTING_STATE,
        "history": [],
        "actions": [],
        "registered_players": {"player_one": "alice"},
        "status": "waiting for players",
    }
    record[field] = corrupt_value
    with pytest.raises(GameStateError):
        _ = Game.from_model(GameModel(**record))


@pytest.mark.parametrize("seat", list(Seat))
def test_creating_new_game(seat: Seat) -> None:
    game = Game.new_game(player="alice", seat=seat, rows=7, cols=5, walls_per_player=4)
    assert game.state == GameState.initial(7, 5, 4)
    assert game.actions == []
    assert game.history == []
    assert game.players == {Player.from_seat(seat): "alice"}
    assert game.status == Status.WAITING_FOR_PLAYERS


# -- REGISTERING PLAYERS --
def test_second_player_takes_other_seat() -> None:
    game = Game.new_game(player="alice", seat=Seat.PLAYER_TWO)
    game.register_player("bob")
    assert game.players == {Player.TWO: "alice", Player.ONE: "bob"}
    assert game.status == Status.IN_PROGRESS


def test_cannot_join_running_game(running_game: Game) -> None:
    with pytest.raises(GameStateError):
        running_game.register_player("carol")


def test_cannot_play_against_yourself() -> None:
    game = Game.new_game(player="alice")
    with pytest.raises(GameStateError):
        game.register_player("alice")


def test_local_game_has_both_seats_taken() -> None:
    game = Game.local_game(5, 5, 3)
    assert game.players == {Player.ONE: "P1", Player.TWO: "P2"}
    assert game.status == Status.IN_PROGRESS
    assert game.state.walls_left(Player.TWO) == 3


# -- TAKING ACTIONS --
def test_take_action_updates_everything(running_game: Game) -> None:
    running_game.take_action("move 1 4", "alice")

    assert running_game.state.pawn(Player.ONE) == Position(1, 4)
    assert running_game.history == [STARTING_STATE]
    assert [action.to_notation() for action in running_game.actions] == ["move 1 4"]
    assert running_game.turn_player == "bob"

    running_game.take_action("wall h 7 3", "bob")
    assert running_game.state.walls_left(Player.TWO) == 9
    assert running_game.turn_player == "alice"
    assert running_game.walls_placed() == 1
    assert len(running_game.history) == 2


def test_not_your_turn(running_game: Game) -> None:
    with pytest.raises(NotYourTurnError):
        running_game.take_action("move 7 4", "bob")
    with pytest.raises(NotYourTurnError):
        running_game.legal_moves("bob")


def test_game_not_started() -> None:
    game = Game.new_game(player="alice")
    with pytest.raises(GameStateError):
        game.take_action("move 1 4", "alice")
    with pytest.raises(GameStateError):
        game.legal_moves("alice")


def test_illegal_action_carries_reason(running_game: Game) -> None:
    with pytest.raises(IllegalActionError) as exc_info:
        running_game.take_action("move 2 4", "alice")
    assert exc_info.value.rejection.reason == RejectionReason.ILLEGAL_ADJACENCY

    # nothing changed, still alice's turn
    assert running_game.history == []
    assert running_game.actions == []
    assert running_game.turn_player == "alice"


def test_malformed_action(running_game: Game) -> None:
    with pytest.raises(InvalidActionNotationError):
        running_game.take_action("jump over", "alice")


def test_legal_moves(running_game: Game) -> None:
    assert running_game.legal_moves("alice") == ["move 0 3", "move 0 5", "move 1 4"]


# -- END OF GAME --
def test_game_finishes_when_goal_row_reached() -> None:
    model = GameModel(
        current_state="5x5 - - 3,2/1,0 3/3 1",
        history=[],
        actions=[],
        registered_players={"player_one": "alice", "player_two": "bob"},
        status="in progress",
    )
    game = Game.from_model(model)
    assert game.winner is None

    game.take_action("move 4 2", "alice")
    assert game.status == Status.FINISHED
    assert game.winner == "alice"
    assert game.to_model().status == "finished"

    with pytest.raises(GameStateError):
        game.take_action("move 0 0", "bob")
