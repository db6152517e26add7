"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Seat, Status, WallOrientation
from src.quoridor.position import MIN_BOARD_SIDE
from src.quoridor.state import DEFAULT_COLS, DEFAULT_ROWS, DEFAULT_WALLS_PER_PLAYER

SeatName = str
PlayerName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_name: str
    seat: Seat = Seat.PLAYER_ONE
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    walls_per_player: int = DEFAULT_WALLS_PER_PLAYER

    @field_validator("rows", "cols")
    @classmethod
    def validate_dimension(cls, value: int) -> int:
        if value < MIN_BOARD_SIDE:
            raise InvalidRequestError(
                f"A board needs at least 2 rows and 2 columns, got {value}."
            )
        return value

    @field_validator("walls_per_player")
    @classmethod
    def validate_walls(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(
                f"Number of walls cannot be negative, got {value}."
            )
        return value


class JoinGameRequest(BaseModel):
    game_id: UUID
    player_name: str


class LegalMovesRequest(BaseModel):
    game_id: UUID
    player_name: str


class MoveRequest(BaseModel):
    game_id: UUID
    player_name: str
    row: int
    col: int

    def to_notation(self) -> str:
        return f"move {self.row} {self.col}"


class WallRequest(BaseModel):
    game_id: UUID
    player_name: str
    orientation: WallOrientation
    row: int
    col: int

    def to_notation(self) -> str:
        return f"wall {self.orientation.value} {self.row} {self.col}"


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[SeatName, PlayerName]
    state: str
    starting_state: str
    action_history: list[str]
    status: Status
    winner: Optional[PlayerName] = None


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player_name: str
    seat: Seat
    legal_moves: list[str]
