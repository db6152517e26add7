"""
Interactive command loop for two players sharing a keyboard.

Parses text commands, hands them to the Game and prints the board after every accepted action.
Malformed input never ends the session: the player simply gets asked again.

The 'save' command stores the game through the QuoridorService, `quoridor --resume GAME_ID` picks it up again.
"""

import argparse
import logging
from typing import Callable, Optional
from uuid import UUID

from src.cli.renderer import render
from src.core.config import Settings, configure_logging, load_settings
from src.core.exceptions import (
    ConfigurationError,
    GameError,
    IllegalActionError,
    InvalidActionNotationError,
)
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.quoridor.actions import NOTATION_HELP
from src.quoridor.game import Game, Status
from src.quoridor.position import MIN_BOARD_SIDE
from src.services.quoridor_service import QuoridorService

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MIN_RECOMMENDED_SIZE = 5


def parse_board_size(line: Optional[str], default: tuple[int, int]) -> tuple[int, int]:
    """
    'n' --> n x n board (only accepted from 5 upwards)
    'n m' --> n rows, m columns
    anything else (empty, not a number) --> default
    """
    if line is None:
        return default
    parts = line.split()
    try:
        if len(parts) == 1:
            size = int(parts[0])
            if size >= MIN_RECOMMENDED_SIZE:
                return size, size
        elif len(parts) >= 2:
            rows, cols = int(parts[0]), int(parts[1])
            if rows >= MIN_BOARD_SIDE and cols >= MIN_BOARD_SIDE:
                return rows, cols
    except ValueError:
        logger.debug("Could not parse board size %r, using defaults", line)
    return default


class Shell:
    def __init__(
        self,
        settings: Settings,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        service: Optional[QuoridorService] = None,
        game_id: Optional[UUID] = None,
    ) -> None:
        self.settings = settings
        self.input = input_fn
        self.output = output_fn
        self.service = service  # without a service the game lives in memory only ('save' is unavailable)
        self.game_id = game_id

    def _read(self, prompt: str) -> Optional[str]:
        """None once the input is exhausted (end of file / Ctrl-D)"""
        try:
            return self.input(prompt)
        except EOFError:
            return None

    def run(self) -> Optional[str]:
        """Play until someone wins or the players quit. Returns the winner's name (if any)."""
        game = self._start_game()
        if game is None:
            return None
        self.output(render(game.state))

        while game.status == Status.IN_PROGRESS:
            line = self._read(f"{game.turn_player}> ")
            if line is None:
                return None
            command = line.strip()
            if command.lower() == "quit":
                return None
            if command.lower() == "help":
                self.output(self._help())
                continue
            if command.lower() == "save":
                self._save(game)
                continue
            self._handle(game, command)

        self.output(f"Game over! Winner: {game.winner}")
        return game.winner

    def _start_game(self) -> Optional[Game]:
        """Resume the stored game when a game ID was given, otherwise ask for a board size and start a fresh one."""
        if self.game_id is not None:
            return self._resume_game(self.game_id)

        default = (self.settings.rows, self.settings.cols)
        size_line = self._read(
            f"Enter board size 'n m' (rows cols, >={MIN_RECOMMENDED_SIZE} recommended; default {default[0]} {default[1]}): "
        )
        rows, cols = parse_board_size(size_line, default)
        try:
            return Game.local_game(rows, cols, self.settings.walls_per_player)
        except GameError as err:
            self.output(f"Cannot start a game: {err}")
            return None

    def _resume_game(self, game_id: UUID) -> Optional[Game]:
        if self.service is None:
            self.output("Cannot resume a game without storage.")
            return None
        try:
            game = self.service.load_game(game_id)
        except GameError as err:
            self.output(f"Cannot resume game {game_id}: {err}")
            return None
        if game.status == Status.WAITING_FOR_PLAYERS:
            self.output(f"Game {game_id} is still waiting for a second player.")
            return None
        self.output(f"Resumed game {game_id}")
        return game

    def _help(self) -> str:
        if self.service is None:
            return f"{NOTATION_HELP} | quit"
        return f"{NOTATION_HELP} | save | quit"

    def _save(self, game: Game) -> None:
        if self.service is None:
            self.output("Saving is not available.")
            return
        try:
            self.game_id = self.service.save_game(game, self.game_id)
        except GameError as err:
            self.output(f"Save failed: {err}")
        else:
            self.output(f"Saved game {self.game_id}")

    def _handle(self, game: Game, command: str) -> None:
        try:
            game.take_action(command, game.turn_player)
        except InvalidActionNotationError:
            self.output(f"Parse error. Try: {NOTATION_HELP}")
        except IllegalActionError as err:
            self.output(f"Invalid: {err.rejection.message}")
        except GameError as err:
            self.output(f"Invalid: {err}")
        else:
            self.output(render(game.state))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quoridor",
        description="Play Quoridor in the terminal, two players sharing one keyboard.",
    )
    parser.add_argument(
        "--resume",
        type=UUID,
        metavar="GAME_ID",
        help="Continue a game stored earlier with the 'save' command",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database where games are saved (default: QUORIDOR_DATABASE_URL)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ConfigurationError as err:
        parser.exit(2, f"Configuration error: {err}\n")
    configure_logging(settings.log_level)

    db = get_db(args.database_url or settings.database_url)
    session = next(db)
    try:
        service = QuoridorService(SQLGameRepository(session))
        Shell(settings, service=service, game_id=args.resume).run()
    finally:
        db.close()
