"""A game of checkers between two signed-in players."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from .board import Board, Row
from .message import Message
from .move import Move
from .piece import Color
from .player import Player

logger = logging.getLogger(__name__)


@dataclass
class Snapshot:
    board: Board
    active_color: Color


@dataclass
class Turn:
    """Moves made so far in the active player's unsubmitted turn."""

    moves: list[Move] = field(default_factory=list)
    crowned: bool = False

    @property
    def last(self) -> Move | None:
        return self.moves[-1] if self.moves else None


class Game:
    def __init__(
        self,
        game_id: str,
        red_player: Player,
        white_player: Player,
        board: Board | None = None,
    ) -> None:
        self.id = game_id
        self.red_player = red_player
        self.white_player = white_player
        self.active_color = Color.RED
        self.board = board or Board.initial()
        self.turn_number = 0
        self.history: list[Snapshot] = [Snapshot(self.board.copy(), self.active_color)]
        self.winner: Player | None = None
        self.game_over_message: str | None = None
        self._turn = Turn()
        self._working = self.board.copy()
        self._departed: set[str] = set()
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Game({self.id!r}, red={self.red_player.name!r}, white={self.white_player.name!r})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.game_over_message is not None

    @property
    def active_player(self) -> Player:
        return self.player_of(self.active_color)

    def player_of(self, color: Color) -> Player:
        return self.red_player if color is Color.RED else self.white_player

    def color_of(self, player: Player) -> Color | None:
        if player == self.red_player:
            return Color.RED
        if player == self.white_player:
            return Color.WHITE
        return None

    def has_player(self, player: Player) -> bool:
        return self.color_of(player) is not None

    def opponent_of(self, player: Player) -> Player:
        color = self.color_of(player)
        if color is None:
            raise ValueError(f"{player.name} is not playing in game {self.id}")
        return self.player_of(color.opponent())

    def is_turn_of(self, player: Player) -> bool:
        return not self.is_over and self.color_of(player) is self.active_color

    def check_turn(self, player: Player) -> bool:
        """True when the player should reload: it is their turn or the game ended."""
        with self._lock:
            return self.is_over or self.is_turn_of(player)

    def has_departed(self, player: Player) -> bool:
        return player.name in self._departed

    def rows_for(self, viewer: Player | None = None) -> list[Row]:
        """Board rows as the viewer sees them; spectators watch from red's side."""
        with self._lock:
            color = self.color_of(viewer) if viewer is not None else None
            board = self._working if color is self.active_color else self.board
            return board.rows(flip=color is Color.WHITE)

    # ------------------------------------------------------------------
    # Turn actions
    # ------------------------------------------------------------------

    def _check_active(self, player: Player) -> Message | None:
        if self.is_over:
            return Message.error("The game is already over.")
        if self.color_of(player) is None:
            return Message.error("You are not playing in this game.")
        if self.color_of(player) is not self.active_color:
            return Message.error("It is not your turn.")
        return None

    def _rule_violation(self, move: Move) -> str | None:
        board = self._working
        piece = board.piece_at(move.start)
        if piece is None or piece.color is not self.active_color:
            return "You can only move your own pieces."
        if board.piece_at(move.end) is not None:
            return "The destination space is occupied."
        if not (move.is_simple or move.is_jump):
            return "Pieces move diagonally one space, or two when jumping."
        if not piece.is_king and move.row_delta * self.active_color.forward < 0:
            return "Single pieces can only move forward."

        last = self._turn.last
        if last is not None:
            if self._turn.crowned:
                return "A newly crowned king ends the turn."
            if not last.is_jump:
                return "You have already moved this turn."
            if move.start != last.end:
                return "Only the jumping piece can keep moving."

        if move.is_jump:
            if move not in board.jumps_from(move.start):
                return "You can only jump over an opponent's piece."
            return None

        if last is not None:
            return "Only jumps can follow a jump."
        if board.has_jump(self.active_color):
            return "A jump is available and must be taken."
        return None

    def validate_move(self, player: Player, move: Move) -> Message:
        """Check a move against the turn so far and, if legal, add it to the turn."""
        with self._lock:
            error = self._check_active(player)
            if error is not None:
                return error
            if self.active_color is Color.WHITE:
                move = move.flipped()
            violation = self._rule_violation(move)
            if violation is not None:
                return Message.error(violation)
            self._turn.crowned = self._working.apply(move)
            self._turn.moves.append(move)
            return Message.info("Valid move.")

    def backup_move(self, player: Player) -> Message:
        """Undo the most recent unsubmitted move."""
        with self._lock:
            error = self._check_active(player)
            if error is not None:
                return error
            if not self._turn.moves:
                return Message.error("There are no moves to back up.")
            moves = self._turn.moves[:-1]
            self._turn = Turn()
            self._working = self.board.copy()
            for move in moves:
                self._turn.crowned = self._working.apply(move)
                self._turn.moves.append(move)
            return Message.info("Move backed up.")

    def submit_turn(self, player: Player) -> Message:
        with self._lock:
            error = self._check_active(player)
            if error is not None:
                return error
            last = self._turn.last
            if last is None:
                return Message.error("You have not made a move yet.")
            if last.is_jump and not self._turn.crowned and self._working.jumps_from(last.end):
                return Message.error("The jumping piece must keep jumping.")

            self.board = self._working
            self.active_color = self.active_color.opponent()
            self.turn_number += 1
            self.history.append(Snapshot(self.board.copy(), self.active_color))
            self._reset_turn()
            self._check_game_over(player)
            return Message.info("Turn submitted.")

    def resign(self, player: Player) -> Message:
        with self._lock:
            if self.is_over:
                return Message.error("The game is already over.")
            if self.color_of(player) is None:
                return Message.error("You are not playing in this game.")
            self._reset_turn()
            self._finish(self.opponent_of(player), f"{player.name} has resigned.")
            return Message.info("You resigned.")

    def leave(self, player: Player) -> None:
        with self._lock:
            self._departed.add(player.name)

    def _reset_turn(self) -> None:
        self._turn = Turn()
        self._working = self.board.copy()

    def _check_game_over(self, mover: Player) -> None:
        next_color = self.active_color
        loser = self.player_of(next_color)
        if self.board.count(next_color) == 0:
            self._finish(mover, f"{mover.name} has captured all of the pieces.")
        elif not self.board.has_move(next_color):
            self._finish(mover, f"{mover.name} has won; {loser.name} has no legal moves left.")

    def _finish(self, winner: Player, message: str) -> None:
        self.winner = winner
        self.game_over_message = message
        logger.info("[game] Game %s over after %d turns: %s", self.id, self.turn_number, message)
