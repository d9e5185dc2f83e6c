"""Checkers board stored from red's side: row 0 is white's home row, row 7 red's."""

from __future__ import annotations

from collections.abc import Iterator
from copy import deepcopy
from dataclasses import dataclass, field

from .move import BOARD_SIZE, Move, Position
from .piece import Color, Piece

HOME_ROWS = {
    Color.WHITE: (0, 1, 2),
    Color.RED: (5, 6, 7),
}


def is_dark(row: int, cell: int) -> bool:
    return (row + cell) % 2 == 1


@dataclass
class Space:
    cell_idx: int
    is_valid: bool             # dark space a piece may stand on
    piece: Piece | None = None


@dataclass
class Row:
    index: int
    spaces: list[Space] = field(default_factory=list)


class Board:
    def __init__(self, grid: list[list[Piece | None]] | None = None) -> None:
        self._grid = grid or [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @classmethod
    def initial(cls) -> Board:
        board = cls()
        for color, rows in HOME_ROWS.items():
            for row in rows:
                for cell in range(BOARD_SIZE):
                    if is_dark(row, cell):
                        board._grid[row][cell] = Piece(color)
        return board

    def copy(self) -> Board:
        return Board(deepcopy(self._grid))

    def piece_at(self, pos: Position) -> Piece | None:
        return self._grid[pos.row][pos.cell]

    def place(self, pos: Position, piece: Piece | None) -> None:
        self._grid[pos.row][pos.cell] = piece

    def positions(self, color: Color) -> Iterator[Position]:
        for row in range(BOARD_SIZE):
            for cell in range(BOARD_SIZE):
                piece = self._grid[row][cell]
                if piece is not None and piece.color is color:
                    yield Position(row=row, cell=cell)

    def count(self, color: Color) -> int:
        return sum(1 for _ in self.positions(color))

    def apply(self, move: Move) -> bool:
        """
        Move a piece, removing the piece it jumps over.

        Returns True when the move crowned the piece.
        """
        piece = self.piece_at(move.start)
        if piece is None:
            raise ValueError(f"No piece at {move.start}")
        self.place(move.start, None)
        if move.is_jump:
            self.place(move.jumped, None)
        self.place(move.end, piece)
        if not piece.is_king and move.end.row == piece.color.king_row:
            piece.crown()
            return True
        return False

    def _targets(self, start: Position, distance: int) -> Iterator[Move]:
        piece = self.piece_at(start)
        if piece is None:
            return
        row_steps = (-1, 1) if piece.is_king else (piece.color.forward,)
        for dr in row_steps:
            for dc in (-1, 1):
                row = start.row + dr * distance
                cell = start.cell + dc * distance
                if 0 <= row < BOARD_SIZE and 0 <= cell < BOARD_SIZE:
                    yield Move(start=start, end=Position(row=row, cell=cell))

    def simple_moves_from(self, start: Position) -> list[Move]:
        return [m for m in self._targets(start, 1) if self.piece_at(m.end) is None]

    def jumps_from(self, start: Position) -> list[Move]:
        piece = self.piece_at(start)
        jumps = []
        for move in self._targets(start, 2):
            captured = self.piece_at(move.jumped)
            if (
                self.piece_at(move.end) is None
                and captured is not None
                and captured.color is not piece.color
            ):
                jumps.append(move)
        return jumps

    def has_jump(self, color: Color) -> bool:
        return any(self.jumps_from(pos) for pos in self.positions(color))

    def has_move(self, color: Color) -> bool:
        return any(
            self.jumps_from(pos) or self.simple_moves_from(pos)
            for pos in self.positions(color)
        )

    def rows(self, flip: bool = False) -> list[Row]:
        """Render-ready rows, top of the screen first; flip for the white side."""
        order = range(BOARD_SIZE - 1, -1, -1) if flip else range(BOARD_SIZE)
        rows = []
        for row in order:
            spaces = [
                Space(
                    cell_idx=BOARD_SIZE - 1 - cell if flip else cell,
                    is_valid=is_dark(row, cell),
                    piece=self._grid[row][cell],
                )
                for cell in order
            ]
            rows.append(Row(index=BOARD_SIZE - 1 - row if flip else row, spaces=spaces))
        return rows
