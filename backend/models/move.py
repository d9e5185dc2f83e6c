"""Move wire format. Clients post a Move as JSON in the actionData form field."""

from pydantic import BaseModel, ConfigDict, Field

BOARD_SIZE = 8


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, lt=BOARD_SIZE)
    cell: int = Field(ge=0, lt=BOARD_SIZE)

    def flipped(self) -> "Position":
        return Position(row=BOARD_SIZE - 1 - self.row, cell=BOARD_SIZE - 1 - self.cell)


class Move(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @property
    def row_delta(self) -> int:
        return self.end.row - self.start.row

    @property
    def cell_delta(self) -> int:
        return self.end.cell - self.start.cell

    @property
    def is_diagonal(self) -> bool:
        return abs(self.row_delta) == abs(self.cell_delta)

    @property
    def is_simple(self) -> bool:
        return self.is_diagonal and abs(self.row_delta) == 1

    @property
    def is_jump(self) -> bool:
        return self.is_diagonal and abs(self.row_delta) == 2

    @property
    def jumped(self) -> Position:
        """Space between start and end of a jump."""
        return Position(
            row=(self.start.row + self.end.row) // 2,
            cell=(self.start.cell + self.end.cell) // 2,
        )

    def flipped(self) -> "Move":
        """Same move seen from the other side of the board."""
        return Move(start=self.start.flipped(), end=self.end.flipped())
