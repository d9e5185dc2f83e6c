import pytest
from pydantic import ValidationError

from models import Board, Color, Message, MessageType, Move, Piece, PieceType, Player, Position


def _pos(row: int, cell: int) -> Position:
    return Position(row=row, cell=cell)


def test_initial_board_layout() -> None:
    """Twelve pieces per side on the dark squares of the outer three rows."""
    board = Board.initial()
    assert board.count(Color.RED) == 12
    assert board.count(Color.WHITE) == 12
    assert all(p.row in (5, 6, 7) for p in board.positions(Color.RED))
    assert all(p.row in (0, 1, 2) for p in board.positions(Color.WHITE))
    assert all((p.row + p.cell) % 2 == 1 for p in board.positions(Color.RED))
    assert board.piece_at(_pos(3, 0)) is None


def test_color_directions() -> None:
    assert Color.RED.opponent() is Color.WHITE
    assert Color.RED.forward == -1
    assert Color.WHITE.forward == 1
    assert Color.WHITE.king_row == 7


def test_apply_jump_removes_captured_piece() -> None:
    """Applying a jump clears the square that was jumped."""
    board = Board()
    board.place(_pos(5, 2), Piece(Color.RED))
    board.place(_pos(4, 3), Piece(Color.WHITE))
    crowned = board.apply(Move(start=_pos(5, 2), end=_pos(3, 4)))
    assert crowned is False
    assert board.piece_at(_pos(4, 3)) is None
    assert board.piece_at(_pos(3, 4)).color is Color.RED


def test_apply_crowns_on_far_row() -> None:
    """A single reaching the far row becomes a king."""
    board = Board()
    board.place(_pos(6, 1), Piece(Color.WHITE))
    assert board.apply(Move(start=_pos(6, 1), end=_pos(7, 0))) is True
    assert board.piece_at(_pos(7, 0)).type is PieceType.KING


def test_kings_move_backwards() -> None:
    board = Board()
    board.place(_pos(4, 3), Piece(Color.RED, PieceType.KING))
    ends = {(m.end.row, m.end.cell) for m in board.simple_moves_from(_pos(4, 3))}
    assert ends == {(3, 2), (3, 4), (5, 2), (5, 4)}


def test_copy_is_independent() -> None:
    """Changes to a copied board do not leak into the original."""
    board = Board.initial()
    clone = board.copy()
    clone.apply(Move(start=_pos(5, 0), end=_pos(4, 1)))
    assert board.piece_at(_pos(5, 0)) is not None
    assert clone.piece_at(_pos(5, 0)) is None


def test_rows_flip_for_white_side() -> None:
    """White sees the board rotated so its own pieces are at the bottom."""
    board = Board.initial()
    red_view = board.rows()
    white_view = board.rows(flip=True)
    assert [r.index for r in white_view] == list(range(8))
    assert red_view[7].spaces[0].piece.color is Color.RED
    assert white_view[7].spaces[0].piece.color is Color.WHITE
    assert white_view[7].spaces[0].cell_idx == 0
    assert white_view[0].spaces[0].is_valid is False


def test_move_geometry() -> None:
    jump = Move(start=_pos(5, 2), end=_pos(3, 4))
    assert jump.is_jump and not jump.is_simple
    assert jump.jumped == _pos(4, 3)
    assert jump.flipped() == Move(start=_pos(2, 5), end=_pos(4, 3))
    assert not Move(start=_pos(5, 2), end=_pos(5, 4)).is_diagonal


def test_move_parses_wire_json() -> None:
    """The camelCase JSON posted by the game page parses into a Move."""
    move = Move.model_validate_json('{"start": {"row": 5, "cell": 0}, "end": {"row": 4, "cell": 1}}')
    assert move.start == _pos(5, 0)


def test_position_rejects_off_board() -> None:
    with pytest.raises(ValidationError):
        Position(row=8, cell=0)


def test_message_serialization() -> None:
    message = Message.error("nope")
    assert message.is_error
    assert message.model_dump(mode="json") == {"type": "ERROR", "text": "nope"}
    assert Message.info("ok").type is MessageType.INFO


def test_players_compare_by_name() -> None:
    """Players are equal when their names are."""
    assert Player("alice") == Player("alice")
    assert len({Player("alice"), Player("alice")}) == 1
