from .board import Board, Row, Space
from .game import Game, Snapshot
from .message import Message, MessageType
from .move import BOARD_SIZE, Move, Position
from .piece import Color, Piece, PieceType
from .player import Player

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Row",
    "Space",
    "Game",
    "Snapshot",
    "Message",
    "MessageType",
    "Move",
    "Position",
    "Color",
    "Piece",
    "PieceType",
    "Player",
]
