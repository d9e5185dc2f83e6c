"""In-memory game center shared by every request. Lives for the process lifetime."""

from services.game_center import GameCenter

game_center = GameCenter()
