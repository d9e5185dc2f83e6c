from .game_center import GameCenter, GameCenterError
from .player_lobby import PlayerLobby, SignInError
from .store import game_center

__all__ = ["game_center", "GameCenter", "GameCenterError", "PlayerLobby", "SignInError"]
