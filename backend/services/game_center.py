"""Process-wide registry of signed-in players and their games."""

import logging
import secrets
import threading

from models import Game, Player
from services.player_lobby import PlayerLobby

logger = logging.getLogger(__name__)

# Avoid 0/O, 1/I/l in game IDs so spectate and replay links don't get misread.
_GAME_ID_ALPHABET = "23456789abcdefghjkmnpqrstuvwxyz"
_GAME_ID_LENGTH = 8


class GameCenterError(Exception):
    """A game could not be started; the message is shown on the home page."""


def _generate_game_id() -> str:
    return "".join(secrets.choice(_GAME_ID_ALPHABET) for _ in range(_GAME_ID_LENGTH))


class GameCenter:
    def __init__(self, lobby: PlayerLobby | None = None) -> None:
        self.lobby = lobby or PlayerLobby()
        self._lock = threading.Lock()
        self._games: dict[str, Game] = {}

    # --- players -------------------------------------------------------

    @property
    def total_players(self) -> int:
        return len(self.lobby)

    def sign_in(self, name: str) -> Player:
        return self.lobby.sign_in(name)

    def sign_out(self, player: Player) -> None:
        """Remove a player, resigning the game they are still playing."""
        game = self.game_for(player)
        if game is not None:
            if not game.is_over:
                game.resign(player)
            game.leave(player)
        self.lobby.sign_out(player)

    def get_player(self, name: str | None) -> Player | None:
        return self.lobby.get(name)

    def player_names(self, exclude: str | None = None) -> list[str]:
        return self.lobby.names(exclude=exclude)

    # --- games ---------------------------------------------------------

    def start_game(self, challenger: Player, opponent_name: str) -> Game:
        """Start a game with the challenger playing red."""
        with self._lock:
            opponent = self.lobby.get(opponent_name)
            if opponent is None:
                raise GameCenterError(f"{opponent_name} is not signed in.")
            if opponent == challenger:
                raise GameCenterError("You cannot play against yourself.")
            if self._running_game_for(challenger) is not None:
                raise GameCenterError("You are already playing a game.")
            if self._running_game_for(opponent) is not None:
                raise GameCenterError(f"{opponent.name} is already in a game; choose another opponent.")
            for game in self._games.values():
                for player in (challenger, opponent):
                    if game.has_player(player):
                        game.leave(player)
            game_id = _generate_game_id()
            while game_id in self._games:
                game_id = _generate_game_id()
            game = Game(game_id, red_player=challenger, white_player=opponent)
            self._games[game_id] = game
        logger.info("[game_center] Game %s started: %s vs %s", game_id, challenger.name, opponent.name)
        return game

    def _running_game_for(self, player: Player) -> Game | None:
        for game in self._games.values():
            if game.has_player(player) and not game.is_over:
                return game
        return None

    def game_for(self, player: Player) -> Game | None:
        """The game a player is in and has not yet left, finished or not."""
        with self._lock:
            for game in self._games.values():
                if game.has_player(player) and not game.has_departed(player):
                    return game
        return None

    def leave_game(self, player: Player) -> None:
        game = self.game_for(player)
        if game is not None and game.is_over:
            game.leave(player)
            logger.info("[game_center] %s left finished game %s", player.name, game.id)

    def get_game(self, game_id: str | None) -> Game | None:
        if game_id is None:
            return None
        return self._games.get(game_id)

    def active_games(self) -> list[Game]:
        with self._lock:
            return [g for g in self._games.values() if not g.is_over]

    def finished_games(self) -> list[Game]:
        with self._lock:
            return [g for g in self._games.values() if g.is_over]
