"""Signed-in players, keyed by name."""

import logging
import re
import threading

from models import Player

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 24
_NAME_PATTERN = re.compile(r"^[A-Za-z0-9 ]+$")


class SignInError(ValueError):
    """Raised when a name cannot be used to sign in; the message is user-facing."""


class PlayerLobby:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._players: dict[str, Player] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return name in self._players

    @staticmethod
    def validate_name(name: str) -> str:
        """Return the trimmed name, or raise SignInError explaining why it is unusable."""
        name = name.strip()
        if not name:
            raise SignInError("Please enter a name.")
        if len(name) > MAX_NAME_LENGTH:
            raise SignInError(f"Names can be at most {MAX_NAME_LENGTH} characters long.")
        if not _NAME_PATTERN.match(name):
            raise SignInError("Names may only contain letters, digits and spaces.")
        return name

    def sign_in(self, name: str) -> Player:
        name = self.validate_name(name)
        with self._lock:
            if name in self._players:
                raise SignInError(f"The name '{name}' is already taken.")
            player = Player(name)
            self._players[name] = player
        logger.info("[lobby] %s signed in (%d online)", name, len(self._players))
        return player

    def sign_out(self, player: Player) -> bool:
        with self._lock:
            removed = self._players.pop(player.name, None) is not None
        if removed:
            logger.info("[lobby] %s signed out (%d online)", player.name, len(self._players))
        return removed

    def get(self, name: str | None) -> Player | None:
        if name is None:
            return None
        return self._players.get(name)

    def names(self, exclude: str | None = None) -> list[str]:
        with self._lock:
            return sorted(n for n in self._players if n != exclude)
