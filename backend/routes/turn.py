"""Ajax routes used by the game page while playing. Each answers with a JSON Message."""

import logging

from fastapi import Form, Request
from fastapi.responses import Response
from pydantic import ValidationError

from models import Game, Message, Move, Player
from routes.views import NOT_IN_GAME, NOT_SIGNED_IN, current_player, json_message, require_not_none
from services import GameCenter

logger = logging.getLogger(__name__)

GAME_OVER_TEXT = "gameOver"


class _PlayerGameRoute:
    def __init__(self, game_center: GameCenter) -> None:
        self.game_center = require_not_none(game_center, "game_center")

    def _lookup(self, request: Request) -> tuple[Player | None, Game | None, Message | None]:
        player = current_player(request, self.game_center)
        if player is None:
            return None, None, NOT_SIGNED_IN
        game = self.game_center.game_for(player)
        if game is None:
            return player, None, NOT_IN_GAME
        return player, game, None


class PostValidateMove(_PlayerGameRoute):
    def __call__(self, request: Request, actionData: str = Form("")) -> Response:
        player, game, error = self._lookup(request)
        if error is not None:
            return json_message(error)
        try:
            move = Move.model_validate_json(actionData)
        except ValidationError:
            logger.warning("[turn] Malformed move from %s: %.80s", player.name, actionData)
            return json_message(Message.error("Malformed move data."))
        return json_message(game.validate_move(player, move))


class PostCheckTurn(_PlayerGameRoute):
    """Answers "true"/"false" for whose turn it is, or "gameOver" once the game ended."""

    def __call__(self, request: Request) -> Response:
        player, game, error = self._lookup(request)
        if error is not None:
            return json_message(error)
        if game.is_over:
            return json_message(Message.info(GAME_OVER_TEXT))
        return json_message(Message.info("true" if game.check_turn(player) else "false"))


class PostBackupMove(_PlayerGameRoute):
    def __call__(self, request: Request) -> Response:
        player, game, error = self._lookup(request)
        if error is not None:
            return json_message(error)
        return json_message(game.backup_move(player))


class PostSubmitTurn(_PlayerGameRoute):
    def __call__(self, request: Request) -> Response:
        player, game, error = self._lookup(request)
        if error is not None:
            return json_message(error)
        message = game.submit_turn(player)
        if not message.is_error:
            logger.info("[turn] %s submitted turn %d of game %s", player.name, game.turn_number, game.id)
        return json_message(message)


class PostResignGame(_PlayerGameRoute):
    def __call__(self, request: Request) -> Response:
        player, game, error = self._lookup(request)
        if error is not None:
            return json_message(error)
        return json_message(game.resign(player))
