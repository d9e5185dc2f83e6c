"""Starting a game and viewing it as one of its players."""

import logging

from fastapi import Form, Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from models import Message
from routes.urls import GAME_URL
from routes.views import (
    NOT_IN_GAME,
    NOT_SIGNED_IN,
    ViewMode,
    current_player,
    redirect,
    redirect_home,
    render_game,
    require_not_none,
)
from services import GameCenter, GameCenterError

logger = logging.getLogger(__name__)


class GetGameRoute:
    def __init__(self, game_center: GameCenter, templates: Jinja2Templates) -> None:
        self.game_center = require_not_none(game_center, "game_center")
        self.templates = require_not_none(templates, "templates")

    def __call__(self, request: Request) -> Response:
        player = current_player(request, self.game_center)
        if player is None:
            return redirect_home(request, NOT_SIGNED_IN)
        game = self.game_center.game_for(player)
        if game is None:
            return redirect_home(request, NOT_IN_GAME)

        mode_options = {"isGameOver": game.is_over}
        if game.is_over:
            mode_options["gameOverMessage"] = game.game_over_message
            message = Message.info(game.game_over_message)
        elif game.is_turn_of(player):
            message = Message.info("It is your turn.")
        else:
            message = Message.info(f"Waiting for {game.active_player.name} to move.")
        return render_game(
            self.templates,
            request,
            game,
            viewer=player,
            mode=ViewMode.PLAY,
            mode_options=mode_options,
            board=game.rows_for(player),
            active_color=game.active_color,
            message=message,
        )


class PostGameRoute:
    """Challenge another signed-in player; the challenger plays red."""

    def __init__(self, game_center: GameCenter) -> None:
        self.game_center = require_not_none(game_center, "game_center")

    def __call__(self, request: Request, opponent: str = Form("")) -> Response:
        player = current_player(request, self.game_center)
        if player is None:
            return redirect_home(request, NOT_SIGNED_IN)
        try:
            self.game_center.start_game(player, opponent)
        except GameCenterError as exc:
            logger.info("[game] %s could not challenge %r: %s", player.name, opponent, exc)
            return redirect_home(request, Message.error(str(exc)))
        return redirect(GAME_URL)
