"""Watching someone else's game while it is being played."""

import logging

from fastapi import Query, Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from models import Message
from routes.urls import GAME_URL
from routes.views import (
    NOT_SIGNED_IN,
    SPECTATING_KEY,
    SPECTATOR_TURN_KEY,
    ViewMode,
    current_player,
    json_message,
    redirect,
    redirect_home,
    render_game,
    require_not_none,
)
from services import GameCenter

logger = logging.getLogger(__name__)


class GetSpectatorGameRoute:
    def __init__(self, game_center: GameCenter, templates: Jinja2Templates) -> None:
        self.game_center = require_not_none(game_center, "game_center")
        self.templates = require_not_none(templates, "templates")

    def __call__(self, request: Request, game_id: str | None = Query(None, alias="gameID")) -> Response:
        player = current_player(request, self.game_center)
        if player is None:
            return redirect_home(request, NOT_SIGNED_IN)
        playing = self.game_center.game_for(player)
        if playing is not None and not playing.is_over:
            return redirect(GAME_URL)

        game = self.game_center.get_game(game_id or request.session.get(SPECTATING_KEY))
        if game is None or game.is_over:
            request.session.pop(SPECTATING_KEY, None)
            request.session.pop(SPECTATOR_TURN_KEY, None)
            text = "That game has ended." if game is not None else "That game does not exist."
            return redirect_home(request, Message.info(text))

        if request.session.get(SPECTATING_KEY) != game.id:
            logger.info("[spectator] %s started watching game %s", player.name, game.id)
        request.session[SPECTATING_KEY] = game.id
        request.session[SPECTATOR_TURN_KEY] = game.turn_number
        return render_game(
            self.templates,
            request,
            game,
            viewer=player,
            mode=ViewMode.SPECTATOR,
            mode_options={"isGameOver": False},
            board=game.rows_for(None),
            active_color=game.active_color,
            message=Message.info(f"Watching {game.red_player.name} vs {game.white_player.name}."),
        )


class PostSpectatorCheckTurnRoute:
    """Tell a spectator whether the board changed since their page was rendered."""

    def __init__(self, game_center: GameCenter) -> None:
        self.game_center = require_not_none(game_center, "game_center")

    def __call__(self, request: Request) -> Response:
        if current_player(request, self.game_center) is None:
            return json_message(NOT_SIGNED_IN)
        game = self.game_center.get_game(request.session.get(SPECTATING_KEY))
        if game is None:
            return json_message(Message.error("You are not watching a game."))
        if game.is_over or game.turn_number != request.session.get(SPECTATOR_TURN_KEY):
            request.session[SPECTATOR_TURN_KEY] = game.turn_number
            return json_message(Message.info("true"))
        return json_message(Message.info("false"))


class GetSpectatorStopWatchingRoute:
    def __call__(self, request: Request) -> Response:
        request.session.pop(SPECTATING_KEY, None)
        request.session.pop(SPECTATOR_TURN_KEY, None)
        return redirect_home(request)
