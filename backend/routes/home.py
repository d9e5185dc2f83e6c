"""Home page: who is online, what can be watched or replayed."""

import logging

from fastapi import Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from models import Message
from routes.urls import GAME_URL
from routes.views import current_player, pop_message, redirect, require_not_none
from services import GameCenter

logger = logging.getLogger(__name__)

WELCOME_MSG = Message.info("Welcome to the world of online Checkers.")
# Signed-in home pages reload so challenged players are sent to their game.
HOME_REFRESH_SECONDS = 5


class GetHomeRoute:
    def __init__(self, game_center: GameCenter, templates: Jinja2Templates) -> None:
        self.game_center = require_not_none(game_center, "game_center")
        self.templates = require_not_none(templates, "templates")

    def __call__(self, request: Request) -> Response:
        logger.debug("[home] GET / called")
        player = current_player(request, self.game_center)
        if player is not None:
            game = self.game_center.game_for(player)
            if game is not None and not game.is_over:
                # Challenged players land here on the next automatic refresh.
                return redirect(GAME_URL)
            self.game_center.leave_game(player)

        context = {
            "title": "Welcome!",
            "refresh_seconds": HOME_REFRESH_SECONDS,
            "current_user": player,
            "message": pop_message(request) or WELCOME_MSG,
            "player_count": self.game_center.total_players,
            "player_names": self.game_center.player_names(exclude=player.name if player else None),
            "active_games": self.game_center.active_games(),
            "finished_games": self.game_center.finished_games(),
        }
        return self.templates.TemplateResponse(request, "home.html", context)
