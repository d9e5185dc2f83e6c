"""Stepping through the turns of a finished game."""

import logging

from fastapi import Query, Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from models import Game, Message
from routes.views import (
    NOT_SIGNED_IN,
    REPLAY_GAME_KEY,
    REPLAY_TURN_KEY,
    ViewMode,
    current_player,
    json_message,
    redirect_home,
    render_game,
    require_not_none,
)
from services import GameCenter

logger = logging.getLogger(__name__)


def _replayed_game(request: Request, game_center: GameCenter) -> Game | None:
    game = game_center.get_game(request.session.get(REPLAY_GAME_KEY))
    return game if game is not None and game.is_over else None


class GetReplayGameRoute:
    def __init__(self, game_center: GameCenter, templates: Jinja2Templates) -> None:
        self.game_center = require_not_none(game_center, "game_center")
        self.templates = require_not_none(templates, "templates")

    def __call__(self, request: Request, game_id: str | None = Query(None, alias="gameID")) -> Response:
        player = current_player(request, self.game_center)
        if player is None:
            return redirect_home(request, NOT_SIGNED_IN)
        game = self.game_center.get_game(game_id or request.session.get(REPLAY_GAME_KEY))
        if game is None or not game.is_over:
            return redirect_home(request, Message.error("Only finished games can be replayed."))

        if request.session.get(REPLAY_GAME_KEY) != game.id:
            logger.info("[replay] %s started replaying game %s", player.name, game.id)
            request.session[REPLAY_GAME_KEY] = game.id
            request.session[REPLAY_TURN_KEY] = 0
        last = len(game.history) - 1
        index = min(max(int(request.session.get(REPLAY_TURN_KEY, 0)), 0), last)
        snapshot = game.history[index]
        if index == last:
            message = Message.info(game.game_over_message)
        else:
            message = Message.info(f"Turn {index} of {last}.")
        return render_game(
            self.templates,
            request,
            game,
            viewer=player,
            mode=ViewMode.REPLAY,
            mode_options={"hasNext": index < last, "hasPrevious": index > 0},
            board=snapshot.board.rows(),
            active_color=snapshot.active_color,
            message=message,
        )


class _ReplayStepRoute:
    step = 0

    def __init__(self, game_center: GameCenter) -> None:
        self.game_center = require_not_none(game_center, "game_center")

    def __call__(self, request: Request) -> Response:
        if current_player(request, self.game_center) is None:
            return json_message(NOT_SIGNED_IN)
        game = _replayed_game(request, self.game_center)
        if game is None:
            return json_message(Message.error("You are not replaying a game."))
        index = int(request.session.get(REPLAY_TURN_KEY, 0)) + self.step
        if not 0 <= index < len(game.history):
            return json_message(Message.error("There are no more turns in that direction."))
        request.session[REPLAY_TURN_KEY] = index
        return json_message(Message.info("true"))


class PostReplayNextTurnRoute(_ReplayStepRoute):
    step = 1


class PostReplayPreviousTurnRoute(_ReplayStepRoute):
    step = -1


class GetReplayStopWatchingRoute:
    def __call__(self, request: Request) -> Response:
        request.session.pop(REPLAY_GAME_KEY, None)
        request.session.pop(REPLAY_TURN_KEY, None)
        return redirect_home(request)
