"""Session attribute keys and response helpers shared by the route handlers."""

import json
from enum import Enum
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from models import Color, Game, Message, Player, Row
from routes.urls import HOME_URL
from services import GameCenter

PLAYER_KEY = "playerName"
MESSAGE_KEY = "message"
SPECTATING_KEY = "spectatingGame"
SPECTATOR_TURN_KEY = "spectatorTurn"
REPLAY_GAME_KEY = "replayGame"
REPLAY_TURN_KEY = "replayTurn"

NOT_SIGNED_IN = Message.error("You must sign in first.")
NOT_IN_GAME = Message.error("You are not playing a game.")


class ViewMode(str, Enum):
    PLAY = "PLAY"
    SPECTATOR = "SPECTATOR"
    REPLAY = "REPLAY"


def require_not_none(value: Any, name: str) -> Any:
    if value is None:
        raise ValueError(f"{name} must not be None")
    return value


def current_player(request: Request, game_center: GameCenter) -> Player | None:
    name = request.session.get(PLAYER_KEY)
    player = game_center.get_player(name)
    if name is not None and player is None:
        # Cookie outlived the player (signed out elsewhere or server restarted).
        request.session.pop(PLAYER_KEY, None)
    return player


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


def redirect_home(request: Request, message: Message | None = None) -> RedirectResponse:
    """Redirect home, optionally leaving a message for the next home view."""
    if message is not None:
        request.session[MESSAGE_KEY] = message.model_dump(mode="json")
    return redirect(HOME_URL)


def pop_message(request: Request) -> Message | None:
    data = request.session.pop(MESSAGE_KEY, None)
    return Message.model_validate(data) if data else None


def json_message(message: Message) -> JSONResponse:
    return JSONResponse(message.model_dump(mode="json"))


def render_game(
    templates: Jinja2Templates,
    request: Request,
    game: Game,
    *,
    viewer: Player,
    mode: ViewMode,
    mode_options: dict[str, Any],
    board: list[Row],
    active_color: Color,
    message: Message | None = None,
) -> Response:
    viewer_color = game.color_of(viewer) if mode is ViewMode.PLAY else None
    context = {
        "title": "Game",
        "current_user": viewer,
        "view_mode": mode.value,
        "mode_options_json": json.dumps(mode_options),
        "game_id": game.id,
        "red_player": game.red_player,
        "white_player": game.white_player,
        "active_color": active_color.value,
        "viewer_color": viewer_color.value if viewer_color else None,
        "board": board,
        "message": message,
    }
    return templates.TemplateResponse(request, "game.html", context)
