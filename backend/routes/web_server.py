"""
The HTTP interface of WebCheckers: one handler object per (verb, path).

Handlers are registered in table order and the first match wins, so the static
mount goes last. Each handler either renders a template, answers an Ajax call
with a JSON Message, or redirects.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from fastapi import APIRouter, FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from routes.game import GetGameRoute, PostGameRoute
from routes.home import GetHomeRoute
from routes.replay import (
    GetReplayGameRoute,
    GetReplayStopWatchingRoute,
    PostReplayNextTurnRoute,
    PostReplayPreviousTurnRoute,
)
from routes.signin import GetSignInRoute, PostSignInRoute, PostSignOutRoute
from routes.spectator import (
    GetSpectatorGameRoute,
    GetSpectatorStopWatchingRoute,
    PostSpectatorCheckTurnRoute,
)
from routes.turn import PostBackupMove, PostCheckTurn, PostResignGame, PostSubmitTurn, PostValidateMove
from routes.urls import (
    BACKUP_MOVE_URL,
    CHECK_TURN_URL,
    GAME_URL,
    HOME_URL,
    REPLAY_GAME_URL,
    REPLAY_NEXT_TURN_URL,
    REPLAY_PREVIOUS_TURN_URL,
    REPLAY_STOP_WATCHING_URL,
    RESIGN_GAME_URL,
    SIGN_IN_URL,
    SIGN_OUT_URL,
    SPECTATOR_CHECK_TURN_URL,
    SPECTATOR_GAME_URL,
    SPECTATOR_STOP_WATCHING_URL,
    SUBMIT_TURN_URL,
    VALIDATE_MOVE_URL,
)
from routes.views import require_not_none
from services import GameCenter

logger = logging.getLogger(__name__)

RouteEntry = tuple[str, str, Callable]


class WebServer:
    def __init__(
        self,
        game_center: GameCenter,
        templates: Jinja2Templates,
        static_dir: Path | None = None,
    ) -> None:
        self.game_center = require_not_none(game_center, "game_center")
        self.templates = require_not_none(templates, "templates")
        self.static_dir = static_dir
        self.routes: list[RouteEntry] = self._route_table()

    def _route_table(self) -> list[RouteEntry]:
        gc, templates = self.game_center, self.templates
        return [
            ("GET", HOME_URL, GetHomeRoute(gc, templates)),
            ("GET", SIGN_IN_URL, GetSignInRoute(gc, templates)),
            ("GET", GAME_URL, GetGameRoute(gc, templates)),
            ("POST", GAME_URL, PostGameRoute(gc)),
            ("POST", SIGN_IN_URL, PostSignInRoute(gc, templates)),
            ("POST", SIGN_OUT_URL, PostSignOutRoute(gc)),
            ("POST", VALIDATE_MOVE_URL, PostValidateMove(gc)),
            ("POST", CHECK_TURN_URL, PostCheckTurn(gc)),
            ("POST", BACKUP_MOVE_URL, PostBackupMove(gc)),
            ("POST", RESIGN_GAME_URL, PostResignGame(gc)),
            ("POST", SUBMIT_TURN_URL, PostSubmitTurn(gc)),
            ("GET", SPECTATOR_GAME_URL, GetSpectatorGameRoute(gc, templates)),
            ("GET", SPECTATOR_STOP_WATCHING_URL, GetSpectatorStopWatchingRoute()),
            ("POST", SPECTATOR_CHECK_TURN_URL, PostSpectatorCheckTurnRoute(gc)),
            ("GET", REPLAY_GAME_URL, GetReplayGameRoute(gc, templates)),
            ("GET", REPLAY_STOP_WATCHING_URL, GetReplayStopWatchingRoute()),
            ("POST", REPLAY_NEXT_TURN_URL, PostReplayNextTurnRoute(gc)),
            ("POST", REPLAY_PREVIOUS_TURN_URL, PostReplayPreviousTurnRoute(gc)),
        ]

    def handler_for(self, method: str, path: str) -> Callable | None:
        for verb, route_path, handler in self.routes:
            if verb == method.upper() and route_path == path:
                return handler
        return None

    def initialize(self, app: FastAPI) -> None:
        """Register every route on the app, then the static file mount."""
        router = APIRouter(tags=["webcheckers"])
        for method, path, handler in self.routes:
            router.add_api_route(
                path,
                handler,
                methods=[method],
                name=f"{method.lower()}:{path}",
                include_in_schema=False,
            )
        app.include_router(router)
        if self.static_dir is not None:
            app.mount("/static", StaticFiles(directory=self.static_dir), name="static")
        logger.info("[web_server] WebServer is initialized with %d routes.", len(self.routes))
