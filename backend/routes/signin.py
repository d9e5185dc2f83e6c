"""Sign in and sign out."""

import logging

from fastapi import Form, Request
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from models import Message
from routes.urls import HOME_URL
from routes.views import PLAYER_KEY, current_player, redirect, require_not_none
from services import GameCenter, SignInError

logger = logging.getLogger(__name__)

SIGN_IN_TITLE = "Sign In"
SIGN_IN_MSG = Message.info("Pick a name to play under.")


class GetSignInRoute:
    def __init__(self, game_center: GameCenter, templates: Jinja2Templates) -> None:
        self.game_center = require_not_none(game_center, "game_center")
        self.templates = require_not_none(templates, "templates")

    def __call__(self, request: Request) -> Response:
        if current_player(request, self.game_center) is not None:
            return redirect(HOME_URL)
        return self.templates.TemplateResponse(
            request, "signin.html", {"title": SIGN_IN_TITLE, "message": SIGN_IN_MSG}
        )


class PostSignInRoute:
    def __init__(self, game_center: GameCenter, templates: Jinja2Templates) -> None:
        self.game_center = require_not_none(game_center, "game_center")
        self.templates = require_not_none(templates, "templates")

    def __call__(self, request: Request, userName: str = Form("")) -> Response:
        if current_player(request, self.game_center) is not None:
            return redirect(HOME_URL)
        try:
            player = self.game_center.sign_in(userName)
        except SignInError as exc:
            logger.info("[signin] Rejected name %r: %s", userName, exc)
            return self.templates.TemplateResponse(
                request,
                "signin.html",
                {"title": SIGN_IN_TITLE, "message": Message.error(str(exc)), "user_name": userName},
            )
        request.session[PLAYER_KEY] = player.name
        return redirect(HOME_URL)


class PostSignOutRoute:
    def __init__(self, game_center: GameCenter) -> None:
        self.game_center = require_not_none(game_center, "game_center")

    def __call__(self, request: Request) -> Response:
        player = current_player(request, self.game_center)
        if player is not None:
            self.game_center.sign_out(player)
        request.session.clear()
        return redirect(HOME_URL)
