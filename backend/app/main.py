import logging

import uvicorn
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from app.config import (
    STATIC_DIR,
    TEMPLATES_DIR,
    get_host,
    get_log_level,
    get_port,
    get_session_max_age,
    get_session_secret,
)
from routes.web_server import WebServer
from services import GameCenter, game_center as default_game_center

logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)


def create_app(game_center: GameCenter | None = None) -> FastAPI:
    """Build the WebCheckers app around a game center (the process-wide one by default)."""
    app = FastAPI(title="WebCheckers", version="0.1.0")
    app.add_middleware(
        SessionMiddleware,
        secret_key=get_session_secret(),
        session_cookie="webcheckers_session",
        max_age=get_session_max_age(),
        same_site="lax",
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    templates = Jinja2Templates(directory=TEMPLATES_DIR)
    if game_center is None:
        game_center = default_game_center
    server = WebServer(game_center, templates, static_dir=STATIC_DIR)
    server.initialize(app)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=get_host(), port=get_port(), log_level=get_log_level().lower())
