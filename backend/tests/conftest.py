"""Shared fixtures: a fresh game center per test and cookie-carrying clients."""

import json
from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import create_app
from services import GameCenter


@pytest.fixture
def game_center() -> GameCenter:
    return GameCenter()


@pytest.fixture
def app(game_center: GameCenter) -> FastAPI:
    return create_app(game_center)


@pytest.fixture
def sign_in(app: FastAPI) -> Callable[[str], TestClient]:
    """Return a factory producing a client whose session is signed in as `name`."""

    def _sign_in(name: str) -> TestClient:
        client = TestClient(app)
        response = client.post("/signin", data={"userName": name}, follow_redirects=False)
        assert response.status_code == 302
        return client

    return _sign_in


def move_data(start: tuple[int, int], end: tuple[int, int]) -> dict[str, str]:
    """Form body for the Ajax move routes."""
    move = {
        "start": {"row": start[0], "cell": start[1]},
        "end": {"row": end[0], "cell": end[1]},
    }
    return {"actionData": json.dumps(move)}
