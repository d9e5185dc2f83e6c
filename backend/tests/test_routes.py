"""Route handlers called directly with a mocked request, session and template engine."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi.responses import RedirectResponse

from models import Message, MessageType
from routes.home import HOME_REFRESH_SECONDS, GetHomeRoute
from routes.replay import GetReplayStopWatchingRoute, PostReplayNextTurnRoute
from routes.signin import GetSignInRoute, PostSignInRoute, PostSignOutRoute
from routes.spectator import GetSpectatorStopWatchingRoute, PostSpectatorCheckTurnRoute
from routes.turn import GAME_OVER_TEXT, PostCheckTurn, PostValidateMove
from routes.views import (
    MESSAGE_KEY,
    PLAYER_KEY,
    REPLAY_GAME_KEY,
    REPLAY_TURN_KEY,
    SPECTATING_KEY,
    SPECTATOR_TURN_KEY,
)
from services import GameCenter


@pytest.fixture
def request_() -> MagicMock:
    request = MagicMock()
    request.session = {}
    return request


@pytest.fixture
def templates() -> MagicMock:
    return MagicMock()


def _rendered(templates: MagicMock) -> tuple[str, dict]:
    _, name, context = templates.TemplateResponse.call_args.args
    return name, context


def _json(response) -> dict:
    return json.loads(response.body)


def test_replay_stop_watching_without_attribute(request_: MagicMock, game_center: GameCenter) -> None:
    """Leaving a replay that was never started still goes home."""
    route = GetReplayStopWatchingRoute()
    response = route(request_)
    assert isinstance(response, RedirectResponse)
    assert response.status_code == 302
    assert response.headers["location"] == "/"
    assert game_center.total_players == 0


def test_replay_stop_watching_clears_only_replay_keys(request_: MagicMock) -> None:
    request_.session.update({PLAYER_KEY: "alice", REPLAY_GAME_KEY: "abc", REPLAY_TURN_KEY: 3})
    GetReplayStopWatchingRoute()(request_)
    assert request_.session == {PLAYER_KEY: "alice"}


def test_spectator_stop_watching_clears_spectating_keys(request_: MagicMock, game_center: GameCenter) -> None:
    """Only the spectating keys are dropped; the player stays signed in."""
    request_.session.update({PLAYER_KEY: "alice", SPECTATING_KEY: "abc", SPECTATOR_TURN_KEY: 2})
    response = GetSpectatorStopWatchingRoute()(request_)
    assert response.headers["location"] == "/"
    assert request_.session == {PLAYER_KEY: "alice"}
    assert game_center.total_players == 0


def test_constructors_reject_none(templates: MagicMock, game_center: GameCenter) -> None:
    """Every handler refuses a missing collaborator."""
    with pytest.raises(ValueError, match="game_center must not be None"):
        GetHomeRoute(None, templates)
    with pytest.raises(ValueError, match="templates must not be None"):
        GetSignInRoute(game_center, None)


def test_home_signed_out_shows_player_count(
    request_: MagicMock, templates: MagicMock, game_center: GameCenter
) -> None:
    game_center.sign_in("alice")
    GetHomeRoute(game_center, templates)(request_)
    name, context = _rendered(templates)
    assert name == "home.html"
    assert context["title"] == "Welcome!"
    assert context["current_user"] is None
    assert context["player_count"] == 1
    assert context["message"].type is MessageType.INFO


def test_home_shows_one_shot_message(request_: MagicMock, templates: MagicMock, game_center: GameCenter) -> None:
    """A flashed message is shown once and then removed from the session."""
    request_.session[MESSAGE_KEY] = {"type": "ERROR", "text": "bob is busy"}
    GetHomeRoute(game_center, templates)(request_)
    _, context = _rendered(templates)
    assert context["message"] == Message.error("bob is busy")
    assert MESSAGE_KEY not in request_.session


def test_home_redirects_player_in_running_game(
    request_: MagicMock, templates: MagicMock, game_center: GameCenter
) -> None:
    """A challenged player is sent to the running game instead of the lobby."""
    alice = game_center.sign_in("alice")
    game_center.sign_in("bob")
    game_center.start_game(alice, "bob")
    request_.session[PLAYER_KEY] = "bob"
    response = GetHomeRoute(game_center, templates)(request_)
    assert response.headers["location"] == "/game"
    templates.TemplateResponse.assert_not_called()


def test_home_drops_stale_player_name(request_: MagicMock, templates: MagicMock, game_center: GameCenter) -> None:
    """A session naming a player who is gone is treated as signed out."""
    request_.session[PLAYER_KEY] = "ghost"
    GetHomeRoute(game_center, templates)(request_)
    _, context = _rendered(templates)
    assert context["current_user"] is None
    assert PLAYER_KEY not in request_.session


def test_sign_in_stores_player_name(request_: MagicMock, templates: MagicMock, game_center: GameCenter) -> None:
    response = PostSignInRoute(game_center, templates)(request_, userName="alice")
    assert response.headers["location"] == "/"
    assert request_.session[PLAYER_KEY] == "alice"
    assert game_center.total_players == 1


def test_sign_in_error_rerenders_form(request_: MagicMock, templates: MagicMock, game_center: GameCenter) -> None:
    """A rejected name renders the form again with an error message."""
    game_center.sign_in("alice")
    PostSignInRoute(game_center, templates)(request_, userName="alice")
    name, context = _rendered(templates)
    assert name == "signin.html"
    assert context["message"].is_error
    assert PLAYER_KEY not in request_.session


def test_sign_out_clears_session(request_: MagicMock, game_center: GameCenter) -> None:
    game_center.sign_in("alice")
    request_.session.update({PLAYER_KEY: "alice", SPECTATING_KEY: "abc"})
    PostSignOutRoute(game_center)(request_)
    assert request_.session == {}
    assert game_center.total_players == 0


def test_validate_move_malformed_data(request_: MagicMock, game_center: GameCenter) -> None:
    """Unparseable move data is answered with an ERROR message."""
    alice = game_center.sign_in("alice")
    game_center.sign_in("bob")
    game_center.start_game(alice, "bob")
    request_.session[PLAYER_KEY] = "alice"
    response = PostValidateMove(game_center)(request_, actionData="{not json")
    assert _json(response) == {"type": "ERROR", "text": "Malformed move data."}


def test_check_turn_requires_game(request_: MagicMock, game_center: GameCenter) -> None:
    """Turn checks need a signed-in player who is in a game."""
    assert _json(PostCheckTurn(game_center)(request_))["type"] == "ERROR"
    game_center.sign_in("alice")
    request_.session[PLAYER_KEY] = "alice"
    assert _json(PostCheckTurn(game_center)(request_))["text"] == "You are not playing a game."


def test_spectator_check_turn_without_game(request_: MagicMock, game_center: GameCenter) -> None:
    game_center.sign_in("carol")
    request_.session[PLAYER_KEY] = "carol"
    response = PostSpectatorCheckTurnRoute(game_center)(request_)
    assert _json(response) == {"type": "ERROR", "text": "You are not watching a game."}


def test_replay_step_without_replay(request_: MagicMock, game_center: GameCenter) -> None:
    game_center.sign_in("carol")
    request_.session[PLAYER_KEY] = "carol"
    response = PostReplayNextTurnRoute(game_center)(request_)
    assert _json(response)["type"] == "ERROR"


def test_home_signed_in_sets_refresh_interval(
    request_: MagicMock, templates: MagicMock, game_center: GameCenter
) -> None:
    """The signed-in home page carries the reload interval to the template."""
    game_center.sign_in("alice")
    request_.session[PLAYER_KEY] = "alice"
    GetHomeRoute(game_center, templates)(request_)
    _, context = _rendered(templates)
    assert context["current_user"].name == "alice"
    assert context["refresh_seconds"] == HOME_REFRESH_SECONDS


def test_check_turn_reports_game_over_to_both_players(request_: MagicMock, game_center: GameCenter) -> None:
    """Once a game ended, both players are told so regardless of whose turn it was."""
    alice = game_center.sign_in("alice")
    bob = game_center.sign_in("bob")
    game = game_center.start_game(alice, "bob")
    request_.session[PLAYER_KEY] = "alice"
    assert _json(PostCheckTurn(game_center)(request_)) == {"type": "INFO", "text": "true"}

    game.resign(bob)
    assert _json(PostCheckTurn(game_center)(request_)) == {"type": "INFO", "text": GAME_OVER_TEXT}
    request_.session[PLAYER_KEY] = "bob"
    assert _json(PostCheckTurn(game_center)(request_)) == {"type": "INFO", "text": GAME_OVER_TEXT}
