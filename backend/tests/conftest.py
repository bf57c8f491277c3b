"""Shared fixtures: a short BOS (home) vs MIA (away) play-by-play feed."""

import pytest

from schemas.models import ActionRecord

GAME_ID = "0022300061"


def make_actions(raw_actions):
    return [None if raw is None else ActionRecord.model_validate(raw) for raw in raw_actions]


@pytest.fixture
def raw_actions() -> list:
    """Feed-shaped action dicts; scores are strings as in the live feed."""
    return [
        {"actionNumber": 1, "period": 1, "actionType": "period", "subType": "start",
         "scoreHome": "0", "scoreAway": "0"},
        {"actionNumber": 2, "period": 1, "actionType": "jumpball", "subType": "recovered",
         "teamTricode": "MIA", "playerName": "Adebayo", "scoreHome": "0", "scoreAway": "0"},
        {"actionNumber": 3, "period": 1, "actionType": "2pt", "subType": "Jump Shot",
         "shotResult": "Missed", "teamTricode": "MIA", "playerName": "Butler",
         "scoreHome": "0", "scoreAway": "0"},
        {"actionNumber": 4, "period": 1, "actionType": "rebound", "subType": "defensive",
         "teamTricode": "BOS", "playerName": "Tatum", "scoreHome": "0", "scoreAway": "0"},
        {"actionNumber": 5, "period": 1, "actionType": "2pt", "subType": "Layup",
         "shotResult": "Made", "teamTricode": "BOS", "playerName": "Tatum",
         "scoreHome": "2", "scoreAway": "0", "pointsTotal": 2},
        {"actionNumber": 6, "period": 1, "actionType": "turnover", "subType": "bad pass",
         "teamTricode": "MIA", "playerName": "Butler", "scoreHome": "2", "scoreAway": "0"},
        {"actionNumber": 7, "period": 1, "actionType": "steal",
         "teamTricode": "BOS", "playerName": "Brown", "scoreHome": "2", "scoreAway": "0"},
        {"actionNumber": 8, "period": 1, "actionType": "3pt", "subType": "Jump Shot",
         "shotResult": "Made", "teamTricode": "MIA", "playerName": "Herro",
         "scoreHome": "2", "scoreAway": "3", "pointsTotal": 3},
        {"actionNumber": 9, "period": 1, "actionType": "foul", "subType": "personal",
         "teamTricode": "BOS", "playerName": "Tatum", "scoreHome": "2", "scoreAway": "3"},
        {"actionNumber": 10, "period": 1, "actionType": "block",
         "teamTricode": "BOS", "playerName": "Tatum", "scoreHome": "2", "scoreAway": "3"},
        {"actionNumber": 11, "period": 1, "actionType": "3pt", "subType": "Jump Shot",
         "shotResult": "Made", "teamTricode": "BOS", "playerName": "Tatum",
         "scoreHome": "5", "scoreAway": "3", "pointsTotal": 5},
        {"actionNumber": 12, "period": 1, "actionType": "rebound", "subType": "offensive",
         "teamTricode": "MIA", "playerName": "", "scoreHome": "5", "scoreAway": "3"},
        {"actionNumber": 13, "period": 4, "actionType": "game", "subType": "end",
         "scoreHome": "5", "scoreAway": "3"},
    ]


@pytest.fixture
def sample_feed(raw_actions) -> dict:
    return {"meta": {"version": 1}, "game": {"gameId": GAME_ID, "actions": raw_actions}}


@pytest.fixture
def sample_actions(raw_actions) -> list:
    return make_actions(raw_actions)


@pytest.fixture
def unfinished_actions(raw_actions) -> list:
    """Same game with the end-of-game marker not yet in the feed."""
    return make_actions(raw_actions[:-1])
