import os

APP_TITLE = "NBA Play-by-Play API"
APP_DESCRIPTION = "Player and game summaries derived from the NBA live play-by-play feed"
APP_VERSION = "1.0.0"
API_PREFIX = "/api/nba"

NBA_CDN_BASE_URL = os.getenv(
    "NBA_CDN_BASE_URL", "https://cdn.nba.com/static/json/liveData/playbyplay"
).rstrip("/")

# Timeout for a single feed fetch; there is no retry
FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", 30.0))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Shot results and action types as they appear in the live feed
SHOT_MADE = "Made"
GAME_ACTION_TYPE = "game"
GAME_END_SUBTYPE = "end"

# actionType -> PlayerStats counter field
COUNTED_ACTION_TYPES = {
    "steal": "steals",
    "block": "blocks",
    "rebound": "rebounds",
    "turnover": "turnovers",
    "foul": "fouls",
}


def get_playbyplay_url(game_id: str) -> str:
    return f"{NBA_CDN_BASE_URL}/playbyplay_{game_id}.json"
