import logging
import httpx
from pydantic import ValidationError
from typing import List, Optional
from config import FETCH_TIMEOUT_SECONDS, get_playbyplay_url
from schemas.models import ActionRecord, PlayByPlayFeed
from services.errors import FeedUnavailableError, NoActionsError

logger = logging.getLogger(__name__)


async def fetch_json(url: str) -> dict:
    """GET a JSON document. Raises httpx errors and ValueError on bad JSON."""
    async with httpx.AsyncClient(timeout=FETCH_TIMEOUT_SECONDS) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.json()


async def load_game_actions(game_id: str) -> List[Optional[ActionRecord]]:
    """
    Fetch the play-by-play feed for a game and return its actions in feed order.

    Any fetch or parse problem raises FeedUnavailableError; a feed without
    actions raises NoActionsError. Nothing is cached between calls.
    """
    url = get_playbyplay_url(game_id)
    try:
        payload = await fetch_json(url)
    except httpx.InvalidURL as e:
        logger.warning(f"Game id {game_id!r} does not form a valid feed URL: {e}")
        raise FeedUnavailableError(game_id, "Invalid game id") from e
    except httpx.HTTPStatusError as e:
        logger.warning(f"Feed for game {game_id} returned {e.response.status_code}")
        raise FeedUnavailableError(
            game_id, f"Failed to fetch data from NBA API: {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        logger.warning(f"Feed for game {game_id} unreachable: {e}")
        raise FeedUnavailableError(game_id, "NBA API is unreachable") from e
    except ValueError as e:
        logger.warning(f"Feed for game {game_id} is not valid JSON: {e}")
        raise FeedUnavailableError(game_id, "NBA API returned malformed data") from e

    try:
        feed = PlayByPlayFeed.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Feed for game {game_id} failed validation: {e.error_count()} errors")
        raise FeedUnavailableError(game_id, "NBA API returned malformed data") from e

    actions = feed.game.actions if feed.game else None
    if not actions:
        raise NoActionsError()

    logger.debug(f"Loaded {len(actions)} actions for game {game_id}")
    return actions
