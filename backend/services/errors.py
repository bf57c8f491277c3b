"""
Error taxonomy for play-by-play derived data.

Every error carries a human-readable message that the API returns as-is.
"""

from typing import Optional


class GameDataError(Exception):
    """Base class for anything that prevents answering a game query."""

    message = "Unable to answer the request for this game"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class NoActionsError(GameDataError):
    """The action sequence for the game is absent or empty."""

    message = "There are no actions"


class FeedUnavailableError(NoActionsError):
    """The upstream feed could not be fetched or parsed."""

    def __init__(self, game_id: str, reason: str):
        self.game_id = game_id
        self.reason = reason
        super().__init__(f"{NoActionsError.message}: {reason}")


class ClassificationFailure(GameDataError):
    message = "Home and away teams could not be resolved"


class PlayerNotFoundError(GameDataError):
    def __init__(self, player_name: str):
        self.player_name = player_name
        super().__init__(f"{player_name} doesn't have associated actions in this game")


class GameNotConcludedError(GameDataError):
    message = "Game didn't end yet"


class ComputationError(GameDataError):
    message = "Ratios could not be computed"
