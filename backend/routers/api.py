import logging
from fastapi import APIRouter, HTTPException, Path
from config import API_PREFIX
from services.data_loader import load_game_actions
from services.calculations import (
    group_players_by_team,
    get_player_action_types,
    compute_player_stats,
    compute_ratios,
    get_final_score,
    get_winner,
    format_player_results,
    format_game_results,
)
from services.errors import (
    GameDataError,
    NoActionsError,
    PlayerNotFoundError,
    GameNotConcludedError,
    ComputationError,
)
from schemas.models import (
    PlayersByTeamResponse,
    PlayerActionsResponse,
    PlayerResultsResponse,
    GameResultsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX)


def _bad_request(error: GameDataError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(error))


@router.get("/games/{game_id}/players", response_model=PlayersByTeamResponse)
async def get_all_player_names(game_id: str = Path(..., description="NBA game ID")):
    """All players who appear in the game, grouped by Home/Away (or by tricode)."""
    try:
        actions = await load_game_actions(game_id)
    except NoActionsError as e:
        raise _bad_request(e)

    players_by_team = group_players_by_team(actions)
    if not players_by_team:
        raise HTTPException(
            status_code=400,
            detail="There are no actions associated with players in this game",
        )

    return PlayersByTeamResponse(
        game_id=game_id,
        teams={team: sorted(names) for team, names in players_by_team.items()},
    )


@router.get("/games/{game_id}/players/{player_name}/actions", response_model=PlayerActionsResponse)
async def get_actions_by_player_name(
    game_id: str = Path(..., description="NBA game ID"),
    player_name: str = Path(..., description="Player name exactly as it appears in the feed"),
):
    """Distinct action types the player recorded during the game."""
    try:
        actions = await load_game_actions(game_id)
    except NoActionsError as e:
        raise _bad_request(e)

    action_types = get_player_action_types(actions, player_name)
    if not action_types:
        raise _bad_request(PlayerNotFoundError(player_name))

    return PlayerActionsResponse(
        game_id=game_id,
        player_name=player_name,
        actions=sorted(action_types),
    )


@router.get("/games/{game_id}/players/{player_name}/results", response_model=PlayerResultsResponse)
async def get_results_by_player_name(
    game_id: str = Path(..., description="NBA game ID"),
    player_name: str = Path(..., description="Player name exactly as it appears in the feed"),
):
    """
    Points, goals, steals, blocks, rebounds, turnovers and fouls for the player,
    plus two ratios:
    1. Contribution ratio: positive actions vs. negative actions.
    2. Points share: the player's points out of the team's final score.
    """
    try:
        actions = await load_game_actions(game_id)
    except NoActionsError as e:
        raise _bad_request(e)

    stats = compute_player_stats(actions, player_name)
    if not stats.exists:
        raise _bad_request(PlayerNotFoundError(player_name))

    try:
        ratios = compute_ratios(
            stats.points,
            stats.steals,
            stats.blocks,
            stats.rebounds,
            stats.turnovers,
            stats.fouls,
            actions,
            stats.team_tricode,
        )
    except ComputationError as e:
        logger.info(f"Ratios for {player_name} in game {game_id} failed: {e}")
        ratios = None

    if ratios is None:
        raise HTTPException(
            status_code=400,
            detail=f"Ratios for {player_name} are unavailable in this game",
        )

    return PlayerResultsResponse(
        game_id=game_id,
        player_name=player_name,
        team_tricode=stats.team_tricode,
        points=stats.points,
        goals=stats.goals,
        steals=stats.steals,
        blocks=stats.blocks,
        rebounds=stats.rebounds,
        turnovers=stats.turnovers,
        fouls=stats.fouls,
        contribution_ratio=ratios.contribution,
        points_share_ratio=ratios.points_share,
        summary=format_player_results(stats, ratios),
    )


@router.get("/games/{game_id}/results", response_model=GameResultsResponse)
async def get_game_results(game_id: str = Path(..., description="NBA game ID")):
    """The winning side and each team's final score."""
    try:
        actions = await load_game_actions(game_id)
    except NoActionsError as e:
        raise _bad_request(e)

    final_score = get_final_score(actions)
    if final_score is None or final_score.home is None or final_score.away is None:
        raise _bad_request(GameNotConcludedError())

    return GameResultsResponse(
        game_id=game_id,
        winner=get_winner(final_score),
        home_score=final_score.home,
        away_score=final_score.away,
        summary=format_game_results(final_score),
    )
