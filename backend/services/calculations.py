import logging
from typing import Dict, Optional, Sequence, Set
from config import SHOT_MADE, GAME_ACTION_TYPE, GAME_END_SUBTYPE, COUNTED_ACTION_TYPES
from schemas.models import ActionRecord, FinalScore, PlayerStats, RatioPair, TeamType
from services.errors import ClassificationFailure, ComputationError

logger = logging.getLogger(__name__)

Actions = Sequence[Optional[ActionRecord]]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _home_leads(action: ActionRecord) -> bool:
    if action.score_home is None or action.score_away is None:
        return False
    return action.score_home > action.score_away


def classify_teams(actions: Actions) -> Dict[str, TeamType]:
    """
    Map each team tricode to Home or Away.

    The first team to make a shot while the home score leads is taken as Home;
    the next different tricode seen after that is Away. Returns an empty dict
    when two teams cannot be resolved this way.
    """
    classified: Dict[str, TeamType] = {}
    first_tricode: Optional[str] = None
    for action in actions:
        if action is None or action.team_tricode is None:
            continue
        tricode = action.team_tricode
        if first_tricode is None:
            if action.shot_result == SHOT_MADE and _home_leads(action):
                first_tricode = tricode
                classified[tricode] = TeamType.HOME
        elif tricode != first_tricode:
            classified[tricode] = TeamType.AWAY
            return classified
    return {}


def resolve_team_type(classification: Dict[str, TeamType], tricode: Optional[str]) -> TeamType:
    if not classification or tricode not in classification:
        raise ClassificationFailure(f"No team type for tricode {tricode!r}")
    return classification[tricode]


def group_players_by_team(actions: Actions) -> Dict[str, Set[str]]:
    """
    Distinct player names per team.

    Keys are "Home"/"Away" when the teams could be classified, otherwise the
    raw tricodes. Returns an empty dict if a tricode falls outside a resolved
    classification.
    """
    classification = classify_teams(actions)
    if not classification:
        logger.info("Team classification unavailable, grouping players by tricode")

    players_by_team: Dict[str, Set[str]] = {}
    try:
        for action in actions:
            if action is None:
                continue
            if _is_blank(action.team_tricode) or _is_blank(action.player_name):
                continue
            if classification:
                group_key = resolve_team_type(classification, action.team_tricode).value
            else:
                group_key = action.team_tricode
            players_by_team.setdefault(group_key, set()).add(action.player_name)
    except ClassificationFailure as e:
        logger.warning(f"Dropping player grouping: {e}")
        return {}
    return players_by_team


def get_player_action_types(actions: Actions, player_name: str) -> Set[str]:
    """Distinct action types for an exact (case-sensitive) player name match."""
    return {
        action.action_type
        for action in actions
        if action is not None
        and action.player_name == player_name
        and action.action_type is not None
    }


def compute_player_stats(actions: Actions, player_name: str) -> PlayerStats:
    stats = PlayerStats(player_name=player_name)
    for action in actions:
        if action is None or action.player_name != player_name:
            continue
        stats.exists = True
        stats.team_tricode = action.team_tricode
        if action.shot_result == SHOT_MADE:
            stats.goals += 1
            # pointsTotal is the player's running total, not the shot value
            stats.points = action.points_total or 0
        counter = COUNTED_ACTION_TYPES.get(action.action_type)
        if counter:
            setattr(stats, counter, getattr(stats, counter) + 1)
    return stats


def get_final_score(actions: Actions) -> Optional[FinalScore]:
    """
    Scores from the last "game end" action, scanning backwards.

    Returns None if the game has not ended, or if a missing action is hit
    before the end marker is found.
    """
    for action in reversed(actions):
        if action is None:
            break
        if action.action_type == GAME_ACTION_TYPE and action.sub_type == GAME_END_SUBTYPE:
            return FinalScore(home=action.score_home, away=action.score_away)
    return None


def compute_contribution_ratio(
    points: int, steals: int, blocks: int, rebounds: int, turnovers: int, fouls: int
) -> float:
    positive_gains = points + steals + blocks + rebounds
    negative_actions = turnovers + fouls
    relevant_actions_count = positive_gains + negative_actions
    if relevant_actions_count == 0:
        raise ComputationError("Player has no relevant actions to rate")
    ratio = (positive_gains - negative_actions) / relevant_actions_count
    return round(max(ratio, 0.0), 2)


def compute_ratios(
    points: int,
    steals: int,
    blocks: int,
    rebounds: int,
    turnovers: int,
    fouls: int,
    actions: Actions,
    team_tricode: Optional[str],
) -> Optional[RatioPair]:
    """
    Contribution ratio and the player's share of their team's final score.

    Raises ComputationError when either ratio would divide by zero. Returns
    None when the game has not ended or the player's team cannot be resolved.
    """
    contribution = compute_contribution_ratio(points, steals, blocks, rebounds, turnovers, fouls)

    final_score = get_final_score(actions)
    if final_score is None or final_score.home is None or final_score.away is None:
        return None
    if team_tricode is None:
        return None

    try:
        team_type = resolve_team_type(classify_teams(actions), team_tricode)
    except ClassificationFailure as e:
        logger.info(f"Points share unavailable: {e}")
        return None

    team_score = final_score.home if team_type == TeamType.HOME else final_score.away
    if team_score == 0:
        raise ComputationError(f"{team_tricode} finished without points")

    return RatioPair(
        contribution=contribution,
        points_share=round(points / team_score, 2),
    )


def format_player_results(stats: PlayerStats, ratios: RatioPair) -> str:
    return (
        f"**{stats.player_name} results in this game:**\n"
        f" Total Points: {stats.points}\n Goals: {stats.goals}\n Steals: {stats.steals}\n"
        f" Blocks: {stats.blocks}\n Rebounds: {stats.rebounds}\n\n"
        f" Turn Overs: {stats.turnovers}\n Fouls: {stats.fouls}\n\n"
        f" *Contribution Ratio:* {ratios.contribution}\n"
        f" *Player Points From Team Points:* {ratios.points_share}"
    )


def get_winner(final_score: FinalScore) -> TeamType:
    # A tie cannot end a game; anything not a home lead reads as an away win
    return TeamType.HOME if final_score.home > final_score.away else TeamType.AWAY


def format_game_results(final_score: FinalScore) -> str:
    if get_winner(final_score) == TeamType.HOME:
        return f"Home won!\n Home: {final_score.home} points\n Away: {final_score.away} points"
    return f"Away won!\n Away: {final_score.away} points\n Home: {final_score.home} points"
