from typing import Dict, Iterable, List, Optional

from loguru import logger

from league.models.game import Game
from league.models.standing import Standing

WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0


def compute_standings(
    games: Iterable[Game],
    *,
    win_points: int = WIN_POINTS,
    draw_points: int = DRAW_POINTS,
    loss_points: int = LOSS_POINTS,
) -> List[Standing]:
    """
    Aggregates game results into a ranked list of standings.

    Teams are ordered by points descending and then by name, compared
    case-insensitively. Teams with the same points share a rank, and the next
    points total is ranked by its position in the sorted list, so a block of
    N teams tied at rank R is followed by rank R + N.

    Args:
        games: The parsed games, in any order.
        win_points: Points awarded to the higher scoring team.
        draw_points: Points awarded to both teams when the scores are equal.
        loss_points: Points awarded to the lower scoring team.

    Returns:
        One Standing per distinct team name, in rank order.
    """
    points: Dict[str, int] = {}
    game_count = 0

    for game in games:
        game_count += 1
        # Teams that never win still need an entry in the table
        for team in (game.team1, game.team2):
            points.setdefault(team.name, 0)

        if game.is_draw:
            points[game.team1.name] += draw_points
            points[game.team2.name] += draw_points
            continue

        if game.team1.score > game.team2.score:
            winner, loser = game.team1, game.team2
        else:
            winner, loser = game.team2, game.team1
        points[winner.name] += win_points
        points[loser.name] += loss_points

    # sorted() is stable, names equal ignoring case keep first-appearance order
    ordered = sorted(points.items(), key=lambda item: (-item[1], item[0].lower()))

    standings: List[Standing] = []
    rank = 0
    previous_points: Optional[int] = None
    for position, (team, total) in enumerate(ordered):
        if total != previous_points:
            rank = position + 1
            previous_points = total
        standings.append(Standing(rank=rank, team=team, points=total))

    logger.debug(
        f"Computed standings for {len(standings)} teams from {game_count} games"
    )
    return standings
