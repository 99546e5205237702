import pytest

from league.calculation.standings import compute_standings
from league.models.game import Game, TeamScore
from league.models.standing import Standing
from league.parsing.parser import parse_games

SCENARIO_A = (
    "Lions 3, Snakes 3\n"
    "Tarantulas 1, FC Awesome 0\n"
    "Lions 1, FC Awesome 1\n"
    "Tarantulas 3, Snakes 1\n"
    "Lions 4, Grouches 0"
)


def game(name1, score1, name2, score2):
    return Game(
        team1=TeamScore(name=name1, score=score1),
        team2=TeamScore(name=name2, score=score2),
    )


def rendered(standings):
    return [standing.render() for standing in standings]


def test_scenario_a():
    standings = compute_standings(parse_games(SCENARIO_A))
    assert rendered(standings) == [
        "1. Tarantulas, 6 pts",
        "2. Lions, 5 pts",
        "3. FC Awesome, 1 pt",
        "3. Snakes, 1 pt",
        "5. Grouches, 0 pts",
    ]


def test_draw_shares_first_place():
    standings = compute_standings([game("Lions", 1, "Snakes", 1)])
    assert standings == [
        Standing(rank=1, team="Lions", points=1),
        Standing(rank=1, team="Snakes", points=1),
    ]


def test_loser_is_listed_with_zero_points():
    standings = compute_standings([game("A", 0, "B", 5)])
    assert standings == [
        Standing(rank=1, team="B", points=3),
        Standing(rank=2, team="A", points=0),
    ]


def test_no_games():
    assert compute_standings([]) == []


def test_rank_gap_matches_size_of_tie_group():
    games = [
        game("A", 1, "B", 0),
        game("C", 1, "D", 0),
        game("E", 1, "F", 0),
        game("G", 0, "B", 0),
    ]
    standings = compute_standings(games)
    assert [(s.rank, s.team, s.points) for s in standings] == [
        (1, "A", 3),
        (1, "C", 3),
        (1, "E", 3),
        (4, "B", 1),
        (4, "G", 1),
        (6, "D", 0),
        (6, "F", 0),
    ]


def test_ties_sorted_case_insensitively():
    games = [game("beta", 1, "Alpha", 1), game("Gamma", 2, "delta", 2)]
    assert [s.team for s in compute_standings(games)] == ["Alpha", "beta", "delta", "Gamma"]


def test_names_differing_only_in_case_are_separate_teams():
    standings = compute_standings([game("lions", 1, "Lions", 1)])
    assert [(s.rank, s.team) for s in standings] == [(1, "lions"), (1, "Lions")]


def test_team_order_in_game_does_not_matter():
    forward = compute_standings([game("A", 2, "B", 1)])
    backward = compute_standings([game("B", 1, "A", 2)])
    assert forward == backward


def test_custom_points():
    games = [game("A", 2, "B", 1), game("C", 0, "D", 0)]
    standings = compute_standings(games, win_points=2, draw_points=1, loss_points=1)
    assert [(s.rank, s.team, s.points) for s in standings] == [
        (1, "A", 2),
        (2, "B", 1),
        (2, "C", 1),
        (2, "D", 1),
    ]


def test_accepts_any_iterable():
    standings = compute_standings(g for g in [game("A", 1, "B", 0)])
    assert [s.team for s in standings] == ["A", "B"]


@pytest.mark.parametrize(
    "text",
    [
        SCENARIO_A,
        "A 1, B 1\nC 2, D 0\nA 3, C 3\nE 0, B 9\nF 1, G 1\nG 2, A 4",
        "X 0, Y 0\nY 0, Z 0\nZ 0, X 0",
    ],
)
def test_standings_properties(text):
    games = parse_games(text)
    standings = compute_standings(games)

    names = {team.name for g in games for team in (g.team1, g.team2)}
    assert len(standings) == len(names)
    assert {s.team for s in standings} == names

    for position, (current, following) in enumerate(zip(standings, standings[1:])):
        assert current.points >= following.points
        assert current.rank <= following.rank
        if current.points == following.points:
            assert current.rank == following.rank
            assert current.team.lower() <= following.team.lower()
        else:
            # The next tie group starts at its 1-based position
            assert following.rank == position + 2

    assert standings[0].rank == 1
    assert all(s.rank >= 1 for s in standings)
