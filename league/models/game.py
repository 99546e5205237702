import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

# A team name is one or more single-space separated tokens, each starting with a letter.
TEAM_NAME_PATTERN = r"[A-Za-z][A-Za-z0-9_\-]*(?: [A-Za-z][A-Za-z0-9_\-]*)*"

_TEAM_NAME_RE = re.compile(TEAM_NAME_PATTERN)


class TeamScore(BaseModel):
    """A single team and its score for one game."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    name: str
    score: int = Field(..., ge=0)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not _TEAM_NAME_RE.fullmatch(value):
            raise ValueError(f"invalid team name: {value!r}")
        return value


class Game(BaseModel):
    """Represents a single game played between two teams."""

    model_config = ConfigDict(frozen=True)

    team1: TeamScore
    team2: TeamScore

    @model_validator(mode="after")
    def check_distinct_teams(self) -> "Game":
        # A team can't play against itself
        if self.team1.name == self.team2.name:
            raise ValueError(f"duplicate team names for game: {self.team1.name!r}")
        return self

    @property
    def is_draw(self) -> bool:
        return self.team1.score == self.team2.score


GameList = TypeAdapter(List[Game])


def dump_games(games: List[Game]) -> str:
    """Serializes games to a JSON array."""
    return GameList.dump_json(list(games), indent=2).decode("utf-8")


def load_games(text: str) -> List[Game]:
    """Deserializes games from a JSON array produced by dump_games."""
    return GameList.validate_json(text)
