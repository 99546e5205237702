# league/models/standing.py
from pydantic import BaseModel, ConfigDict, Field


class Standing(BaseModel):
    """The computed rank and points of a single team for a set of games."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)  # Not contiguous; tied teams share a rank
    team: str
    points: int = Field(..., ge=0)

    @property
    def unit(self) -> str:
        return "pt" if self.points == 1 else "pts"

    def render(self) -> str:
        """Renders the standing as a single report line."""
        return f"{self.rank}. {self.team}, {self.points} {self.unit}"
