from pydantic import BaseModel, ConfigDict, Field, field_validator

from connect4.utils import AGENTS


class MatchConfig(BaseModel):
    """Settings for a series of games between two registered agents."""
    model_config = ConfigDict(frozen=True)

    rows: int = Field(default=6, ge=4)
    cols: int = Field(default=7, ge=4)
    games: int = Field(default=10, ge=1)
    seed: int = 911
    first_player_distribution: float = Field(default=0.5, ge=0.0, le=1.0)

    red: str = "defensive"
    yellow: str = "random"

    log_dir: str = "match_logs"
    show: bool = False

    @field_validator("red", "yellow")
    @classmethod
    def _known_agent(cls, value: str) -> str:
        if value not in AGENTS:
            raise ValueError(f"Unknown agent {value!r}; choose from {sorted(AGENTS)}")
        return value
