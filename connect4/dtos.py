from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Tuple

State = List[List[int]]
Action = int
Side = Literal["red", "yellow"]


class Game(BaseModel):
    """
    One complete game.
    Stores everything needed to replay it:
    - who played red and who played yellow
    - who moved first
    - move history (board before the move, column played)
    - the result, and why it ended early if a move was rejected
    - the board as it stood when the game ended
    """
    player_red: str
    player_yellow: str
    first: Side
    history: List[Tuple[State, Action]] = Field(default_factory=list)  # plain lists, never numpy arrays
    winner: Optional[Side] = None
    invalid_move: Optional[str] = None
    final_board: State = Field(default_factory=list)

    def winner_name(self) -> Optional[str]:
        if self.winner is None:
            return None
        return self.player_red if self.winner == "red" else self.player_yellow


class Match(BaseModel):
    """
    A series of games between the same two seats.
    """
    player_red: str
    player_yellow: str

    red_wins: int = 0
    yellow_wins: int = 0
    draws: int = 0

    games: List[Game] = Field(default_factory=list)

    def record(self, game: Game):
        if game.winner == "red":
            self.red_wins += 1
        elif game.winner == "yellow":
            self.yellow_wins += 1
        else:
            self.draws += 1
        self.games.append(game)
