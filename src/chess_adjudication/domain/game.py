from dataclasses import dataclass
from enum import Enum

# Centipawn magnitude used for any "mate found" evaluation.
MATE_SCORE = 10000


@dataclass(frozen=True)
class MoveData:
    """Engine evaluation (centipawns) after a ply and the time spent on it (ms)."""

    eval: int
    time: int


@dataclass(frozen=True)
class GameData:
    # Result scaled by ten: 10 white wins, 5 draw, 0 black wins.
    score10: int
    moves: tuple[MoveData, ...]


class Termination(Enum):
    WHITE_WINS = "1-0"
    DRAW = "1/2-1/2"
    BLACK_WINS = "0-1"
    UNKNOWN = "*"


@dataclass(frozen=True)
class RawMove:
    comment: str | None = None


@dataclass(frozen=True)
class RawGame:
    termination: Termination
    moves: tuple[RawMove, ...] = ()
