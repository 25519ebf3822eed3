from dataclasses import dataclass
from enum import Enum


class RuleType(Enum):
    RESIGN = "R"
    DRAW = "D"


class Side(Enum):
    FIRST_MOVER = 0
    SECOND_MOVER = 1

    @classmethod
    def from_ply(cls, ply: int) -> "Side":
        return cls.FIRST_MOVER if ply % 2 == 0 else cls.SECOND_MOVER

    @property
    def resign_score10(self) -> int:
        """Game result (x10) when this side is adjudicated as resigning."""
        return 0 if self is Side.FIRST_MOVER else 10


@dataclass(frozen=True)
class GameStats:
    length: int
    time: int
    score10: int


@dataclass(frozen=True)
class AdjudicationOutcome:
    actual: GameStats
    adjudicated: GameStats
    rule_applied: RuleType | None = None

    @property
    def correctly_adjudicated(self) -> bool:
        return self.actual.score10 == self.adjudicated.score10

    @property
    def time_saved(self) -> int:
        """Milliseconds saved; wrong adjudications save nothing."""
        if not self.correctly_adjudicated:
            return 0
        return self.actual.time - self.adjudicated.time

    @property
    def squared_error10(self) -> int:
        return (self.actual.score10 - self.adjudicated.score10) ** 2
