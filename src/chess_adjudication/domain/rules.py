"""Resign and draw rule parameters.

A rule is either active (``ResignRule`` / ``DrawRule``) or ``DISABLED``. The
``NEVER_*`` constants are the numeric equivalents of a disabled rule: their
thresholds cannot be reached by any realistic game.
"""

from dataclasses import dataclass
from typing import Self, TypeAlias

from chess_adjudication.domain.errors import RuleError, RuleErrorKind
from chess_adjudication.domain.result import Err, Ok, Result


@dataclass(frozen=True)
class Disabled:
    def __str__(self) -> str:
        return "none"


DISABLED = Disabled()


@dataclass(frozen=True)
class ResignRule:
    """A side resigns once its eval is at or below ``-eval`` for ``count`` of its own moves in a row."""

    eval: int
    count: int

    @classmethod
    def create(cls, eval: int, count: int) -> Result[Self, RuleError]:
        if eval <= 0:
            return Err(RuleError("Resign rule evaluation must be positive", "resign", RuleErrorKind.NON_POSITIVE_EVAL))
        if count <= 0:
            return Err(RuleError("Resign rule count must be positive", "resign", RuleErrorKind.NON_POSITIVE_COUNT))
        return Ok(cls(eval=eval, count=count))

    def __str__(self) -> str:
        return f"{self.eval}/{self.count}"


@dataclass(frozen=True)
class DrawRule:
    """The game is drawn once |eval| stays within ``eval`` for ``count`` full moves.

    The rule may only apply on or after full move ``from_move``.
    """

    from_move: int
    eval: int
    count: int

    @classmethod
    def create(cls, from_move: int, eval: int, count: int) -> Result[Self, RuleError]:
        if from_move <= 0:
            return Err(
                RuleError("Draw rule move from must be positive", "draw", RuleErrorKind.NON_POSITIVE_FROM_MOVE)
            )
        if eval < 0:
            return Err(RuleError("Draw rule evaluation must not be negative", "draw", RuleErrorKind.NEGATIVE_EVAL))
        if count <= 0:
            return Err(RuleError("Draw rule count must be positive", "draw", RuleErrorKind.NON_POSITIVE_COUNT))
        return Ok(cls(from_move=from_move, eval=eval, count=count))

    def __str__(self) -> str:
        return f"{self.from_move}:{self.eval}/{self.count}"


NEVER_RESIGN = ResignRule(eval=10000, count=10000)
NEVER_DRAW = DrawRule(from_move=10000, eval=0, count=10000)

ResignSetting: TypeAlias = ResignRule | Disabled
DrawSetting: TypeAlias = DrawRule | Disabled
