from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CaraError:
    message: str


@dataclass(frozen=True)
class InputError(CaraError):
    path: str


@dataclass(frozen=True)
class AnnotationError(CaraError):
    text: str


class GameErrorKind(Enum):
    UNKNOWN_TERMINATION = "unknown_termination"
    MISSING_COMMENT = "missing_comment"
    BAD_COMMENT = "bad_comment"


@dataclass(frozen=True)
class GameError:
    """Problem found in a single game.

    ``ply`` is 0-based for MISSING_COMMENT and 1-based for BAD_COMMENT, and
    ``None`` for UNKNOWN_TERMINATION.
    """

    kind: GameErrorKind
    ply: int | None = None


@dataclass(frozen=True)
class GameMappingError(CaraError):
    game_number: int
    error: GameError


class RuleErrorKind(Enum):
    BAD_FORMAT = "bad_format"
    NON_POSITIVE_EVAL = "non_positive_eval"
    NON_POSITIVE_COUNT = "non_positive_count"
    NON_POSITIVE_FROM_MOVE = "non_positive_from_move"
    NEGATIVE_EVAL = "negative_eval"


@dataclass(frozen=True)
class RuleError(CaraError):
    rule_name: str
    kind: RuleErrorKind
