"""Parse rule specifications given on the command line.

Resign rules are written ``<eval>/<count>``, draw rules
``<from_move>:<eval>/<count>``, and ``none`` disables either rule.
"""

import re

from chess_adjudication.domain.errors import RuleError, RuleErrorKind
from chess_adjudication.domain.result import Err, Ok, Result
from chess_adjudication.domain.rules import DISABLED, DrawRule, DrawSetting, ResignRule, ResignSetting

_SIGNED_INT = re.compile(r"[-+]?\d+")
_UNSIGNED_INT = re.compile(r"\d+")


def _parse_int(text: str, pattern: re.Pattern[str]) -> int | None:
    if pattern.fullmatch(text) is None:
        return None
    return int(text)


def _resign_error(message: str, kind: RuleErrorKind) -> Err[RuleError]:
    return Err(RuleError(message, "resign", kind))


def _draw_error(message: str, kind: RuleErrorKind) -> Err[RuleError]:
    return Err(RuleError(message, "draw", kind))


def parse_resign_rule(text: str) -> Result[ResignSetting, RuleError]:
    """Parse ``<eval>/<count>``; each field is range-checked as soon as it is read."""
    if text == "none":
        return Ok(DISABLED)

    bad_format = _resign_error("Resign rule has bad format", RuleErrorKind.BAD_FORMAT)
    parts = text.split("/")
    eval_ = _parse_int(parts[0], _SIGNED_INT)
    if eval_ is None:
        return bad_format
    if eval_ <= 0:
        return _resign_error("Resign rule evaluation must be positive", RuleErrorKind.NON_POSITIVE_EVAL)

    if len(parts) != 2:
        return bad_format
    count = _parse_int(parts[1], _UNSIGNED_INT)
    if count is None:
        return bad_format
    return ResignRule.create(eval_, count)


def parse_draw_rule(text: str) -> Result[DrawSetting, RuleError]:
    """Parse ``<from_move>:<eval>/<count>``.

    Unlike ``DrawRule.create``, a written eval of 0 is rejected.
    """
    if text == "none":
        return Ok(DISABLED)

    bad_format = _draw_error("Draw rule has bad format", RuleErrorKind.BAD_FORMAT)
    from_part, sep, rest = text.partition(":")
    from_move = _parse_int(from_part, _UNSIGNED_INT)
    if from_move is None:
        return bad_format
    if from_move == 0:
        return _draw_error("Draw rule move from must be positive", RuleErrorKind.NON_POSITIVE_FROM_MOVE)

    if not sep:
        return bad_format
    parts = rest.split("/")
    eval_ = _parse_int(parts[0], _SIGNED_INT)
    if eval_ is None:
        return bad_format
    if eval_ <= 0:
        return _draw_error("Draw rule evaluation must be positive", RuleErrorKind.NEGATIVE_EVAL)

    if len(parts) != 2:
        return bad_format
    count = _parse_int(parts[1], _UNSIGNED_INT)
    if count is None:
        return bad_format
    return DrawRule.create(from_move, eval_, count)
