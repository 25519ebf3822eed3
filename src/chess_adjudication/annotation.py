"""Parse the per-move comments written by cutechess-style match runners.

A comment looks like ``-1.91/13 0.031s``: signed evaluation in pawns (or a mate
marker such as ``M17``), search depth, then the time spent in seconds.
"""

import re

from chess_adjudication.domain.errors import AnnotationError
from chess_adjudication.domain.game import MATE_SCORE, MoveData
from chess_adjudication.domain.result import Err, Ok, Result

_ANNOTATION_RE = re.compile(
    r"""
    (?P<sign>[-+])?
    (?:(?P<mate>M\d+)|(?P<pawns>\d+)\.(?P<centipawns>\d{2}))
    /\d+\s
    (?P<seconds>\d+)(?:\.(?P<fraction>\d{1,3}))?s
    """,
    re.VERBOSE,
)


def _eval_from_match(match: re.Match[str]) -> int:
    if match.group("mate") is not None:
        magnitude = MATE_SCORE
    else:
        magnitude = int(match.group("pawns")) * 100 + int(match.group("centipawns"))
    return -magnitude if match.group("sign") == "-" else magnitude


def _time_from_match(match: re.Match[str]) -> int:
    millis = int(match.group("seconds")) * 1000
    fraction = match.group("fraction")
    if fraction is not None:
        # ".45" is 450 ms, ".031" is 31 ms
        millis += int(fraction) * 10 ** (3 - len(fraction))
    return millis


def parse_annotation(text: str) -> Result[MoveData, AnnotationError]:
    """Parse a move comment anchored at its first character; trailing text is ignored."""
    match = _ANNOTATION_RE.match(text)
    if match is None:
        return Err(AnnotationError(f"Bad comment format: {text!r}", text))
    return Ok(MoveData(eval=_eval_from_match(match), time=_time_from_match(match)))
