"""Read annotated PGN files into raw games."""

import io
import logging
from pathlib import Path

import chess.pgn

from chess_adjudication.domain.errors import InputError
from chess_adjudication.domain.game import RawGame, RawMove, Termination
from chess_adjudication.domain.result import Err, Ok, Result

logger = logging.getLogger(__name__)

_TERMINATION_BY_RESULT = {t.value: t for t in Termination if t is not Termination.UNKNOWN}


class _StrictGameBuilder(chess.pgn.GameBuilder):
    """Game builder that raises on illegal or unparsable moves instead of logging them."""

    def handle_error(self, error: Exception) -> None:
        raise error


def _raw_game(game: chess.pgn.Game) -> RawGame:
    termination = _TERMINATION_BY_RESULT.get(game.headers.get("Result", "*"), Termination.UNKNOWN)
    moves = tuple(RawMove(comment=node.comment or None) for node in game.mainline())
    return RawGame(termination=termination, moves=moves)


def parse_pgn(text: str) -> Result[list[RawGame], str]:
    """Parse every game in ``text``; the error is a short description of the first failure."""
    handle = io.StringIO(text)
    games: list[RawGame] = []
    while True:
        try:
            game = chess.pgn.read_game(handle, Visitor=_StrictGameBuilder)
        except ValueError as e:
            return Err(f"game {len(games) + 1}: {e}")
        if game is None:
            break
        games.append(_raw_game(game))
    return Ok(games)


def read_games(path: Path, encoding: str = "utf-8") -> Result[list[RawGame], InputError]:
    try:
        handle = path.open(encoding=encoding)
    except OSError as e:
        logger.debug("Cannot open %s: %s", path, e)
        return Err(InputError("Can't open file", str(path)))

    with handle:
        try:
            text = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", path, e)
            return Err(InputError("Can't read file", str(path)))

    match parse_pgn(text):
        case Ok(games):
            logger.debug("Read %d games from %s", len(games), path)
            return Ok(games)
        case Err(reason):
            logger.debug("Cannot parse %s: %s", path, reason)
            return Err(InputError("Can't parse pgn file", str(path)))
