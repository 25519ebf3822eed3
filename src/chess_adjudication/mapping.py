import logging
from collections.abc import Sequence

from chess_adjudication.annotation import parse_annotation
from chess_adjudication.domain.errors import GameError, GameErrorKind, GameMappingError
from chess_adjudication.domain.game import GameData, MoveData, RawGame, RawMove, Termination
from chess_adjudication.domain.result import Err, Ok, Result

logger = logging.getLogger(__name__)

_SCORE10_BY_TERMINATION: dict[Termination, int] = {
    Termination.WHITE_WINS: 10,
    Termination.DRAW: 5,
    Termination.BLACK_WINS: 0,
}


def _describe(game_number: int, error: GameError) -> str:
    match error.kind:
        case GameErrorKind.UNKNOWN_TERMINATION:
            return f"Game {game_number} has unknown result"
        case GameErrorKind.MISSING_COMMENT:
            return f"Game {game_number}, Ply {error.ply} - Missing comment"
        case GameErrorKind.BAD_COMMENT:
            return f"Game {game_number}, Ply {error.ply} - Bad comment format"


def map_moves(raw_moves: Sequence[RawMove]) -> Result[tuple[MoveData, ...], GameError]:
    """Parse the comment of every ply, stopping at the first problem.

    Missing comments report the 0-based ply, bad comments the 1-based ply.
    """
    moves: list[MoveData] = []
    for ply, raw_move in enumerate(raw_moves):
        if raw_move.comment is None:
            return Err(GameError(GameErrorKind.MISSING_COMMENT, ply=ply))
        match parse_annotation(raw_move.comment):
            case Ok(move):
                moves.append(move)
            case Err(_):
                return Err(GameError(GameErrorKind.BAD_COMMENT, ply=ply + 1))
    return Ok(tuple(moves))


def map_game(raw: RawGame) -> Result[GameData, GameError]:
    """Convert one raw game; the result is checked before any move."""
    score10 = _SCORE10_BY_TERMINATION.get(raw.termination)
    if score10 is None:
        return Err(GameError(GameErrorKind.UNKNOWN_TERMINATION))

    match map_moves(raw.moves):
        case Ok(moves):
            return Ok(GameData(score10=score10, moves=moves))
        case Err(error):
            return Err(error)


def map_games(raw_games: Sequence[RawGame]) -> Result[list[GameData], GameMappingError]:
    """Map every game in order; the first failing game aborts the whole batch."""
    games: list[GameData] = []
    for game_number, raw in enumerate(raw_games, start=1):
        match map_game(raw):
            case Ok(game):
                games.append(game)
            case Err(error):
                logger.debug("Game %d rejected: %s", game_number, error)
                return Err(GameMappingError(_describe(game_number, error), game_number, error))
    logger.debug("Mapped %d games", len(games))
    return Ok(games)


def sum_annotated_time(raw_games: Sequence[RawGame]) -> Result[int, GameMappingError]:
    """Total milliseconds annotated across all games.

    Unfinished games (result ``*``) are counted too; only the move comments
    must be valid.
    """
    total = 0
    for game_number, raw in enumerate(raw_games, start=1):
        match map_moves(raw.moves):
            case Ok(moves):
                total += sum(move.time for move in moves)
            case Err(error):
                return Err(GameMappingError(_describe(game_number, error), game_number, error))
    return Ok(total)
