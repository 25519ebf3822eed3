from collections.abc import Sequence

from chess_adjudication.domain.game import GameData, MoveData


def shuffle_move(ply: int) -> str:
    """Legal filler move: both sides shuffle a knight out and back."""
    if ply % 2 == 0:
        return "Nf3" if (ply // 2) % 2 == 0 else "Ng1"
    return "Nf6" if (ply // 2) % 2 == 0 else "Ng8"


def pgn_game(result: str, comments: Sequence[str | None]) -> str:
    """Build a PGN game with one (optional) comment per ply."""
    tokens: list[str] = []
    for ply, comment in enumerate(comments):
        if ply % 2 == 0:
            tokens.append(f"{ply // 2 + 1}.")
        tokens.append(shuffle_move(ply))
        if comment is not None:
            tokens.append(f"{{{comment}}}")
    tokens.append(result)
    return f'[Event "Test"]\n[Result "{result}"]\n\n' + " ".join(tokens) + "\n\n"


def annotation(eval_cp: int, millis: int, depth: int = 10) -> str:
    sign = "-" if eval_cp < 0 else "+"
    pawns, centipawns = divmod(abs(eval_cp), 100)
    seconds, ms = divmod(millis, 1000)
    return f"{sign}{pawns}.{centipawns:02d}/{depth} {seconds}.{ms:03d}s"


def game_data(score10: int, evals: Sequence[int], time: int | Sequence[int] = 100) -> GameData:
    times = [time] * len(evals) if isinstance(time, int) else list(time)
    return GameData(score10=score10, moves=tuple(MoveData(eval=e, time=t) for e, t in zip(evals, times, strict=True)))
