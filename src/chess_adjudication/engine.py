"""Replay a game's evaluation stream against a resign rule and a draw rule."""

import logging
from collections.abc import Sequence

from chess_adjudication.domain.adjudication import AdjudicationOutcome, GameStats, RuleType, Side
from chess_adjudication.domain.game import GameData
from chess_adjudication.domain.rules import DrawRule, DrawSetting, ResignRule, ResignSetting

logger = logging.getLogger(__name__)


def adjudicate_game(game: GameData, resign: ResignSetting, draw: DrawSetting) -> AdjudicationOutcome:
    """Find the first ply at which either rule would have ended ``game``.

    The draw rule is checked before the resign rule on every ply, and the first
    rule to fire decides the adjudicated result. The draw streak counts plies of
    both sides, so ``draw.count`` full moves means ``2 * draw.count`` plies. Each
    side keeps its own resign streak, and the rule fires when the streak reaches
    exactly ``resign.count``.
    """
    resign_streaks = {Side.FIRST_MOVER: 0, Side.SECOND_MOVER: 0}
    draw_streak = 0
    total_time = 0
    rule_applied: RuleType | None = None
    adjudicated: GameStats | None = None

    for ply, move in enumerate(game.moves):
        # Actual totals cover the full game, so time accumulates past the trigger.
        total_time += move.time
        if adjudicated is not None:
            continue

        if isinstance(draw, DrawRule):
            draw_streak = draw_streak + 1 if abs(move.eval) <= draw.eval else 0
            if (ply + 1) // 2 >= draw.from_move and draw_streak >= 2 * draw.count:
                rule_applied = RuleType.DRAW
                adjudicated = GameStats(length=ply + 1, time=total_time, score10=5)
                continue

        if isinstance(resign, ResignRule):
            side = Side.from_ply(ply)
            resign_streaks[side] = resign_streaks[side] + 1 if move.eval <= -resign.eval else 0
            if resign_streaks[side] == resign.count:
                rule_applied = RuleType.RESIGN
                adjudicated = GameStats(length=ply + 1, time=total_time, score10=side.resign_score10)

    actual = GameStats(length=len(game.moves), time=total_time, score10=game.score10)
    return AdjudicationOutcome(
        actual=actual,
        adjudicated=adjudicated if adjudicated is not None else actual,
        rule_applied=rule_applied,
    )


def adjudicate_games(
    games: Sequence[GameData],
    resign: ResignSetting,
    draw: DrawSetting,
) -> list[AdjudicationOutcome]:
    outcomes = [adjudicate_game(game, resign, draw) for game in games]
    logger.debug(
        "Applied resign=%s draw=%s to %d games (%d adjudicated)",
        resign,
        draw,
        len(outcomes),
        sum(1 for o in outcomes if o.rule_applied is not None),
    )
    return outcomes
