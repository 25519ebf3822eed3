"""Fold per-game adjudication outcomes into report statistics."""

import functools
import math
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from chess_adjudication.domain.adjudication import AdjudicationOutcome, RuleType


@dataclass(frozen=True)
class CategoryTotals:
    count: int = 0
    wrong: int = 0
    time_saved: int = 0
    squared_error10: int = 0

    def add(self, outcome: AdjudicationOutcome) -> "CategoryTotals":
        return CategoryTotals(
            count=self.count + 1,
            wrong=self.wrong + (0 if outcome.correctly_adjudicated else 1),
            time_saved=self.time_saved + outcome.time_saved,
            squared_error10=self.squared_error10 + outcome.squared_error10,
        )

    def __add__(self, other: "CategoryTotals") -> "CategoryTotals":
        return CategoryTotals(
            count=self.count + other.count,
            wrong=self.wrong + other.wrong,
            time_saved=self.time_saved + other.time_saved,
            squared_error10=self.squared_error10 + other.squared_error10,
        )


@dataclass(frozen=True)
class AdjudicationSummary:
    """Accumulator over all games of a run.

    ``actual_time`` and ``adjudicated_time`` cover every game, adjudicated or
    not. Mean squared errors are always divided by the total game count, also
    for the per-category figures.
    """

    games: int = 0
    actual_time: int = 0
    adjudicated_time: int = 0
    by_rule: dict[RuleType, CategoryTotals] = field(
        default_factory=lambda: {RuleType.RESIGN: CategoryTotals(), RuleType.DRAW: CategoryTotals()}
    )

    def add(self, outcome: AdjudicationOutcome) -> "AdjudicationSummary":
        by_rule = dict(self.by_rule)
        if outcome.rule_applied is not None:
            by_rule[outcome.rule_applied] = by_rule[outcome.rule_applied].add(outcome)
        return replace(
            self,
            games=self.games + 1,
            actual_time=self.actual_time + outcome.actual.time,
            adjudicated_time=self.adjudicated_time + outcome.adjudicated.time,
            by_rule=by_rule,
        )

    @property
    def resign(self) -> CategoryTotals:
        return self.by_rule[RuleType.RESIGN]

    @property
    def draw(self) -> CategoryTotals:
        return self.by_rule[RuleType.DRAW]

    @property
    def total(self) -> CategoryTotals:
        return self.resign + self.draw

    def time_saved_pct(self, totals: CategoryTotals) -> float:
        if self.actual_time == 0:
            return 0.0
        return totals.time_saved / self.actual_time * 100

    def mse(self, totals: CategoryTotals) -> float:
        if self.games == 0:
            return 0.0
        return totals.squared_error10 / 100 / self.games

    @property
    def rmse(self) -> float:
        return math.sqrt(self.mse(self.total))


def summarize(outcomes: Iterable[AdjudicationOutcome]) -> AdjudicationSummary:
    return functools.reduce(AdjudicationSummary.add, outcomes, AdjudicationSummary())


def format_time(milliseconds: int) -> str:
    """Render milliseconds as ``H:MM:SS.mmm``."""
    seconds, ms = divmod(milliseconds, 1000)
    minutes, s = divmod(seconds, 60)
    h, m = divmod(minutes, 60)
    return f"{h}:{m:02d}:{s:02d}.{ms:03d}"


def format_score(score10: int) -> str:
    return f"{score10 / 10:g}"
