from rich.console import Console

from chess_adjudication.domain.adjudication import AdjudicationOutcome
from chess_adjudication.summary import AdjudicationSummary, CategoryTotals, format_score, format_time

# soft_wrap keeps report lines intact regardless of terminal width
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

_GAME_HEADER = (
    "game, actual_length, actual_time, actual_score, "
    "rule_applied, adjudicated_length, adjudicated_time, adjudicated_score"
)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]error:[/red bold] {message}")


def print_unimplemented() -> None:
    err_console.print("This command isn't implemented yet! :O", markup=False, emoji=False)


def print_game_header() -> None:
    console.print(_GAME_HEADER)


def print_game_line(game_number: int, outcome: AdjudicationOutcome) -> None:
    tag = outcome.rule_applied.value if outcome.rule_applied is not None else "-"
    actual = outcome.actual
    adjudicated = outcome.adjudicated
    console.print(
        f"{game_number}, {actual.length}, {actual.time}, {format_score(actual.score10)}, {tag}, "
        f"{adjudicated.length}, {adjudicated.time}, {format_score(adjudicated.score10)}"
    )


def _counts(totals: CategoryTotals) -> str:
    return f"{totals.count} ({totals.wrong} wrong)"


def _time_saved(summary: AdjudicationSummary, totals: CategoryTotals) -> str:
    return f"{format_time(totals.time_saved)} ({summary.time_saved_pct(totals):.2f}%)"


def print_summary(summary: AdjudicationSummary) -> None:
    console.print(f"Games: {summary.games}")
    console.print(f"Adjudicated: {_counts(summary.total)}")
    console.print(f"  Resign: {_counts(summary.resign)}")
    console.print(f"  Draw: {_counts(summary.draw)}")
    console.print()

    console.print(f"Total Time: {format_time(summary.actual_time)}")
    console.print(f"After Adjudication: {format_time(summary.adjudicated_time)}")
    console.print(f"Time saved: {_time_saved(summary, summary.total)}")
    console.print(f"  Resign: {_time_saved(summary, summary.resign)}")
    console.print(f"  Draw: {_time_saved(summary, summary.draw)}")
    console.print("Note: 'Time saved' excludes incorrectly adjudicated games")
    console.print()

    console.print(f"Mean Squared Error: {summary.mse(summary.total):.6f}")
    console.print(f"  Resign: {summary.mse(summary.resign):.6f}")
    console.print(f"  Draw: {summary.mse(summary.draw):.6f}")
    console.print(f"Root MSE: {summary.rmse:.3f}")


def print_total_time(games: int, milliseconds: int) -> None:
    console.print(f"Games: {games}")
    console.print(f"Total Time: {format_time(milliseconds)}")
