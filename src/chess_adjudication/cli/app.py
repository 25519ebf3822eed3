from pathlib import Path
from typing import Annotated

import typer

from chess_adjudication.cli._logging import configure_logging
from chess_adjudication.cli._output import (
    console,
    print_error,
    print_game_header,
    print_game_line,
    print_summary,
    print_total_time,
    print_unimplemented,
)
from chess_adjudication.config import load_settings
from chess_adjudication.domain.game import GameData
from chess_adjudication.domain.result import Err, Ok
from chess_adjudication.engine import adjudicate_games
from chess_adjudication.mapping import map_games, sum_annotated_time
from chess_adjudication.pgn_source import read_games
from chess_adjudication.rule_parser import parse_draw_rule, parse_resign_rule
from chess_adjudication.summary import summarize


app = typer.Typer(name="cara", help="Tool for studying chess adjudication rules", no_args_is_help=True)

_FileArg = Annotated[Path, typer.Argument(help="The PGN file to analyze")]


@app.callback()
def main(
    debug: Annotated[bool, typer.Option("--debug", help="Enable DEBUG logging")] = False,
) -> None:
    """Tool for studying chess adjudication rules."""
    configure_logging(verbose=debug, level=load_settings().log_level)


def _load_game_data(path: Path, encoding: str) -> list[GameData]:
    match read_games(path, encoding=encoding):
        case Ok(raw_games):
            pass
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)

    match map_games(raw_games):
        case Ok(games):
            return games
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@app.command()
def resign(file: _FileArg) -> None:
    """Recommends a resign rule."""
    print_unimplemented()
    raise typer.Exit(code=1)


@app.command()
def draw(file: _FileArg) -> None:
    """Recommends a draw rule."""
    print_unimplemented()
    raise typer.Exit(code=1)


@app.command(name="test")
def test_rules(
    file: _FileArg,
    resign_rule: Annotated[str, typer.Argument(help="The resign rule in format <eval>/<count> or 'none'")],
    draw_rule: Annotated[str, typer.Argument(help="The draw rule in format <move_number>:<eval>/<count> or 'none'")],
    verbose: Annotated[bool, typer.Option("--verbose", help="Turns on verbose output")] = False,
) -> None:
    """Applies <resign_rule> and <draw_rule> on <file>."""
    match parse_resign_rule(resign_rule):
        case Ok(resign_setting):
            pass
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)
    match parse_draw_rule(draw_rule):
        case Ok(draw_setting):
            pass
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)

    settings = load_settings()
    games = _load_game_data(file, settings.pgn_encoding)
    outcomes = adjudicate_games(games, resign_setting, draw_setting)

    if verbose or settings.verbose_report:
        print_game_header()
        for game_number, outcome in enumerate(outcomes, start=1):
            print_game_line(game_number, outcome)
        console.print()

    print_summary(summarize(outcomes))


@app.command(name="total-time")
def total_time(file: _FileArg) -> None:
    """Sums the time annotated on every move in <file>, whatever the game results."""
    settings = load_settings()
    match read_games(file, encoding=settings.pgn_encoding):
        case Ok(raw_games):
            pass
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)

    match sum_annotated_time(raw_games):
        case Ok(milliseconds):
            print_total_time(len(raw_games), milliseconds)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)
