#!/usr/bin/env python3
"""Run a casual court session: balanced teams each round, MMR updates from results."""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.errors import ConfigurationError, UnknownTeamLabelError
from domain.pipeline import TeamSession
from domain.teams.config import DEFAULT_CONFIG_PATH, DEFAULT_NAMES_PATH, load_team_system_config
from domain.teams.names import NameGenerator
from domain.teams.roster import load_roster

STOP_INPUTS = {"Q", "QUIT", "STOP"}

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Balanced team generation for casual court sessions.",
)


def build_session(
    *,
    roster: Path,
    courts: int,
    config_path: Path,
    names_path: Path,
    seed: int | None,
) -> TeamSession:
    """Load every input file and construct a session, mapping config errors to CLI errors."""
    if courts <= 0:
        raise typer.BadParameter("--courts must be greater than 0", param_hint="--courts")

    rng = random.Random(seed)
    try:
        players = load_roster(roster)
        config = load_team_system_config(config_path)
        name_source = NameGenerator.from_json(names_path, rng=rng)
        session = TeamSession(
            players,
            courts,
            name_source=name_source,
            config=config,
            rng=rng,
            echo=typer.echo,
        )
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo(
        f"loaded_players={len(session.players)} "
        f"courts={courts} "
        f"config={config.name} "
        f"seed={seed}"
    )
    return session


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _echo_final_ratings(session: TeamSession) -> None:
    for player in sorted(session.players, key=lambda item: item.composite_score, reverse=True):
        typer.echo(
            f"player={player.name} "
            f"ranking_points={player.ranking_points} "
            f"mmr={player.mmr} "
            f"composite={player.composite_score:.3f}"
        )


RosterArgument = Annotated[
    Path,
    typer.Argument(help="TOML roster with [[players]] name/ranking_points/mmr entries."),
]
CourtsOption = Annotated[int, typer.Option("--courts", help="Number of courts (two teams per court).")]
ConfigOption = Annotated[
    Path,
    typer.Option("--config", help="Team-balancing TOML config."),
]
NamesOption = Annotated[
    Path,
    typer.Option("--names", help="JSON file with 'prefixes' and 'suffixes' arrays."),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", help="Seed for team names and assignment jitter."),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Log assignment decisions.")]


@app.command()
def play(
    roster: RosterArgument,
    courts: CourtsOption = 1,
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    names_path: NamesOption = DEFAULT_NAMES_PATH,
    seed: SeedOption = None,
    max_rounds: Annotated[
        int,
        typer.Option("--max-rounds", help="Stop after this many rounds (0 plays until 'q')."),
    ] = 0,
    settle: Annotated[
        bool,
        typer.Option("--settle", help="Fold session MMR into ranking points when stopping."),
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Interactive session: generate teams, enter each court's winner, repeat."""
    _configure_logging(verbose)
    session = build_session(
        roster=roster,
        courts=courts,
        config_path=config_path,
        names_path=names_path,
        seed=seed,
    )

    stopped = False
    while not stopped:
        summary = session.next_round()
        if not summary.matches:
            typer.echo("not enough teams for a match")
            break

        for match in summary.matches:
            answer = typer.prompt(
                f"Enter the winning team for court {match.court_number} "
                f"({match.home_label} or {match.away_label}, q to stop)"
            )
            if answer.strip().upper() in STOP_INPUTS:
                stopped = True
                break
            try:
                session.record_winner(match, answer)
            except UnknownTeamLabelError as exc:
                typer.echo(f"{exc}. Skipping update.")

        if max_rounds and summary.round_number >= max_rounds:
            break

    if settle:
        session.settle()
    _echo_final_ratings(session)


@app.command()
def preview(
    roster: RosterArgument,
    courts: CourtsOption = 1,
    rounds: Annotated[int, typer.Option("--rounds", help="Number of rounds to generate.")] = 1,
    config_path: ConfigOption = DEFAULT_CONFIG_PATH,
    names_path: NamesOption = DEFAULT_NAMES_PATH,
    seed: SeedOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print team assignments for several rounds without recording results."""
    if rounds <= 0:
        raise typer.BadParameter("--rounds must be greater than 0", param_hint="--rounds")

    _configure_logging(verbose)
    session = build_session(
        roster=roster,
        courts=courts,
        config_path=config_path,
        names_path=names_path,
        seed=seed,
    )
    for _ in range(rounds):
        session.next_round()


if __name__ == "__main__":
    app()
