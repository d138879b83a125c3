#!/usr/bin/env python3
"""
CLI for the Duckworth-Lewis calculator
"""
import click
from rich.console import Console
from rich.table import Table

from dlc.config import settings, configure_logging
from dlc.database import open_store
from dlc.engine import Overs, Grade, Innings, DUCKWORTH_LEWIS_TABLE
from dlc.engine.match_store import MatchStore
from dlc.errors import DuckworthLewisError
from dlc.validators.interruption_validator import InterruptionValidator

console = Console()


class OversParamType(click.ParamType):
    """Overs written as <overs> or <overs>.<balls>"""
    name = "overs"

    def convert(self, value, param, ctx):
        if isinstance(value, Overs):
            return value
        try:
            return Overs.parse(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


OVERS = OversParamType()


def _store(ctx: click.Context) -> MatchStore:
    root = ctx.find_root()
    if "store" not in root.obj:
        session = open_store(root.obj["store_location"])
        root.call_on_close(session.close)
        root.obj["store"] = MatchStore(session)
    return root.obj["store"]


def _current_match(ctx: click.Context):
    try:
        return _store(ctx).get(ctx.find_root().obj["match_id"])
    except DuckworthLewisError as exc:
        raise click.ClickException(str(exc))


@click.group()
@click.option(
    "-s", "--store", "store_location",
    envvar="DUCKWORTH_LEWIS_STORAGE",
    default=settings.STORAGE_PATH,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Where the calculator stores matches",
)
@click.option("-i", "--id", "match_id", type=int, default=None, help="Match to update; defaults to the latest match created")
@click.pass_context
def cli(ctx, store_location, match_id):
    """Duckworth-Lewis Standard Edition targets for weather affected matches"""
    configure_logging()
    ctx.obj = {"store_location": store_location, "match_id": match_id}


@cli.command()
@click.argument("length", type=OVERS)
@click.argument("grade", type=click.Choice([g.value for g in Grade]))
@click.option("--team-1", default="Team 1", show_default=True, help="Team batting first")
@click.option("--team-2", default="Team 2", show_default=True, help="Team batting second")
@click.option("--g50", type=click.FloatRange(min=0, min_open=True), default=None, help="Use this G50 instead of the grade's")
@click.pass_context
def new(ctx, length: Overs, grade: str, team_1: str, team_2: str, g50):
    """Create a new match LENGTH overs a side"""
    validation = InterruptionValidator.validate_length(length)
    if not validation["valid"]:
        raise click.ClickException("; ".join(validation["errors"]))

    match = _store(ctx).create(length, grade=Grade(grade), g_50=g50, team_1=team_1, team_2=team_2)
    console.print(
        f"[green]Created match {match.id}: {match.team_1} vs {match.team_2} "
        f"({match.length} overs, G50 {match.g_50:g})[/green]"
    )


@cli.command(name="int", context_settings={"ignore_unknown_options": True})
@click.argument("wickets", type=int)
@click.argument("overs_left", type=OVERS)
@click.argument("overs_lost", type=OVERS)
@click.argument("innings", type=click.Choice([i.value for i in Innings]))
@click.pass_context
def add_interruption(ctx, wickets: int, overs_left: Overs, overs_lost: Overs, innings: str):
    """
    Add an interruption to a match.

    WICKETS lost in the innings so far, OVERS_LEFT when play stopped (before
    any deduction for this stoppage), OVERS_LOST from this innings.
    """
    store = _store(ctx)
    match = _current_match(ctx)

    validation = InterruptionValidator.validate(match.to_game(), wickets, overs_left, overs_lost)
    if not validation["valid"]:
        raise click.ClickException("; ".join(validation["errors"]))

    try:
        store.record_interruption(match, wickets, overs_left, overs_lost, Innings(innings))
    except DuckworthLewisError as exc:
        raise click.ClickException(str(exc))
    console.print(
        f"[yellow]Match {match.id}: {innings} innings interrupted at {wickets} wickets, "
        f"resuming with {validation['resumes_with']} overs[/yellow]"
    )


@cli.command()
@click.argument("first_innings_total", type=click.IntRange(min=0))
@click.pass_context
def target(ctx, first_innings_total: int):
    """Calculate the current target for team 2; safe to recalculate after more interruptions"""
    store = _store(ctx)
    match = _current_match(ctx)
    try:
        revised = store.revised_target(match, first_innings_total)
    except DuckworthLewisError as exc:
        raise click.ClickException(str(exc))
    console.print(f"Adjusted target for team 2 is {revised}")


@cli.command()
@click.pass_context
def show(ctx):
    """Show a match and its interruptions"""
    match = _current_match(ctx)
    game = match.to_game()

    console.print(f"[bold]Match {match.id}[/bold]: {match.team_1} vs {match.team_2}")
    console.print(f"  {match.length} overs, G50 {match.g_50:g}, created {match.created_at:%Y-%m-%d %H:%M}")

    if not game.interruptions:
        console.print("  No interruptions recorded")
        return

    table = Table(title="Interruptions")
    table.add_column("#", justify="right")
    table.add_column("Innings", style="cyan")
    table.add_column("Wkts", justify="right")
    table.add_column("Left", justify="right")
    table.add_column("Lost", justify="right")
    table.add_column("Resource loss", justify="right", style="magenta")

    for row, interruption in zip(match.interruptions, game.interruptions):
        table.add_row(
            str(row.sequence),
            interruption.innings.value,
            str(interruption.wickets),
            str(interruption.overs_left),
            str(interruption.overs_lost),
            f"{interruption.resource_loss():.1f}%",
        )

    console.print(table)


@cli.command(name="list")
@click.pass_context
def list_matches(ctx):
    """List all matches held in the store"""
    matches = _store(ctx).list()
    if not matches:
        console.print("[red]No matches found. Run 'new' first.[/red]")
        return

    for match in matches:
        console.print(f"Match {match.id} between {match.team_1} and {match.team_2}")


@cli.command()
@click.argument("match_ids", type=int, nargs=-1, required=True)
@click.pass_context
def delete(ctx, match_ids):
    """Delete matches from the store"""
    deleted = _store(ctx).delete(match_ids)
    console.print(f"Deleted {deleted} match(es)")


@cli.command(name="table")
@click.option("--wickets", type=click.IntRange(0, 9), default=None, help="Only show this many wickets lost")
def resource_table(wickets):
    """Print the Standard Edition resource table"""
    columns = [wickets] if wickets is not None else list(range(10))

    table = Table(title="Resources remaining (%)", box=None, pad_edge=False)
    table.add_column("Overs", justify="right", style="cyan")
    for w in columns:
        table.add_column(str(w), justify="right")

    for overs in range(DUCKWORTH_LEWIS_TABLE.max_overs, 0, -1):
        table.add_row(str(overs), *[f"{DUCKWORTH_LEWIS_TABLE.entry(overs, w):.1f}" for w in columns])

    console.print(table)


if __name__ == "__main__":
    cli()
