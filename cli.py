#!/usr/bin/env python3
"""
CLI for scoring matches from a terminal
"""
import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from scorebook.config import configure_logging
from scorebook.database import init_db, get_session
from scorebook.engine import scoring
from scorebook.engine.events import parse_event
from scorebook.engine.projector import project
from scorebook.engine.state import MatchFormat
from scorebook.models import Scorebook, Tournament, Team, Player, PlayerRole
from scorebook.repository import MatchRepository, MatchNotFoundError, new_id

console = Console()

DEMO_SQUADS = {
    "Harbour Hawks": ["A. Mehta", "R. Cole", "S. Iqbal", "J. Price", "T. Nair", "K. Doyle"],
    "Valley Vipers": ["M. Reid", "P. Shah", "L. Grant", "D. Bose", "C. Wells", "F. Khan"],
}


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL")
def cli(log_level):
    """Scorebook - live cricket scoring"""
    configure_logging(log_level)


@cli.command()
def init():
    """Initialize the database"""
    console.print("[yellow]Initializing database...[/yellow]")
    init_db()
    console.print("[green]Database initialized successfully![/green]")


@cli.command()
def new_scorebook():
    """Create an empty scorebook and print its login id"""
    init_db()
    session = get_session()
    scorebook = Scorebook(id=new_id("sb"))
    session.add(scorebook)
    session.commit()
    console.print(f"[green]Scorebook created:[/green] [bold]{scorebook.id}[/bold]")
    session.close()


@cli.command()
@click.option("--format", "match_format", default="T20", type=click.Choice([f.value for f in MatchFormat]))
def demo(match_format: str):
    """Create a demo tournament with two squads and a live match"""
    init_db()
    session = get_session()

    scorebook = Scorebook(id=new_id("sb"))
    tournament = Tournament(
        id=new_id("tourn"), scorebook_id=scorebook.id, name="Demo Cup", format=MatchFormat(match_format),
    )
    session.add_all([scorebook, tournament])

    teams = []
    for team_name, names in DEMO_SQUADS.items():
        team = Team(id=new_id("team"), tournament_id=tournament.id, name=team_name)
        session.add(team)
        for order, name in enumerate(names):
            role = PlayerRole.BOWLER if order >= 3 else PlayerRole.BATSMAN
            session.add(Player(id=new_id("player"), team_id=team.id, name=name, role=role, created_order=order))
        teams.append(team)
    session.commit()

    home, away = teams
    match = scoring.create_match(new_id("match"), tournament.id, home.id, away.id, home.id, "bat")
    match = scoring.set_players(match, home.players[0].id, home.players[1].id, away.players[5].id)

    repo = MatchRepository(session)
    repo.create(match)

    console.print(Panel(f"[bold]{home.name}[/bold] vs [bold]{away.name}[/bold] ({match_format})"))
    console.print(f"  Scorebook: [cyan]{scorebook.id}[/cyan]")
    console.print(f"  Match:     [cyan]{match.id}[/cyan]")
    console.print(f"\nTry: [yellow]python cli.py score {match.id} 1 4 W WD 6[/yellow]")
    session.close()


def _load(repo: MatchRepository, match_id: str):
    try:
        return repo.load(match_id)
    except MatchNotFoundError:
        console.print(f"[red]No match with id {match_id}[/red]")
        raise SystemExit(1)


@cli.command()
@click.argument("match_id")
@click.argument("events", nargs=-1, required=True)
def score(match_id: str, events: tuple):
    """Apply one or more ball events (0-6, W, WD, NB, LB) to a match"""
    try:
        parsed = [parse_event(e) for e in events]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="EVENTS")

    session = get_session()
    repo = MatchRepository(session)
    match = _load(repo, match_id)
    engine = scoring.ScoringEngine(repo.format_for(match_id))

    for event in parsed:
        updated = engine.apply_ball(match, event)
        if updated is match:
            console.print(f"[red]Match is {match.status.value}; '{event.value}' not scored[/red]")
            break
        match = updated

    repo.save(match_id, match)
    _print_scoreboard(match, repo)
    session.close()


@cli.command()
@click.argument("match_id")
@click.option("--count", default=1, help="Number of balls to take back")
def undo(match_id: str, count: int):
    """Undo the most recent balls of the current innings"""
    session = get_session()
    repo = MatchRepository(session)
    match = _load(repo, match_id)
    for _ in range(count):
        match = scoring.undo_last_ball(match)
    repo.save(match_id, match)
    _print_scoreboard(match, repo)
    session.close()


@cli.command()
@click.argument("match_id")
def show(match_id: str):
    """Show the live scoreboard for a match"""
    session = get_session()
    repo = MatchRepository(session)
    _print_scoreboard(_load(repo, match_id), repo)
    session.close()


def _print_scoreboard(match, repo: MatchRepository):
    """Print the projected scoreboard"""
    view = project(match, repo.team_lookup())

    header = f"[bold]{view.team_a_name}[/bold] vs [bold]{view.team_b_name}[/bold]  [dim]{view.status}[/dim]"
    console.print(Panel(
        f"{view.batting_team_name}  [bold cyan]{view.score_line}[/bold cyan] ({view.overs_line})\n"
        f"{view.target_line}  |  {view.recap_line}",
        title=header,
    ))

    bat_table = Table(title="Batting")
    bat_table.add_column("Batter", style="cyan")
    bat_table.add_column("R", justify="right")
    bat_table.add_column("B", justify="right")
    for line in (view.striker, view.non_striker):
        if line:
            bat_table.add_row(line.name + ("*" if line.on_strike else ""), str(line.runs), str(line.balls))
    console.print(bat_table)

    if view.bowler:
        bowl_table = Table(title="Bowling")
        bowl_table.add_column("Bowler", style="magenta")
        bowl_table.add_column("O", justify="right")
        bowl_table.add_column("W-R", justify="right")
        bowl_table.add_row(view.bowler.name, f"{view.bowler.overs}.{view.bowler.balls}", view.bowler.figures)
        console.print(bowl_table)

    slots = " ".join(slot.label if slot else "·" for slot in view.over_slots)
    console.print(f"This over: {slots}   CRR: {view.crr}")
    if view.sticker:
        console.print(f"[bold green]{view.sticker}[/bold green]")


if __name__ == "__main__":
    cli()
