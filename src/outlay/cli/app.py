from __future__ import annotations

"""
Outlay CLI Wrapper (Typer + Rich)

Local-only expense tracker: expenses, partners, and categories held in memory
for the session, seeded from config/seed.yml or the built-in seed.

All paths are resolved from a single workspace root:
  --data-dir / OUTLAY_DATA env var / current working directory
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from outlay.errors import SeedError
from outlay.services.session import SESSION_KEY, LedgerSession, require_session
from outlay.workspace import Workspace

from .command.util import apply_theme, console

APP_HELP = "Outlay expense tracker (local-only)"
HELP_YEAR = "Year to filter (e.g., 2024)"
HELP_MONTH = "Month to filter, 1-12 (use with --year)"

# Commands that must run without loading the seed
_NO_SESSION_COMMANDS = {"init"}

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, markup=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar="OUTLAY_DATA",
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Outlay CLI: all paths resolved from a single workspace root."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    workspace = Workspace.resolve(data_dir)
    ctx.obj["workspace"] = workspace

    if ctx.invoked_subcommand in _NO_SESSION_COMMANDS:
        return

    try:
        session = LedgerSession.start(workspace)
    except SeedError as e:
        console.print(f"[error]Error:[/error] {e}")
        raise typer.Exit(code=1)

    ctx.obj[SESSION_KEY] = session
    apply_theme(session.theme.theme)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


def _session(ctx: typer.Context) -> LedgerSession:
    return require_session(ctx.obj)


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace with a config directory and starter seed file.

    Safe to run on an existing workspace; skips anything that already exists.

    Examples:
      outlay --data-dir ~/books init
      outlay init
    """
    from outlay.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def dashboard(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", help=HELP_YEAR),
    month: Optional[int] = typer.Option(None, "--month", "-m", min=1, max=12, help=HELP_MONTH),
):
    """Show totals, spending by category, and spending by partner.

    Examples:
      outlay dashboard
      outlay dashboard --year 2024 --month 3
    """
    from outlay.cli.command import dashboard as cmd_dashboard

    code = cmd_dashboard.run(session=_session(ctx), year=year, month=month)
    raise typer.Exit(code=code)


@app.command()
def expenses(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", help=HELP_YEAR),
    month: Optional[int] = typer.Option(None, "--month", "-m", min=1, max=12, help=HELP_MONTH),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Max number of rows to show"),
):
    """List expenses, newest first.

    Examples:
      outlay expenses
      outlay expenses --year 2024 --limit 20
    """
    from outlay.cli.command import expenses as cmd_expenses

    code = cmd_expenses.run(session=_session(ctx), year=year, month=month, limit=limit)
    raise typer.Exit(code=code)


@app.command()
def partners(
    ctx: typer.Context,
    year: Optional[int] = typer.Option(None, "--year", "-y", help=HELP_YEAR),
    month: Optional[int] = typer.Option(None, "--month", "-m", min=1, max=12, help=HELP_MONTH),
):
    """Show what each partner paid against their expected contribution."""
    from outlay.cli.command import partners as cmd_partners

    code = cmd_partners.run(session=_session(ctx), year=year, month=month)
    raise typer.Exit(code=code)


@app.command()
def categories(ctx: typer.Context):
    """List all categories with usage statistics."""
    from outlay.cli.command import categories as cmd_categories

    code = cmd_categories.run(session=_session(ctx))
    raise typer.Exit(code=code)


@app.command()
def theme(
    ctx: typer.Context,
    toggle: bool = typer.Option(False, "--toggle", help="Switch between light and dark"),
    set_theme: Optional[str] = typer.Option(None, "--set", help="Set theme explicitly (light or dark)"),
):
    """Show or change the display theme. Changes are remembered for the next session.

    Examples:
      outlay theme
      outlay theme --toggle
      outlay theme --set dark
    """
    from outlay.cli.command import theme as cmd_theme

    code = cmd_theme.run(session=_session(ctx), toggle=toggle, set_theme=set_theme)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
