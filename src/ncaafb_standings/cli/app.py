from __future__ import annotations

import typer

from ncaafb_standings.cli.standings import app as standings_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(standings_app, name="standings")
