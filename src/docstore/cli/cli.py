"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import get_cmd, list_cmd, search_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="In-memory document store: load, look up, and search")

app.command(name="search")(search_cmd)
app.command(name="get")(get_cmd)
app.command(name="list")(list_cmd)
