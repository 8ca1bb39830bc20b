"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpost.cli.commands import build_cmd, check_cmd, list_cmd, main_callback, render_cmd


app = typer.Typer(name="mdpost", no_args_is_help=True, help="Markdown post loader and renderer")

app.callback()(main_callback)
app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
app.command(name="list")(list_cmd)
app.command(name="render")(render_cmd)
