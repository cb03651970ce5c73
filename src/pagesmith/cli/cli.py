"""CLI entrypoint: Typer app definition and command registration"""

import typer

from pagesmith.cli.commands import build_cmd, hash_password_cmd, init_cmd, serve_cmd


app = typer.Typer(name="pagesmith", no_args_is_help=True, help="Static site builder and admin handlers")

app.command(name="build")(build_cmd)
app.command(name="serve")(serve_cmd)
app.command(name="init")(init_cmd)
app.command(name="hash-password")(hash_password_cmd)
