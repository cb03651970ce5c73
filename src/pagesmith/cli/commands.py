"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer
import uvicorn

from pagesmith.auth.passwords import hash_password
from pagesmith.config import Settings, load_config
from pagesmith.core.build import run_build
from pagesmith.crud.database import init_db, make_engine
from pagesmith.errors import PagesmithError
from pagesmith.server.app import create_app


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def build_cmd():
    """Render every .html page in the pages directory into the output directory."""
    settings = _settings()
    try:
        results = run_build(settings)
    except PagesmithError as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Generated {len(results)} page(s) in {settings.output_dir}/")


def serve_cmd(
    host: Annotated[str, typer.Option("--host", help="Bind address")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Bind port")] = 8888,
    db: Annotated[Optional[str], typer.Option("--db-url", help="Blob store database URL")] = None,
    ):
    """Run the auth, pages, leads, and signaling handlers on a local server."""
    settings = _settings(overrides={"db_url": db})
    try:
        app = create_app(settings)
    except PagesmithError as e:
        _fail(str(e))
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


def init_cmd(
    db: Annotated[Optional[str], typer.Option("--db-url", help="Blob store database URL")] = None,
    ):
    """Create the blob store tables."""
    settings = _settings(overrides={"db_url": db})
    init_db(make_engine(settings.db_url))
    typer.echo(f"Database initialized at: {settings.db_url}")


def hash_password_cmd(
    password: Annotated[str, typer.Option(prompt=True, hide_input=True, confirmation_prompt=True)],
    ):
    """Print an argon2id hash for PAGESMITH_ADMIN_PASSWORD_HASH."""
    try:
        typer.echo(hash_password(password))
    except ValueError as e:
        _fail(str(e))
