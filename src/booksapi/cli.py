#!/usr/bin/env python3
"""
Main CLI entry point for the Books API server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn
from alembic import command
from alembic.config import Config

from booksapi import __version__
from booksapi.logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config(config_path: str | None = None) -> Config:
    """Get Alembic configuration.

    Without ``config_path`` this looks for ``alembic.ini`` at the project root,
    which only exists in a source checkout or an editable install.
    """
    alembic_ini = (
        Path(config_path) if config_path else Path(__file__).resolve().parents[2] / "alembic.ini"
    )

    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    return Config(str(alembic_ini))


@click.group()
@click.version_option(version=__version__, prog_name="booksapi")
def cli() -> None:
    """Books API CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8080, type=int, help="Port to bind to (default: 8080)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Books API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Books API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Settings are re-read by every worker process on import
    if log_level == "debug":
        os.environ["BOOKSAPI_DEBUG"] = "true"
        os.environ["BOOKSAPI_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSAPI_DEBUG", "false")
        os.environ.setdefault("BOOKSAPI_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "booksapi.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from booksapi.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.group()
@click.option(
    "--config",
    "config_path",
    envvar="BOOKSAPI_ALEMBIC_CONFIG",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to alembic.ini (default: alembic.ini in the project root)",
)
@click.pass_context
def db(ctx: click.Context, config_path: str | None) -> None:
    """Manage database migrations."""
    ctx.obj = {"config_path": config_path}


@db.command()
@click.argument("revision", default="head")
@click.pass_context
def upgrade(ctx: click.Context, revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    configure_logging()
    try:
        config = get_alembic_config(ctx.obj["config_path"])
        logger.info("Upgrading database", revision=revision)
        command.upgrade(config, revision)
        logger.info("Database upgrade completed successfully")
    except Exception as e:
        logger.error("Database upgrade failed", error=str(e))
        sys.exit(1)


@db.command()
@click.argument("revision", default="-1")
@click.pass_context
def downgrade(ctx: click.Context, revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    configure_logging()
    try:
        config = get_alembic_config(ctx.obj["config_path"])
        logger.info("Downgrading database", revision=revision)
        command.downgrade(config, revision)
        logger.info("Database downgrade completed successfully")
    except Exception as e:
        logger.error("Database downgrade failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
