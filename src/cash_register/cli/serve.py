#!/usr/bin/env python3
"""Serve CLI - run the HTTP API under uvicorn."""

import click
import uvicorn

from ..core.config import get_config


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Reload on code changes (development only)")
def serve(host: str, port: int, reload: bool) -> None:
    """
    Run the cash register HTTP API.

    Example:
      cash-register serve --port 8080
    """
    config = get_config()
    uvicorn.run(
        "cash_register.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=config.log_level.lower(),
    )
