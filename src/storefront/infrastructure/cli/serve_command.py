"""CLI command that runs the HTTP API."""

from __future__ import annotations

import click
import uvicorn

from storefront.infrastructure.settings import get_settings


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default from settings).")
@click.option("--port", default=None, type=int, help="Port to bind (default from settings).")
@click.option("--reload", is_flag=True, default=False, help="Restart on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "storefront.infrastructure.http.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
