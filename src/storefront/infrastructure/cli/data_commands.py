"""CLI commands for the data file itself."""

from __future__ import annotations

import click

from storefront.application.repair_document import (
    DocumentHealthDTO,
    RepairDocumentHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import document_store


def _describe(report: DocumentHealthDTO) -> None:
    if report.recovered:
        click.echo(f"Data file is unreadable: {report.cause}")
    elif report.defaulted:
        click.echo(f"Data file is missing: {', '.join(report.defaulted)}")
    else:
        click.echo("Data file is healthy.")
    click.echo(f"Products: {report.product_count}  Orders: {report.order_count}")


@click.command("check")
def data_check() -> None:
    """Report whether the data file loads cleanly."""
    store = document_store()
    click.echo(f"Data file: {store.file_path}")
    report = RepairDocumentHandler(store).handle(repair=False)
    _describe(report)
    if report.needs_repair:
        raise SystemExit(1)


@click.command("repair")
def data_repair() -> None:
    """Rewrite the data file from what could be recovered.

    An unreadable file is replaced by an empty document.
    """
    store = document_store()
    try:
        report = RepairDocumentHandler(store).handle(repair=True)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _describe(report)
    if report.repaired:
        click.echo(f"Repaired {store.file_path}")
