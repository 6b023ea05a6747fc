"""
Commandes CLI du traitement de la mediatheque (scan, rename).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.table import Table

from mediorg.adapters.cli.helpers import apply_overrides, console, with_container
from mediorg.services.library import OutcomeStatus, ProcessReport
from mediorg.services.linker import LinkAction

_STATUS_STYLE = {
    OutcomeStatus.RENAMED: "green",
    OutcomeStatus.SKIPPED: "yellow",
    OutcomeStatus.FAILED: "red",
}


def scan(
    root: Annotated[Path, typer.Argument(help="Repertoire a scanner")],
    subtitles: Annotated[
        bool,
        typer.Option("--subtitles", "-s", help="Inclure les sous-titres"),
    ] = False,
) -> None:
    """Liste les medias trouves sous un repertoire."""
    _scan(root, subtitles)


@with_container()
def _scan(container, root: Path, subtitles: bool) -> None:
    scanner = container.scanner_service()
    try:
        media_list = scanner.find_media(root, include_subtitles=subtitles)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Medias dans {escape(str(root))}", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("Fichier")
    table.add_column("Identite", style="bold")
    table.add_column("Metadonnees", style="dim")

    for media in media_list:
        metadata = media.metadata
        table.add_row(
            media.kind,
            escape(media.file.name if media.file else "?"),
            escape(str(media)),
            escape(str(metadata)) if metadata is not None else "",
        )

    console.print(table)
    console.print(f"\n[bold]Total: {len(media_list)} media(s)[/bold]")


def rename(
    root: Annotated[Path, typer.Argument(help="Repertoire des medias a renommer")],
    action: Annotated[
        Optional[LinkAction],
        typer.Option("--action", "-a", help="Strategie de placement"),
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--lenient", help="Arreter a la premiere erreur"),
    ] = None,
    force: Annotated[
        Optional[bool],
        typer.Option("--force/--no-force", help="Remplacer les fichiers existants"),
    ] = None,
) -> None:
    """Renomme les medias d'un repertoire vers la mediatheque."""
    _rename(root, action, strict, force)


@with_container()
def _rename(
    container,
    root: Path,
    action: Optional[LinkAction],
    strict: Optional[bool],
    force: Optional[bool],
) -> None:
    apply_overrides(container, action=action, strict=strict, force=force)

    try:
        media_list = container.scanner_service().find_media(root)
        report = container.library_service().process_library(media_list)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        # Mode strict : toute erreur interrompt le lot
        console.print(f"[red]Traitement interrompu: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _display_report(report)
    if report.failed:
        raise typer.Exit(1)


def _display_report(report: ProcessReport) -> None:
    """Affiche le bilan d'un traitement par lot."""
    table = Table(title="Bilan du renommage", show_header=True)
    table.add_column("Fichier")
    table.add_column("Statut")
    table.add_column("Destination / erreur")

    for outcome in report.outcomes:
        style = _STATUS_STYLE[outcome.status]
        if outcome.status == OutcomeStatus.RENAMED:
            detail = str(outcome.destination)
        else:
            detail = outcome.error or ""
        table.add_row(
            escape(outcome.source),
            f"[{style}]{outcome.status.value}[/{style}]",
            escape(detail),
        )

    console.print(table)
    console.print(
        f"\n[bold]{report.renamed} renomme(s), {report.skipped} ignore(s), "
        f"{report.failed} echec(s) sur {report.total}[/bold]"
    )
