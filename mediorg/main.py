"""
Point d'entrée CLI de MediOrg.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import rename, scan
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="mediorg",
    help="Renommage et classement d'une médiathèque",
)
container = Container()

app.command()(scan)
app.command()(rename)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Action : {config.action.value}")
    typer.echo(f"Mode strict : {'oui' if config.strict else 'non'}")
    typer.echo(f"Destination existante fatale : {'oui' if config.strict_existing else 'non'}")
    typer.echo(f"Remplacement forcé : {'oui' if config.force else 'non'}")
    typer.echo(f"Films : {config.movies_dir}")
    typer.echo(f"  Template : {config.movies_template or '(aucun)'}")
    typer.echo(f"Séries : {config.tvshows_dir}")
    typer.echo(f"  Template : {config.tvshows_template or '(aucun)'}")
    typer.echo(f"Langues : {', '.join(config.languages)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediOrg v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web MediOrg."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("mediorg.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de MediOrg", version=__version__)

    app()


if __name__ == "__main__":
    main()
