"""
Point d'entrée CLI de MovieStore.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import Settings
from .container import Container
from .logging_config import configure_logging
from .services.seeding import seed_demo_movies

VERSION = "0.1.0"

app = typer.Typer(
    name="moviestore",
    help="Service HTTP de gestion d'un catalogue de films",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration MovieStore")
    typer.echo(f"Backend : {config.repository_backend}")
    if config.uses_database:
        typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Écoute : {config.bind_address}:{config.port}")
    typer.echo(f"Origines CORS : {', '.join(config.cors_origins) or 'aucune'}")
    typer.echo(f"Films de démonstration : {'oui' if config.seed_demo_data else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MovieStore v{VERSION}")


@app.command(name="init-db")
def init_db(
    seed: Annotated[bool, typer.Option(help="Insérer les films de démonstration")] = False,
) -> None:
    """Crée la table movies (backend SQL)."""
    config = get_config()
    if not config.uses_database:
        typer.echo("Le backend mémoire n'utilise pas de base de données.")
        raise typer.Exit(code=1)

    container.database.init()
    typer.echo(f"Base initialisée : {config.database_url}")
    if seed:
        count = seed_demo_movies(container.movie_repository())
        typer.echo(f"{count} film(s) inséré(s)")


@app.command(name="list")
def list_movies() -> None:
    """Affiche les films stockés en base (backend SQL)."""
    config = get_config()
    if not config.uses_database:
        typer.echo("Le backend mémoire ne conserve rien entre deux exécutions.")
        raise typer.Exit(code=1)

    container.database.init()
    table = Table(title="Films")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    table.add_column("Prix", justify="right")
    table.add_column("Lien")
    for movie in container.movie_repository().list_all():
        table.add_row(str(movie.id), movie.name, f"{movie.price}", movie.link)
    console.print(table)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web MovieStore."""
    import uvicorn

    config = get_config()
    host = host or config.bind_address
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    # log_config=None : uvicorn garde ses loggers, redirigés vers loguru
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload, log_config=None)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    logger.info("Démarrage de MovieStore", version=VERSION)

    app()


if __name__ == "__main__":
    main()
