"""Main CLI entry point for Sortium"""

import typer

from sortium.__version__ import __version__
from sortium.cli.commands import chat as chat_module

app = typer.Typer(
    name="sortium",
    help="Sortium - natural-language dialog tree runner",
    add_completion=False,
)

# Register subcommands
app.add_typer(chat_module.app, name="chat", help="Start an interactive dialog session")


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"Sortium version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Sortium - natural-language dialog tree runner"""
    pass


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
