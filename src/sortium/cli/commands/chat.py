"""Chat command for interactive dialog sessions."""

from pathlib import Path

import typer

app = typer.Typer(help="Walk a dialog graph, answering in natural language")


@app.callback(invoke_without_command=True)
def run_chat(
    ctx: typer.Context,
    dialog: Path | None = typer.Option(None, "--dialog", "-d", help="Path to dialog.yaml"),
    template: Path | None = typer.Option(
        None, "--template", "-t", help="Path to the decision prompt template"
    ),
    settings: Path | None = typer.Option(
        None, "--settings", "-s", help="Path to sortium.yaml or its directory"
    ),
    model: str | None = typer.Option(None, "--model", "-m", help="Completion model name"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level override"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
) -> None:
    """Start an interactive dialog session."""
    if ctx.invoked_subcommand:
        return

    from sortium.cli.chat_runner import ChatConfig, run_chat_session

    chat_config = ChatConfig(
        settings_path=settings,
        dialog_path=dialog,
        template_path=template,
        model=model,
        log_level=log_level,
        debug=debug,
    )

    try:
        run_chat_session(chat_config)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        if debug:
            raise
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)
