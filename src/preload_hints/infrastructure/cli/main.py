import typer

from .commands import (
    inject as inject_cmd,
    validate as validate_cmd,
)

app = typer.Typer(help="preload-hints CLI")

app.add_typer(inject_cmd.app, name="inject")
app.add_typer(validate_cmd.app, name="validate")


if __name__ == "__main__":
    app()
