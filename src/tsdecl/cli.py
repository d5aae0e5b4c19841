"""tsdecl CLI - TypeScript declaration type mapping."""

import typer

app = typer.Typer(
    name="tsdecl",
    help="TypeScript type mapping for generated declaration files",
    no_args_is_help=True,
)


@app.callback()
def main(ctx: typer.Context) -> None:
    """tsdecl - TypeScript type mapping for generated declaration files."""


# Import and register command modules
from .commands import translate as translate_cmd
from .commands import registry_cmd
from .commands import logs as logs_cmd

app.command(name="translate")(translate_cmd.translate_cmd)
app.command(name="escape")(translate_cmd.escape_cmd)
app.command(name="scope")(registry_cmd.scope_cmd)
app.command(name="override")(registry_cmd.override_cmd)

# Register logs commands as a subcommand group
app.add_typer(logs_cmd.app, name="logs")


if __name__ == "__main__":
    app()
