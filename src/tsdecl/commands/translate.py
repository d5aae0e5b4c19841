"""Type translation commands for tsdecl."""
import json
import typer
from pathlib import Path
from pydantic import TypeAdapter, ValidationError

from ..config import load_generator_config
from ..logging import get_diagnostics
from ..models import TypeDescriptor
from ..storage import read_json
from ..translation import ImportSession, clean_reserved, is_imported, translate

_descriptor_list = TypeAdapter(list[TypeDescriptor])


def _load_descriptors(path: Path) -> list[TypeDescriptor]:
    try:
        data = read_json(path)
        if isinstance(data, list):
            return _descriptor_list.validate_python(data)
        return [TypeDescriptor.model_validate(data)]
    except (json.JSONDecodeError, ValidationError) as e:
        typer.echo(f"Error: invalid descriptor file {path}: {e}", err=True)
        raise typer.Exit(1)


def translate_cmd(
    file: Path = typer.Argument(..., help="JSON file with a descriptor or a list of descriptors"),
    session: bool = typer.Option(False, "--session", "-s", help="Also report import status"),
    base: Path = typer.Option(Path("."), "--base", "-b", help="Base path for the diagnostics log"),
) -> None:
    """Translate host type descriptors to TypeScript types.

    Example:
        tsdecl translate types.json
        tsdecl translate types.json --session
    """
    if not file.exists():
        typer.echo(f"Error: {file} not found", err=True)
        raise typer.Exit(1)

    try:
        config = load_generator_config()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    diagnostics = get_diagnostics()
    import_session = ImportSession()

    for descriptor in _load_descriptors(file):
        ts_type = translate(descriptor, diagnostics)
        if session:
            status = "visible" if is_imported(descriptor, import_session) else "import"
            typer.echo(f"{ts_type}\t{status}")
        else:
            typer.echo(ts_type)

    if config.diagnostics_log:
        diagnostics.write_log(base)


def escape_cmd(
    identifiers: list[str] = typer.Argument(..., help="Identifiers to escape"),
) -> None:
    """Escape identifiers that collide with TypeScript reserved words.

    Example:
        tsdecl escape class fooBar
    """
    for identifier in identifiers:
        typer.echo(clean_reserved(identifier))
