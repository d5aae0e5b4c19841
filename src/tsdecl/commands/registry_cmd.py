"""Scope registry and override lookup commands for tsdecl."""
import typer
from pathlib import Path
from typing import Optional

from ..config import load_generator_config
from ..models import GeneratorConfig, ModuleInfo
from ..registry import ScopeRegistry
from ..translation import OverrideRegistry


def _config() -> GeneratorConfig:
    try:
        return load_generator_config()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def scope_cmd(
    module: str = typer.Argument(..., help="Host module name, e.g. vertx-core"),
    group: str = typer.Argument(..., help="Module group package, e.g. io.vertx"),
) -> None:
    """Resolve the npm package name for a host module.

    The registry is read from TSDECL_SCOPE_REGISTRY.

    Example:
        tsdecl scope vertx-core io.vertx
    """
    registry = ScopeRegistry.from_config(_config())
    typer.echo(registry.resolve_package_name(ModuleInfo(name=module, group_package=group)))


def override_cmd(
    type_name: str = typer.Argument(..., help="Qualified host type name"),
    method: str = typer.Argument(..., help="Method key"),
    base_dir: Optional[Path] = typer.Option(None, "--dir", "-d", help="Override directory (default TSDECL_BASEDIR)"),
) -> None:
    """Show the signature override declared for a method.

    Example:
        tsdecl override io.vertx.core.Vertx close
    """
    if base_dir is None:
        base_dir = _config().base_dir

    registry = OverrideRegistry(base_dir)
    try:
        args = registry.get_override_args(type_name, method)
        ret = registry.get_override_return(type_name, method)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if args is None and ret is None:
        typer.echo("No override.")
        return

    typer.echo(f"args: {args if args is not None else '(default)'}")
    typer.echo(f"return: {ret if ret is not None else '(default)'}")
