from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from multi_catalog.cli.build import load_context
from multi_catalog.core.enumeration import enumerate_addressable_folder
from multi_catalog.core.errors import EnumerationError

console = Console()


def enumerate_folder(
    path: Annotated[str, typer.Argument(help="Project-relative folder path, e.g. Assets/Prefabs.")],
    context: Annotated[Path, typer.Option(help="Build context JSON holding the content settings.")],
    project_root: Annotated[Path, typer.Option(help="Project root the asset paths are relative to.")] = Path("."),
    recursive: Annotated[bool, typer.Option(help="Descend into non-addressable subfolders.")] = True,
) -> None:
    """List the files an addressable folder contributes to its group."""
    build_context = load_context(context)
    try:
        paths = enumerate_addressable_folder(path, build_context.settings, project_root, recursive=recursive)
    except EnumerationError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None

    for asset_path in paths:
        console.print(escape(asset_path))
    console.print(f"({len(paths)} files)")
