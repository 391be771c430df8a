from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from multi_catalog.config import load_build_config, save_build_config
from multi_catalog.core.assembler import clear_cached_data

console = Console()


def clean(
    config: Annotated[Path | None, typer.Option(help="Build configuration file.")] = None,
) -> None:
    """Delete the files produced by the previous build."""
    build_config = load_build_config(config)
    if not build_config.produced_artifacts:
        console.print("Nothing to clean.")
        return

    removed = clear_cached_data(build_config)
    save_build_config(build_config, config)
    for path in removed:
        console.print(f"[green]Deleted[/green] {path}")
    console.print(f"({len(removed)} files)")
