from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from multi_catalog.config import load_build_config, save_build_config
from multi_catalog.core.assembler import BUILDER_NAME, CatalogAssembler
from multi_catalog.core.errors import CatalogBuildError
from multi_catalog.models import BuildContext, BuildResult, CatalogBuildDescriptor
from multi_catalog.profiles import InMemoryProfileResolver

console = Console()


def load_context(path: Path) -> BuildContext:
    try:
        return BuildContext.model_validate_json(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        console.print(f"[red]Build context not found:[/red] {path}")
        raise typer.Exit(1) from None
    except ValidationError as exc:
        console.print(f"[red]Invalid build context {path}:[/red]\n{escape(str(exc))}")
        raise typer.Exit(1) from None


def write_descriptors(descriptors: list[CatalogBuildDescriptor], output: Path) -> list[Path]:
    output.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for descriptor in descriptors:
        target = output / descriptor.catalog_filename
        target.write_text(descriptor.model_dump_json(indent=2) + "\n", encoding="utf-8")
        written.append(target)
    return written


def _render_result(result: BuildResult) -> None:
    table = Table(show_lines=False)
    for header in ("catalog", "identifier", "locations", "default"):
        table.add_column(header)
    for descriptor in result.descriptors:
        table.add_row(
            descriptor.catalog_filename,
            descriptor.identifier,
            str(len(descriptor.locations)),
            "yes" if descriptor.is_default else "",
        )
    console.print(table)
    for diagnostic in result.diagnostics:
        console.print(f"[yellow]{escape(diagnostic)}[/yellow]")


def build(
    context: Annotated[Path, typer.Argument(help="Build context JSON produced by the base builder.")],
    config: Annotated[Path | None, typer.Option(help="Build configuration file.")] = None,
    output: Annotated[Path, typer.Option(help="Directory receiving one JSON file per catalog.")] = Path("catalogs"),
) -> None:
    """Split the build context's locations into per-group catalogs."""
    build_context = load_context(context)
    build_config = load_build_config(config)
    assembler = CatalogAssembler(InMemoryProfileResolver.from_settings(build_context.settings))

    try:
        result = assembler.build(build_context, build_config)
    except CatalogBuildError as exc:
        console.print(f"[red]Build failed:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from None

    written = write_descriptors(result.descriptors, output)
    saved = save_build_config(build_config, config)
    _render_result(result)
    console.print(f"[green]Wrote[/green] {len(written)} catalog(s) to {output}")
    console.print(f"[green]Recorded[/green] {len(result.produced_artifacts)} artifact prefix(es) in {saved}")


def describe() -> None:
    """Show the builder name."""
    console.print(BUILDER_NAME)
