import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from multi_catalog.cli.build import build, describe
from multi_catalog.cli.clean import clean
from multi_catalog.cli.folders import enumerate_folder

app = typer.Typer(
    name="multi-catalog",
    help="Multi-catalog CLI: split content locations into per-group catalogs.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress at INFO level.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("build")(build)
app.command("clean")(clean)
app.command("enumerate")(enumerate_folder)
app.command("describe")(describe)


def main() -> None:
    app()
