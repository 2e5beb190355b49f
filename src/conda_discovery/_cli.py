"""Command line interface printing the discovered conda interpreters as JSON."""

from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from ._service import get_interpreters

app = typer.Typer(
    name="conda-discovery",
    help="List the Python interpreters of the conda environments installed on this machine",
    add_completion=False,
)


@app.command()
def discover(
    conda: Optional[str] = typer.Option(  # noqa: UP045
        None, "--conda",
        help="conda executable to run when no other installation is found (default: conda on PATH)",
    ),
    verbose: bool = typer.Option(  # noqa: FBT001
        False, "--verbose", "-v",
        help="Log discovery steps to stderr",
    ),
) -> None:
    """
    Print every conda interpreter found as a JSON array; the array is empty when conda is missing or broken.

    Examples:

        $ conda-discovery

        $ conda-discovery --conda /opt/miniconda3/bin/conda -v
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    interpreters = get_interpreters(conda=conda)
    typer.echo(json.dumps([interpreter.to_dict() for interpreter in interpreters], indent=2))


def main() -> None:
    app()


__all__ = [
    "app",
    "main",
]
