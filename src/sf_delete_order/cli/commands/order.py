"""``sf-delete-order order`` command.

Reads SObject metadata, computes the delete order and prints one rendered
template line per SObject.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from sf_delete_order.cli.helpers import (
    err_console,
    fail,
    load_config_or_exit,
    metadata_paths_or_exit,
)
from sf_delete_order.exceptions import DeleteOrderError
from sf_delete_order.render import render_order
from sf_delete_order.salesforce.ordering import delete_order
from sf_delete_order.salesforce.parser import parse_paths

CYCLE_EXIT_CODE = 2


def order(
    paths: List[str] = typer.Argument(
        ...,
        help="Metadata files or directories; several may be joined with ';'",
    ),
    apex_template: Optional[str] = typer.Option(
        None,
        "--apex-template",
        "-a",
        help="Template for each output line, '{name}' is replaced by the SObject name",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="Config file (default: .sf-delete-order/config.yaml)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """Print SObjects in an order that can be deleted without Restrict violations."""
    config = load_config_or_exit(config_file)
    metadata_paths = metadata_paths_or_exit(paths)
    template = apex_template if apex_template is not None else config.template

    try:
        sobjects = parse_paths(metadata_paths, config.exclude_suffixes)
        ordered = delete_order(sobjects)
        if ordered is None:
            err_console.print(
                "[red]No valid delete order:[/red] Restrict lookups form a cycle "
                f"among the {len(sobjects)} SObjects read.",
                highlight=False,
            )
            raise typer.Exit(CYCLE_EXIT_CODE)
        lines = render_order(ordered, template)
    except DeleteOrderError as exc:
        raise fail(exc)

    if json_output:
        print(json.dumps({"order": [s.name for s in ordered], "lines": lines}, indent=2))
        return

    # Plain echo: rendered Apex contains brackets Rich would read as markup
    for line in lines:
        typer.echo(line)


__all__ = ["order", "CYCLE_EXIT_CODE"]
