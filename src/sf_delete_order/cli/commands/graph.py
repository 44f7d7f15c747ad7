"""``sf-delete-order graph`` command: show which lookups constrain the order."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from sf_delete_order.cli.helpers import (
    console,
    fail,
    load_config_or_exit,
    metadata_paths_or_exit,
)
from sf_delete_order.exceptions import DeleteOrderError
from sf_delete_order.salesforce.ordering import requires_ordering, to_graph
from sf_delete_order.salesforce.parser import parse_paths


def graph(
    paths: List[str] = typer.Argument(
        ...,
        help="Metadata files or directories; several may be joined with ';'",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="Config file (default: .sf-delete-order/config.yaml)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
) -> None:
    """List every relationship field and whether it forces a delete order."""
    config = load_config_or_exit(config_file)
    metadata_paths = metadata_paths_or_exit(paths)

    try:
        sobjects = parse_paths(metadata_paths, config.exclude_suffixes)
        dependency_graph = to_graph(sobjects)
    except DeleteOrderError as exc:
        raise fail(exc)

    acyclic = dependency_graph.topological_sort() is not None
    rows = [
        (sobject, field, requires_ordering(field))
        for sobject in sobjects
        for field in sobject.lookup_fields
    ]

    if json_output:
        payload = {
            "sobjects": [s.name for s in sobjects],
            "edges": [
                {"from": sobjects[u].name, "to": sobjects[v].name}
                for u, v in dependency_graph.edges()
            ],
            "fields": [
                {"sobject": s.name, **f.to_dict(), "orders_delete": ordered}
                for s, f, ordered in rows
            ],
            "acyclic": acyclic,
        }
        print(json.dumps(payload, indent=2))
        return

    table = Table(title="Delete Dependencies", show_header=True)
    table.add_column("SObject", style="cyan")
    table.add_column("Field")
    table.add_column("Target", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Constraint", style="yellow")
    table.add_column("Orders", style="green")

    for sobject, field, ordered in rows:
        table.add_row(
            escape(sobject.name),
            escape(field.full_name),
            escape(field.target_sobject),
            str(field.lookup_type),
            str(field.delete_constraint),
            "yes" if ordered else "no",
        )

    console.print(table)
    console.print(
        f"{len(sobjects)} SObjects, {dependency_graph.edge_count} ordering edge(s)"
    )
    if not acyclic:
        console.print("[red]Restrict lookups form a cycle; no delete order exists.[/red]")


__all__ = ["graph"]
