"""``sf-delete-order init`` command: write a starter config file."""

from __future__ import annotations

from typing import Optional

import typer
from rich.markup import escape

from sf_delete_order.cli.helpers import console, fail
from sf_delete_order.config import OrderConfig, default_config_path, save_config
from sf_delete_order.exceptions import DeleteOrderError
from sf_delete_order.render import validate_template


def init(
    apex_template: Optional[str] = typer.Option(
        None,
        "--apex-template",
        "-a",
        help="Default output template, '{name}' is replaced by the SObject name",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Create .sf-delete-order/config.yaml in the current directory."""
    config_file = default_config_path()
    if config_file.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {escape(str(config_file))} "
            "(use --force to overwrite)",
            highlight=False,
        )
        raise typer.Exit(1)

    try:
        if apex_template is not None:
            validate_template(apex_template)
    except DeleteOrderError as exc:
        raise fail(exc)

    written = save_config(OrderConfig(template=apex_template), config_file)
    console.print(f"[green]Wrote[/green] {escape(str(written))}", highlight=False)


__all__ = ["init"]
