"""
sf-delete-order - compute a safe delete order for Salesforce SObjects.

Usage:
    sf-delete-order order force-app/main/default/objects
    sf-delete-order order "objects/Account.object;objects/Contact.object" -a "delete [SELECT Id FROM {name}];"
    sf-delete-order graph objects
"""

from __future__ import annotations

import typer

from sf_delete_order.cli.commands.graph import graph as graph_cmd
from sf_delete_order.cli.commands.init import init as init_cmd
from sf_delete_order.cli.commands.order import order as order_cmd
from sf_delete_order.cli.helpers import configure_logging, console

__version__ = "0.1.0"

app = typer.Typer(
    name="sf-delete-order",
    help="Compute the order in which Salesforce SObjects can be deleted",
    add_completion=False,
    no_args_is_help=True,
)

app.command("order")(order_cmd)
app.command("graph")(graph_cmd)
app.command("init")(init_cmd)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sf-delete-order {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging on stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Compute the order in which Salesforce SObjects can be deleted."""
    configure_logging(debug)


def main():
    app()


if __name__ == "__main__":
    main()
