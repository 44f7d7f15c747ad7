"""Shared helpers for sf-delete-order CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import typer
from rich.console import Console
from rich.markup import escape

from sf_delete_order.config import OrderConfig, load_config
from sf_delete_order.exceptions import DeleteOrderError

PATH_DELIMITER = ";"

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def configure_logging(debug: bool) -> None:
    """Route library logging to stderr; DEBUG when ``--debug`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def split_paths(raw_paths: Iterable[str]) -> list[Path]:
    """Expand ``a;b`` style arguments into individual paths, dropping blanks."""
    paths: list[Path] = []
    for raw in raw_paths:
        for part in raw.split(PATH_DELIMITER):
            part = part.strip()
            if part:
                paths.append(Path(part))
    return paths


def metadata_paths_or_exit(raw_paths: Iterable[str]) -> list[Path]:
    """Split path arguments, rejecting input that names no path at all."""
    paths = split_paths(raw_paths)
    if not paths:
        raise fail(DeleteOrderError("No metadata paths given"))
    return paths


def fail(exc: Exception, code: int = 1) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    return typer.Exit(code)


def load_config_or_exit(config_file: Path | None) -> OrderConfig:
    try:
        return load_config(config_file)
    except DeleteOrderError as exc:
        raise fail(exc)


__all__ = [
    "PATH_DELIMITER",
    "console",
    "err_console",
    "configure_logging",
    "split_paths",
    "metadata_paths_or_exit",
    "fail",
    "load_config_or_exit",
]
