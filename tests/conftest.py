from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tests.utils import FIXTURES_DIR, object_xml


@pytest.fixture()
def objects_dir() -> Path:
    """Account (SetNull/Restrict/Cascade lookups to Contact) and Contact."""
    return FIXTURES_DIR / "objects"


@pytest.fixture()
def write_object(tmp_path: Path) -> Callable[..., Path]:
    """Write ``<name>.object`` into ``tmp_path/objects`` and return its path."""
    target_dir = tmp_path / "objects"
    target_dir.mkdir()

    def _write(name: str, *fields: dict[str, str], namespace: bool = True) -> Path:
        path = target_dir / f"{name}.object"
        path.write_text(object_xml(*fields, namespace=namespace), encoding="utf-8")
        return path

    return _write
