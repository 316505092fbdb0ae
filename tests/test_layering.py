"""Import-boundary tests for the layered package layout.

Each module's ``ytdlp_mcp`` imports are read from its source with
:mod:`ast`, so nothing is executed.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

import ytdlp_mcp

PACKAGE_ROOT = Path(ytdlp_mcp.__file__).parent

ALLOWED: dict[str, set[str]] = {
    "core": {"core", "exceptions", "config", "utils"},
    "infra": {"core", "infra", "exceptions", "config", "utils"},
    "server": {"core", "infra", "server", "exceptions", "config", "utils", "version"},
    "utils": {"utils"},
}


def _imported_layers(path: Path) -> set[str]:
    """Return the first package component of every ``ytdlp_mcp`` import."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    names: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            names.append(node.module)
        elif isinstance(node, ast.Import):
            names.extend(alias.name for alias in node.names)
    return {
        name.split(".")[1]
        for name in names
        if name.startswith("ytdlp_mcp.")
    }


@pytest.mark.parametrize("layer", sorted(ALLOWED))
def test_layer_imports_stay_within_bounds(layer: str) -> None:
    for path in sorted((PACKAGE_ROOT / layer).glob("*.py")):
        forbidden = _imported_layers(path) - ALLOWED[layer]
        assert not forbidden, f"{path.name} imports {sorted(forbidden)}"


def test_core_logs_through_utils() -> None:
    assert "utils" in _imported_layers(PACKAGE_ROOT / "core" / "tool_service.py")
