# tests/auditor/test_package_boundaries.py
import ast
from pathlib import Path

import pytest

CORE_ROOT = Path(__file__).resolve().parents[2] / "src" / "aria_auditor"
FRONT_ENDS = ("markup_parser", "aria_shell")


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            yield node.module


@pytest.mark.parametrize("path", sorted(CORE_ROOT.rglob("*.py")), ids=lambda p: p.name)
def test_core_does_not_import_front_ends(path):
    """The rule engine consumes elements; extraction and the shell live outside it."""
    offending = [m for m in _imported_modules(path) if m.split(".")[0] in FRONT_ENDS]
    assert offending == []


@pytest.mark.parametrize("path", sorted(CORE_ROOT.rglob("*.py")), ids=lambda p: p.name)
def test_core_modules_name_their_path(path):
    first_line = path.read_text(encoding="utf-8").splitlines()[0]
    expected = "src/" + path.relative_to(CORE_ROOT.parent).as_posix()
    assert first_line == f"# {expected}"
