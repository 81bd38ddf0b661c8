"""Test configuration helpers."""

from pathlib import Path

import pytest

from slugren.lib.config import ENV_VARS


def make_tree(root: Path, files) -> None:
    """Create files (and their parent dirs) below root; content = relative path."""
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rel, encoding="utf-8")


def snapshot(root: Path) -> dict:
    """Map of relative path -> file content (None for directories)."""
    result = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_text(encoding="utf-8")
    return result


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SLUGREN_* / LOG_LEVEL from the outer environment out of tests."""
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def tree(tmp_path):
    """Factory: tree(["a/b.txt", ...]) -> root path"""
    root = tmp_path / "root"
    root.mkdir()

    def _make(files):
        make_tree(root, files)
        return root

    return _make
