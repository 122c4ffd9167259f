import sys
from pathlib import Path

# чтобы видеть src/
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import os
import pytest

from asset_buster.resolver import VersionResolver
from asset_buster.rules import AssetRule, RuleSet


MTIME = 1_700_000_000


@pytest.fixture
def asset_root(tmp_path):
    root = tmp_path / "www"
    (root / "static" / "js").mkdir(parents=True)
    (root / "static" / "css").mkdir(parents=True)
    return root


@pytest.fixture
def make_asset(asset_root):
    def _make(rel_path: str, mtime: int = MTIME, content: str = "/* asset */") -> Path:
        path = asset_root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def rules():
    return RuleSet(
        rules=(
            AssetRule(handle="app-js", version="42"),
            AssetRule(handle="theme-css", file_path="static/css/theme.css"),
            AssetRule(handle="ghost-js", file_path="static/js/ghost.js"),
            AssetRule(handle="empty"),
        )
    )


@pytest.fixture
def resolver(rules, asset_root, make_asset):
    make_asset("static/css/theme.css")
    return VersionResolver(rules, asset_root)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    for name in (
        "ASSET_BUSTER_ROOT_DIR",
        "ASSET_BUSTER_RULES_FILE",
        "ASSET_BUSTER_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
