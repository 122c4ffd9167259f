import json

from asset_buster.cli import main
from tests.conftest import MTIME


def _write_rules(path, rules):
    path.write_text(json.dumps(rules), encoding="utf-8")
    return path


def test_cli_prints_resolved_urls(asset_root, make_asset, tmp_path, capsys):
    make_asset("static/js/app.js")
    rules = _write_rules(
        tmp_path / "assets.json",
        [{"handle": "app-js", "path": "static/js/app.js"}, {"handle": "lib", "ver": "2"}],
    )
    code = main(
        [
            "--root", str(asset_root),
            "--rules", str(rules),
            "app-js=/static/js/app.js?x=1",
            "lib=https://cdn/lib.js",
            "other=/other.js",
        ]
    )
    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        f"/static/js/app.js?x=1&ver={MTIME}",
        "https://cdn/lib.js?ver=2",
        "/other.js",
    ]


def test_cli_explain(asset_root, tmp_path, capsys):
    rules = _write_rules(tmp_path / "assets.json", [{"handle": "gone", "path": "gone.js"}])
    code = main(["--root", str(asset_root), "--rules", str(rules), "--explain", "gone=/gone.js"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["url"] == "/gone.js"
    assert payload["strategy"] == "unchanged"
    assert payload["error"] == "MISSING_ASSET_FILE"


def test_cli_missing_rules_file(tmp_path, capsys):
    code = main(["--root", str(tmp_path), "--rules", str(tmp_path / "nope.json"), "a=/a.js"])
    assert code == 2
    assert "Rules file not found" in capsys.readouterr().err
