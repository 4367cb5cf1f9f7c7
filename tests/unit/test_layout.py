from __future__ import annotations

from pathlib import Path

from dist_verifier.layout import DistLayout


def test_layout_defaults_resolve_under_root(tmp_path: Path) -> None:
    layout = DistLayout.create(root=tmp_path)

    root = tmp_path.resolve()
    assert layout.root == root
    assert layout.dist_dir == root / "dist"
    assert layout.entry_path == root / "dist" / "index.html"
    assert layout.assets_dir == root / "dist" / "assets"
    assert layout.script_suffix == ".js"


def test_layout_defaults_to_current_directory(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert DistLayout.create().root == tmp_path.resolve()


def test_layout_descriptions_match_default_diagnostics(tmp_path: Path) -> None:
    layout = DistLayout.create(root=tmp_path)

    assert layout.dist_description == "dist directory"
    assert layout.entry_description == "dist/index.html"
    assert layout.missing_script_message == "dist/assets is missing bundled JavaScript output"


def test_layout_contract_overrides_only_named_keys(tmp_path: Path) -> None:
    layout = DistLayout.create(root=tmp_path, contract={"dist_dir": "build", "assets_dir": "static"})

    assert layout.dist_dir == tmp_path.resolve() / "build"
    assert layout.entry_path.name == "index.html"
    assert layout.assets_dir == tmp_path.resolve() / "build" / "static"
    assert layout.dist_description == "build directory"
    assert layout.missing_script_message == "build/static is missing bundled JavaScript output"


def test_layout_creation_does_not_touch_filesystem(tmp_path: Path) -> None:
    DistLayout.create(root=tmp_path)

    assert list(tmp_path.iterdir()) == []
