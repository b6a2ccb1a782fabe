from __future__ import annotations

from pathlib import Path

from util.paths import ensure_export_dir, unique_path
from util.utils import _find_project_root, load_config, palette_section


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    got = _find_project_root(a)
    assert got == a.parent.parent


def test_find_project_root_detects_configs(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    start = tmp_path / "src" / "util"
    start.mkdir(parents=True)
    assert _find_project_root(start) == tmp_path


def test_load_config_root_overrides_default(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "palette:\n  n_colors: 10\n  output_format: rgb\nother: 1\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("palette:\n  n_colors: 4\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベルのみ上書き（ディープマージしない）
    assert cfg["palette"] == {"n_colors": 4}
    assert cfg["other"] == 1
    assert palette_section(cfg) == {"n_colors": 4}


def test_load_config_is_fail_soft(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("palette: [unclosed\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}


def test_palette_section_ignores_non_dict() -> None:
    assert palette_section({"palette": [1, 2]}) == {}
    assert palette_section({}) == {}


def test_ensure_export_dir_and_unique_path(tmp_path: Path) -> None:
    out = ensure_export_dir(tmp_path)
    assert out == tmp_path / "data" / "export"
    assert out.is_dir()
    # 2 回目も安全
    assert ensure_export_dir(tmp_path) == out

    target = out / "palette.json"
    assert unique_path(target) == target
    target.write_text("[]", encoding="utf-8")
    assert unique_path(target) == out / "palette-1.json"
    (out / "palette-1.json").write_text("[]", encoding="utf-8")
    assert unique_path(target) == out / "palette-2.json"
