"""
どこで: `util.paths`。
何を: パレットのエクスポート先ディレクトリの生成と、衝突しないファイル名の解決を提供する。
なぜ: エクスポータから簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_project_root


def ensure_export_dir(root: Path | None = None) -> Path:
    """エクスポート出力先 `data/export/` を作成して返す。

    - `root` 未指定時はプロジェクトルート直下の `data/export/` に作成する。
    - 既存の場合もそのまま Path を返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    out = base / "data" / "export"
    out.mkdir(parents=True, exist_ok=True)
    return out


def unique_path(path: Path) -> Path:
    """`path` が既存なら `stem-1.ext`, `stem-2.ext` ... の空き名を返す。"""
    if not path.exists():
        return path
    stem = path.stem
    suffix = path.suffix
    parent = path.parent
    i = 1
    while True:
        cand = parent / f"{stem}-{i}{suffix}"
        if not cand.exists():
            return cand
        i += 1


__all__ = ["ensure_export_dir", "unique_path"]
