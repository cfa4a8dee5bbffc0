"""
どこで: `util.paths`。
何を: 保存パレット JSON の既定保存先ディレクトリの生成と解決。
なぜ: 永続化層から保存先を簡潔に扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

DEFAULT_STORE_FILENAME = "saved-palettes.json"


def palettes_dir(base: Optional[Path] = None) -> Path:
    """保存先 `data/palettes/` のパスを返す（作成はしない）。

    - `base` 未指定時はカレントディレクトリを基準にする。
    """
    root = base if base is not None else Path.cwd()
    return root / "data" / "palettes"


def ensure_parent_dir(path: Path) -> Path:
    """`path` の親ディレクトリを作成して `path` を返す。

    - 既存の場合もそのまま返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def default_store_path(base: Optional[Path] = None) -> Path:
    """既定の保存ファイル `data/palettes/saved-palettes.json` のパスを返す。"""
    return palettes_dir(base) / DEFAULT_STORE_FILENAME


__all__ = ["DEFAULT_STORE_FILENAME", "palettes_dir", "ensure_parent_dir", "default_store_path"]
