"""
どこで: `util.utils`。
何を: YAML 設定ファイルの読み込み（フェイルソフト）とプロジェクトルート推定。
なぜ: パレット既定値（初期色数/保存先/既定モード）を環境ごとに上書きできるようにするため。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - 上位に `.git` / `pyproject.toml` / `configs/` がある最も近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    # 典型: <repo>/src/util/utils.py -> <repo>
    return cur.parent.parent


def load_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - トップレベルのキー単位で上書きする（ネストのディープマージはしない）。
    """
    root = project_root if project_root is not None else _find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


def config_section(name: str, project_root: Optional[Path] = None) -> Dict[str, Any]:
    """`load_config()` のトップレベルセクションを辞書で返す（非 dict は空辞書）。"""
    section = load_config(project_root).get(name)
    return section if isinstance(section, dict) else {}


__all__ = ["load_config", "config_section"]
