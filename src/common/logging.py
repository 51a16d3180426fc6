"""
chroma 向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得するだけで、ハンドラは設定しない。
- CLI などのエントリポイントだけが `setup_default_logging` を呼び、最小構成を 1 度だけ適用する。
"""

from __future__ import annotations

import logging


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), None)
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 不明なレベル名は INFO として扱う
    """
    root = logging.getLogger()
    if root.handlers:
        # アプリ側で設定済み
        return
    logging.basicConfig(
        level=_resolve_level(level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
