"""
どこで: `common.settings`
何を: chroma の調整値（コントラスト補正/画像抽出）を環境変数から型付きで一元管理する。
なぜ: `os.getenv` の散在を避け、既定値と境界の扱いを 1 か所にまとめてテストしやすくするため。

環境変数はすべて `CHROMA_` プレフィックスを持つ。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int


@dataclass
class _Settings:
    # コントラスト補正
    CONTRAST_TARGET: float = 4.5
    CONTRAST_FIX_MAX_ITER: int = 32

    # 画像抽出
    EXTRACT_MAX_EDGE: int = 200
    EXTRACT_ALPHA_MIN: int = 128
    EXTRACT_MAX_SAMPLES: int = 40_000
    EXTRACT_DEDUP_DISTANCE: float = 0.08


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 整数は `env_int`、浮動小数は `env_float` を使用。
    - 不正値は既定値、範囲外は下限/上限へ丸める。
    """
    defaults = _Settings()

    # コントラスト補正
    _settings.CONTRAST_TARGET = (
        env_float("CHROMA_CONTRAST_TARGET", defaults.CONTRAST_TARGET, min_value=1.0, max_value=21.0)
        or defaults.CONTRAST_TARGET
    )
    _settings.CONTRAST_FIX_MAX_ITER = (
        env_int("CHROMA_CONTRAST_FIX_MAX_ITER", defaults.CONTRAST_FIX_MAX_ITER, min_value=1)
        or defaults.CONTRAST_FIX_MAX_ITER
    )

    # 画像抽出（下限丸め）
    _settings.EXTRACT_MAX_EDGE = (
        env_int("CHROMA_EXTRACT_MAX_EDGE", defaults.EXTRACT_MAX_EDGE, min_value=1)
        or defaults.EXTRACT_MAX_EDGE
    )
    alpha_min = env_int("CHROMA_EXTRACT_ALPHA_MIN", defaults.EXTRACT_ALPHA_MIN, min_value=0)
    _settings.EXTRACT_ALPHA_MIN = min(255, alpha_min if alpha_min is not None else 128)
    _settings.EXTRACT_MAX_SAMPLES = (
        env_int("CHROMA_EXTRACT_MAX_SAMPLES", defaults.EXTRACT_MAX_SAMPLES, min_value=1)
        or defaults.EXTRACT_MAX_SAMPLES
    )
    dedup = env_float(
        "CHROMA_EXTRACT_DEDUP_DISTANCE", defaults.EXTRACT_DEDUP_DISTANCE, min_value=0.0
    )
    _settings.EXTRACT_DEDUP_DISTANCE = (
        dedup if dedup is not None else defaults.EXTRACT_DEDUP_DISTANCE
    )


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
