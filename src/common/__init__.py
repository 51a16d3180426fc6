"""
どこで: `common` パッケージ。
何を: chroma 本体と CLI が共有する横断的ヘルパ（環境変数パース、型付き設定、ロギング初期化）。
なぜ: 色計算ロジックから環境依存の処理を切り離し、依存の向きを単純化するため。
"""

from . import settings
from .env import env_bool, env_float, env_int
from .logging import setup_default_logging

__all__ = [
    "settings",
    "env_bool",
    "env_float",
    "env_int",
    "setup_default_logging",
]
