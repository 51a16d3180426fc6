from __future__ import annotations

import logging

import pytest

from common import env_bool, env_float, env_int, setup_default_logging
from common import settings as _settings


@pytest.fixture()
def env(monkeypatch: pytest.MonkeyPatch):
    """環境変数を差し替え、終了時に元へ戻して設定を再読込する。"""
    yield monkeypatch
    monkeypatch.undo()
    _settings.reload_from_env()


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHROMA_TEST_INT", raising=False)
    assert env_int("CHROMA_TEST_INT", 7) == 7
    monkeypatch.setenv("CHROMA_TEST_INT", " 12 ")
    assert env_int("CHROMA_TEST_INT", 7) == 12
    monkeypatch.setenv("CHROMA_TEST_INT", "-3")
    assert env_int("CHROMA_TEST_INT", 7, min_value=0) == 0
    monkeypatch.setenv("CHROMA_TEST_INT", "abc")
    assert env_int("CHROMA_TEST_INT", 7) == 7


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "x1"])
def test_env_float_rejects_non_finite(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("CHROMA_TEST_FLOAT", raw)
    assert env_float("CHROMA_TEST_FLOAT", 1.5) == 1.5


def test_env_float_bounds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHROMA_TEST_FLOAT", "50")
    assert env_float("CHROMA_TEST_FLOAT", 1.0, max_value=21.0) == 21.0
    monkeypatch.setenv("CHROMA_TEST_FLOAT", "0.2")
    assert env_float("CHROMA_TEST_FLOAT", 1.0, min_value=1.0) == 1.0


@pytest.mark.parametrize(
    "raw, expected", [("1", True), ("0", False), ("yes", True), ("off", False), ("maybe", True)]
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("CHROMA_TEST_BOOL", raw)
    assert env_bool("CHROMA_TEST_BOOL", default=True) is expected


def test_settings_defaults(env: pytest.MonkeyPatch) -> None:
    for name in (
        "CHROMA_CONTRAST_TARGET",
        "CHROMA_CONTRAST_FIX_MAX_ITER",
        "CHROMA_EXTRACT_MAX_EDGE",
        "CHROMA_EXTRACT_ALPHA_MIN",
        "CHROMA_EXTRACT_MAX_SAMPLES",
        "CHROMA_EXTRACT_DEDUP_DISTANCE",
    ):
        env.delenv(name, raising=False)
    _settings.reload_from_env()
    cfg = _settings.get()
    assert cfg.CONTRAST_TARGET == 4.5
    assert cfg.CONTRAST_FIX_MAX_ITER == 32
    assert cfg.EXTRACT_MAX_EDGE == 200
    assert cfg.EXTRACT_ALPHA_MIN == 128
    assert cfg.EXTRACT_MAX_SAMPLES == 40_000
    assert cfg.EXTRACT_DEDUP_DISTANCE == pytest.approx(0.08)


def test_settings_clamp_env_values(env: pytest.MonkeyPatch) -> None:
    env.setenv("CHROMA_CONTRAST_TARGET", "30")
    env.setenv("CHROMA_EXTRACT_ALPHA_MIN", "999")
    env.setenv("CHROMA_EXTRACT_MAX_EDGE", "0")
    env.setenv("CHROMA_EXTRACT_DEDUP_DISTANCE", "bogus")
    _settings.reload_from_env()
    cfg = _settings.get()
    assert cfg.CONTRAST_TARGET == 21.0
    assert cfg.EXTRACT_ALPHA_MIN == 255
    assert cfg.EXTRACT_MAX_EDGE == 1
    assert cfg.EXTRACT_DEDUP_DISTANCE == pytest.approx(0.08)


def test_setup_default_logging_is_noop_with_handlers() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        setup_default_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)
