from __future__ import annotations

import pytest

from statemgmt.config import StoreConfig


def test_defaults() -> None:
    config = StoreConfig()
    assert config.symmetric_map_equality is True
    assert config.require_initialized is False
    assert config.copy_on_update is True
    assert config.log_values is False


def test_from_env_reads_prefixed_booleans(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATEMGMT_REQUIRE_INITIALIZED", "yes")
    monkeypatch.setenv("STATEMGMT_SYMMETRIC_MAP_EQUALITY", "0")
    monkeypatch.setenv("STATEMGMT_LOG_VALUES", "maybe")

    config = StoreConfig.from_env()

    assert config.require_initialized is True
    assert config.symmetric_map_equality is False
    assert config.log_values is False


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATEMGMT_COPY_ON_UPDATE", "off")

    config = StoreConfig.from_env(copy_on_update=True)

    assert config.copy_on_update is True
