import pytest
from pydantic import ValidationError

from l1.config.settings import L1Settings, load_settings


def test_defaults(monkeypatch) -> None:
    for name in ("L1_LOG_FILTER", "L1_DEMO_COUNTER", "L1_DEMO_CROSS_CHECK", "L1_TRACE"):
        monkeypatch.delenv(name, raising=False)
    settings = L1Settings(_env_file=None)
    assert settings.log_filter == "info"
    assert settings.demo_counter == 100
    assert settings.demo_cross_check is True
    assert settings.trace is False


def test_environment(monkeypatch) -> None:
    monkeypatch.setenv("L1_DEMO_COUNTER", "7")
    monkeypatch.setenv("L1_TRACE", "true")
    settings = load_settings()
    assert settings.demo_counter == 7
    assert settings.trace is True


def test_overrides_win_unless_none(monkeypatch) -> None:
    monkeypatch.setenv("L1_DEMO_COUNTER", "7")
    assert load_settings(demo_counter=3).demo_counter == 3
    assert load_settings(demo_counter=None).demo_counter == 7


def test_demo_counter_bounded_by_int64(monkeypatch) -> None:
    monkeypatch.setenv("L1_DEMO_COUNTER", "9223372036854775808")
    with pytest.raises(ValidationError):
        load_settings()
    monkeypatch.setenv("L1_DEMO_COUNTER", "9223372036854775807")
    assert load_settings().demo_counter == 9223372036854775807
