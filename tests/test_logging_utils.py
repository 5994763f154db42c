import pytest
from loguru import logger

from l1 import logging_utils
from l1.core.ast import Add, IntLiteral, Skip
from l1.core.store import Store
from l1.logging_utils import parse_log_filter
from l1.program import Program


def test_global_level_only() -> None:
    assert parse_log_filter("info") == ("info", {})


def test_module_levels() -> None:
    level, modules = parse_log_filter("debug,l1.program=debug,l1.eval=false")
    assert level == "debug"
    assert modules == {"l1.program": "DEBUG", "l1.eval": False}


def test_defaults_to_env(monkeypatch) -> None:
    monkeypatch.setenv("L1_LOG_FILTER", "WARNING,l1.cli=info")
    assert parse_log_filter() == ("warning", {"l1.cli": "INFO"})


def test_empty_parts_are_ignored() -> None:
    assert parse_log_filter("info,,") == ("info", {})


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(logging_utils, "_CONFIGURED_PROFILE", None)
    yield
    logger.remove()


def _log_from(module: str, message: str) -> None:
    logger.patch(lambda record: record.update(name=module)).debug(message)


def test_cli_profile_applies_module_levels(fresh_logging, capsys) -> None:
    logging_utils.configure_logging(profile="cli", log_filter="info,l1.program=debug,l1.eval=false")
    Program(Add(IntLiteral(1), IntLiteral(2)), Store())
    _log_from("l1.eval.step", "eval.hidden")
    _log_from("l1.cli.app", "cli.hidden")
    out = capsys.readouterr().out
    assert "program.checked type=int" in out
    assert "eval.hidden" not in out
    assert "cli.hidden" not in out


def test_default_level_hides_debug(fresh_logging, capsys) -> None:
    logging_utils.configure_logging(profile="default", log_filter="info")
    Program(Skip(), Store())
    logger.info("program.visible")
    err = capsys.readouterr().err
    assert "program.checked" not in err
    assert "program.visible" in err


def test_configure_is_idempotent_per_profile(fresh_logging, capsys) -> None:
    logging_utils.configure_logging(profile="cli", log_filter="info,l1.program=debug")
    logging_utils.configure_logging(profile="cli", log_filter="warning")
    Program(Skip(), Store())
    assert "program.checked" in capsys.readouterr().out
