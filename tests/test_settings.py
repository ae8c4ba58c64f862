import logging
import pytest
from pydantic import ValidationError
from rich.logging import RichHandler
from diceroll.engine.settings import load_settings
from diceroll.util.log import LOGGER_NAME, get_logger, setup_logging

def test_defaults(monkeypatch):
    for name in ("DICEROLL_SEED", "DICEROLL_FLOOR_AT_ZERO", "DICEROLL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.seed is None
    assert s.floor_at_zero is False
    assert s.log_level == "WARNING"

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DICEROLL_SEED", "17")
    monkeypatch.setenv("DICEROLL_FLOOR_AT_ZERO", "1")
    monkeypatch.setenv("DICEROLL_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.seed == 17
    assert s.floor_at_zero is True
    assert s.log_level == "DEBUG"

def test_invalid_seed(monkeypatch):
    monkeypatch.setenv("DICEROLL_SEED", "soon")
    with pytest.raises(ValidationError):
        load_settings()

def test_setup_logging_is_idempotent():
    logger = setup_logging("info")
    assert setup_logging("DEBUG") is logger
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert get_logger("diceroll.engine.dice").name == "diceroll.engine.dice"
    assert get_logger("dice").name == f"{LOGGER_NAME}.dice"
    setup_logging("WARNING")

def test_setup_logging_installs_rich_beside_foreign_handler():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    for h in saved:
        logger.removeHandler(h)
    foreign = logging.NullHandler()
    logger.addHandler(foreign)
    try:
        setup_logging("WARNING")
        assert any(isinstance(h, RichHandler) for h in logger.handlers)
        assert foreign in logger.handlers
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
        for h in saved:
            logger.addHandler(h)
