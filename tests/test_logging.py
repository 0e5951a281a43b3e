import logging
from logging.handlers import RotatingFileHandler

from americanopairing.utils import LOG_DIR_ENV, set_package_log_level, setup_logger


def _close(lgr):
    for handler in list(lgr.handlers):
        handler.close()
        lgr.removeHandler(handler)


def test_setup_logger_does_not_duplicate_handlers(monkeypatch):
    monkeypatch.delenv(LOG_DIR_ENV, raising=False)

    setup_logger("americanopairing.tests.dup")
    lgr = setup_logger("americanopairing.tests.dup")

    assert lgr.level == logging.INFO
    assert len(lgr.handlers) == 1
    assert isinstance(lgr.handlers[0], logging.StreamHandler)
    _close(lgr)


def test_log_directory_adds_a_rotating_file(monkeypatch, tmp_path):
    monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path / "logs"))

    lgr = setup_logger("americanopairing.tests.file")

    assert any(isinstance(h, RotatingFileHandler) for h in lgr.handlers)
    assert (tmp_path / "logs").is_dir()
    _close(lgr)


def test_package_log_level_can_be_lowered(monkeypatch):
    monkeypatch.delenv(LOG_DIR_ENV, raising=False)
    lgr = setup_logger("americanopairing.tests.level")

    set_package_log_level(logging.DEBUG)

    assert lgr.level == logging.DEBUG
    assert lgr.handlers[0].level == logging.DEBUG
    set_package_log_level(logging.INFO)
    _close(lgr)
