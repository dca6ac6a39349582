import logging

import pytest

from northstar_mods.logging_config import ROOT_LOGGER, parse_level, setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def test_setup_logging_writes_package_records_to_file(tmp_path, restore_logger):
    log_file = tmp_path / "logs" / "logs.log"

    setup_logging(logging.DEBUG, log_file)
    logging.getLogger("northstar_mods.engine.mod_view").warning("bad index %d", 9)
    for handler in restore_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "WARNING" in text
    assert "northstar_mods.engine.mod_view | bad index 9" in text


def test_setup_logging_replaces_previous_handlers(tmp_path, restore_logger):
    setup_logging(logging.INFO, tmp_path / "a.log")
    setup_logging(logging.INFO, tmp_path / "b.log")

    files = [h.baseFilename for h in restore_logger.handlers if isinstance(h, logging.FileHandler)]
    assert files == [str(tmp_path / "b.log")]


def test_setup_logging_without_outputs_installs_null_handler(restore_logger):
    setup_logging(logging.INFO, None)

    assert [type(h) for h in restore_logger.handlers] == [logging.NullHandler]


def test_parse_level():
    assert parse_level("Debug") == logging.DEBUG
    assert parse_level(" warning ") == logging.WARNING
    with pytest.raises(ValueError):
        parse_level("loud")
