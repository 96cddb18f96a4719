from __future__ import annotations

import logging

import pytest

from foamvis.logging_config import setup_logging


def test_level_name_from_the_command_line(tmp_path) -> None:
    log_file = tmp_path / "foamvis.log"

    logger = setup_logging("debug", str(log_file))
    logging.getLogger("foamvis.model.document").debug("resolved")
    setup_logging("WARNING")

    assert logger.level == logging.DEBUG
    assert "resolved" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_does_not_stack_handlers() -> None:
    setup_logging(logging.INFO)
    logger = setup_logging(logging.ERROR)

    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR


def test_unknown_level_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        setup_logging("LOUD")
