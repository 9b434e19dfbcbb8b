import logging

from hangul_pron.utils.logging_utils import setup_logging


def test_setup_logging_with_file(tmp_path):
    logger = setup_logging(str(tmp_path), level="DEBUG", name="hangul_pron.test_file")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger.info("변환 시작")
    for handler in logger.handlers:
        handler.flush()
    assert "변환 시작" in (tmp_path / "hangul_pron.log").read_text(encoding="utf-8")


def test_setup_logging_is_idempotent():
    setup_logging(name="hangul_pron.test_console")
    logger = setup_logging(name="hangul_pron.test_console")

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
