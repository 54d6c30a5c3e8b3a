from __future__ import annotations

import logging

from render_module.app.utils.logging import LOG_FILE_NAME, NO_REQUEST, RequestLogger, setup_logging


def test_request_logger_tags_records(caplog):
    logger = logging.getLogger("website_reel_render_module")
    log = RequestLogger(logger, {"request_id": "abc123"})

    with caplog.at_level(logging.INFO, logger=logger.name):
        log.info("Timeline planned")
        logger.info("Service started")

    tagged, untagged = caplog.records[-2:]
    assert tagged.request_id == "abc123"
    assert tagged.getMessage() == "Timeline planned"
    assert untagged.request_id == NO_REQUEST


def test_file_handler_writes_request_id_and_is_not_duplicated(tmp_path):
    logger = setup_logging("warning", log_dir=tmp_path)
    logger = setup_logging("warning", log_dir=tmp_path)
    try:
        RequestLogger(logger, {"request_id": "r-1"}).debug("ffmpeg args ready")
        for handler in logger.handlers:
            handler.flush()

        assert sum(isinstance(h, logging.FileHandler) for h in logger.handlers) == 1
        content = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "[r-1]" in content
        assert "ffmpeg args ready" in content
    finally:
        setup_logging()
