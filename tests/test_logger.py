import logging
from logging.handlers import RotatingFileHandler

import seller_analytics
from seller_analytics.logger import setup_logger

from .factories import make_item


def test_setup_logger_adds_console_and_file_handlers(tmp_path):
    logger = setup_logger("seller_analytics.test_setup", logging.DEBUG, log_dir=tmp_path)

    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)

        logger.info("hello from the analyzer")
        for handler in logger.handlers:
            handler.flush()

        log_text = (tmp_path / "seller_analytics.log").read_text(encoding="utf-8")
        assert "INFO - hello from the analyzer" in log_text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_setup_logger_is_idempotent(tmp_path):
    logger = setup_logger("seller_analytics.test_idempotent", log_dir=tmp_path)
    try:
        again = setup_logger("seller_analytics.test_idempotent", log_dir=tmp_path)
        assert again is logger
        assert len(logger.handlers) == 2
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_package_logger_captures_analyzer_output(tmp_path, sample_data, options):
    logger = seller_analytics.setup_logger(log_level=logging.DEBUG, log_dir=tmp_path)
    sample_data["purchase_records"].append(
        {"seller_id": "seller_1", "items": [make_item("NO_SUCH_SKU", 1, 5)]}
    )

    try:
        assert logger.name == "seller_analytics"
        seller_analytics.analyze_sales_data(sample_data, options)
        for handler in logger.handlers:
            handler.flush()

        log_text = (tmp_path / "seller_analytics.log").read_text(encoding="utf-8")
        assert "seller_analytics.analyzer - INFO - ✅ Analyzed 4 sellers" in log_text
        assert "1 unusable items" in log_text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
