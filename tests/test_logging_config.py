"""
Unit tests for utils/logging_config.py functions.
"""
import os
import re
import sys
import logging
from types import ModuleType
from unittest.mock import patch

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from utils.logging_config import setup_logging, get_logger


class TestSetupLogging:
    """Test cases for setup_logging function."""

    def test_setup_logging_default(self):
        with patch.dict('sys.modules', {'config': None}):
            logger = setup_logging()

        assert isinstance(logger, logging.Logger)
        assert logger.level == logging.INFO

    def test_setup_logging_with_log_level(self):
        logger = setup_logging(log_level='DEBUG')

        assert logger.level == logging.DEBUG

    def test_setup_logging_case_insensitive(self):
        logger = setup_logging(log_level='warning')

        assert logger.level == logging.WARNING

    def test_setup_logging_invalid_level_defaults_to_info(self):
        logger = setup_logging(log_level='INVALID')

        assert logger.level == logging.INFO

    def test_setup_logging_uses_config_log_level(self):
        fake_config = ModuleType('config')
        fake_config.LOG_LEVEL = 'ERROR'

        with patch.dict('sys.modules', {'config': fake_config}):
            logger = setup_logging()

        assert logger.level == logging.ERROR

    def test_setup_logging_with_file(self, temp_dir):
        log_file = os.path.join(temp_dir, 'logs', 'catalog.log')

        logger = setup_logging(log_file=log_file, log_level='INFO')
        get_logger('avgle.client').info("Fetched categories")
        for handler in logger.handlers:
            handler.flush()

        with open(log_file, 'r', encoding='utf-8') as f:
            content = f.read()
        assert 'Fetched categories' in content
        assert 'avgle.client' in content
        assert 'INFO' in content
        assert re.search(r'\d{4}-\d{2}-\d{2}', content)

    def test_setup_logging_does_not_accumulate_handlers(self):
        setup_logging(log_level='INFO')
        logger = setup_logging(log_level='DEBUG')

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_setup_logging_quiets_urllib3(self):
        setup_logging(log_level='DEBUG')

        assert logging.getLogger('urllib3').level == logging.WARNING


class TestGetLogger:
    """Test cases for get_logger function."""

    def test_get_logger_with_name(self):
        logger = get_logger('test.module.name')

        assert logger.name == 'test.module.name'

    def test_get_logger_same_instance(self):
        assert get_logger('same.name') is get_logger('same.name')
