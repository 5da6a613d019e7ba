import json
import logging

import pytest

from lemmastream.logging_utils import JsonFormatter, configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_json_formatter_puts_extras_in_context():
    record = logging.LogRecord("lemmastream.stream", logging.INFO, __file__, 1, "lemma_stream_tagged", None, None)
    record.tagged_words = 7
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "lemma_stream_tagged"
    assert payload["level"] == "INFO"
    assert payload["context"] == {"tagged_words": 7}


def test_configure_logging_keeps_existing_handlers(root_logger):
    handler = logging.NullHandler()
    root_logger.handlers[:] = [handler]
    configure_logging("DEBUG")
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.DEBUG


def test_configure_logging_installs_json_handler(root_logger):
    root_logger.handlers[:] = []
    configure_logging()
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)
