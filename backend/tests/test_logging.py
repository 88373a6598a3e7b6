import json
import logging

from storefront.core.logging import JsonFormatter, setup_logging


def test_setup_logging_levels():
    setup_logging(level="debug", fmt="text")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.DEBUG

    setup_logging(level="not-a-level", fmt="text")
    assert logging.getLogger().level == logging.INFO


def test_json_formatter_emits_one_object():
    record = logging.LogRecord("storefront.carts", logging.INFO, __file__, 1, "cart %s: cleared", ("u1",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "storefront.carts"
    assert payload["msg"] == "cart u1: cleared"
