import json
import logging

from reststop.logging_config import JSONFormatter, configure_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        name="reststop.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Rule %s failed",
        args=("nearby",),
        exc_info=None,
    )
    record.rule = "nearby"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "reststop.test"
    assert payload["message"] == "Rule nearby failed"
    assert payload["rule"] == "nearby"


def test_configure_logging_installs_single_handler():
    configure_logging("debug", json_output=True)
    configure_logging("debug", json_output=True)

    logger = logging.getLogger("reststop")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False

    configure_logging("INFO")
