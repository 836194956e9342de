import io
import json
import logging
from types import SimpleNamespace

from data_sanitizer.utils.log import JsonFormatter, get_logger, logger_from_cfg

def test_json_formatter_basic_and_extra():
    logger = logging.getLogger("t-json")
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.INFO)

    # capture a single record via a proper Handler
    class CapHandler(logging.Handler):
        def __init__(self):
            super().__init__(level=0)
            self.last = None
            self.setFormatter(JsonFormatter())

        def emit(self, record: logging.LogRecord) -> None:
            self.last = self.format(record)

    cap = CapHandler()
    logger.addHandler(cap)

    logger.info("filter %s applied", "trim", extra={"attribute": "user.name"})
    payload = json.loads(cap.last)
    assert payload["message"] == "filter trim applied"
    assert payload["level"] == "INFO"
    assert payload["attribute"] == "user.name"
    assert "time" in payload
    assert "msg" not in payload and "args" not in payload

def test_json_formatter_exc_info_and_unserializable_extra():
    rec = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    rec.obj = object()
    try:
        raise ValueError("bad")
    except ValueError:
        import sys
        rec.exc_info = sys.exc_info()
    payload = json.loads(JsonFormatter().format(rec))
    assert "ValueError: bad" in payload["exc_info"]
    assert payload["obj"].startswith("<object")

def test_get_logger_idempotent_and_plain_mode():
    lg1 = get_logger("sanitizer-test", level="DEBUG", structured_json=True)
    lg2 = get_logger("sanitizer-test", level="INFO", structured_json=True)
    assert lg1 is lg2
    assert lg1.level == logging.DEBUG
    assert len(lg1.handlers) == 1

    buf = io.StringIO()
    lg3 = get_logger("sanitizer-plain", level="INFO", structured_json=False, stream=buf)
    assert not isinstance(lg3.handlers[0].formatter, JsonFormatter)
    lg3.info("plain line")
    assert "INFO sanitizer-plain: plain line" in buf.getvalue()

def test_logger_from_cfg():
    buf = io.StringIO()
    cfg = SimpleNamespace(logging=SimpleNamespace(level="warning", structured_json=True))
    lg = logger_from_cfg(cfg, name="sanitizer-cfg", stream=buf)
    lg.info("hidden")
    lg.warning("shown")
    lines = buf.getvalue().strip().splitlines()
    assert [json.loads(l)["message"] for l in lines] == ["shown"]

def test_logger_from_cfg_level_override():
    buf = io.StringIO()
    cfg = SimpleNamespace(logging=SimpleNamespace(level="WARNING", structured_json=False))
    lg = logger_from_cfg(cfg, name="sanitizer-cfg-override", stream=buf, level="DEBUG")
    lg.debug("visible")
    assert "DEBUG sanitizer-cfg-override: visible" in buf.getvalue()
