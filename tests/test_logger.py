import io
import json

import pytest

from shortpath.logger import StdLogger


def test_std_logger_filters_by_level():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("hidden", x=1)
    log.info("shown", x=1, y="two")
    assert buf.getvalue() == "info shown x=1 y=two\n"


def test_std_logger_json_lines():
    buf = io.StringIO()
    log = StdLogger(level="debug", json_fmt=True, stream=buf)
    log.warning("w", n=3)
    assert json.loads(buf.getvalue()) == {"level": "warning", "event": "w", "n": 3}


def test_std_logger_rejects_unknown_level():
    with pytest.raises(ValueError):
        StdLogger(level="trace")
