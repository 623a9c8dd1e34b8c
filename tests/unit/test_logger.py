"""Tests for logging setup."""

import logging
import os
import time

from flask import Flask

from golfoutings.lib.logger import (
    PaddedLevelFormatter,
    clean_old_logs,
    configure_logger,
    log_endpoint_access,
)


def test_clean_old_logs_keeps_newest(tmp_path):
    for i in range(4):
        path = tmp_path / f"{i}.log"
        path.write_text("x")
        mtime = time.time() - (10 - i)
        os.utime(path, (mtime, mtime))

    clean_old_logs(tmp_path, max_files=2)

    assert sorted(p.name for p in tmp_path.glob("*.log")) == ["2.log", "3.log"]


def test_clean_old_logs_missing_directory(tmp_path):
    clean_old_logs(tmp_path / "nope")


def test_configure_logger_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        log_file = configure_logger(log_level=logging.INFO, log_dir=tmp_path)
        logging.info("tee time")
        for handler in root.handlers:
            handler.flush()

        assert log_file.parent == tmp_path
        assert "tee time" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_log_endpoint_access(caplog):
    app = Flask(__name__)

    @app.route("/ping")
    @log_endpoint_access
    def ping():
        return "pong"

    with caplog.at_level(logging.DEBUG):
        response = app.test_client().get("/ping")

    assert response.data == b"pong"
    assert "GET /ping -> ping" in caplog.text


def test_padded_level_formatter_aligns_levels():
    formatter = PaddedLevelFormatter("%(levelname)s|%(message)s")

    def line(level):
        record = logging.LogRecord("golfoutings", level, __file__, 1, "sent", None, None)
        return formatter.format(record)

    assert line(logging.INFO) == "INFO    |sent"
    assert line(logging.ERROR) == "ERROR   |sent"
