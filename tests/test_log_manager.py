# tests/test_log_manager.py
from __future__ import annotations

import logging

from smartbash import log_manager


def test_get_logger_returns_same_instance():
    assert log_manager.get_logger("sb.same") is log_manager.get_logger("sb.same")


def test_default_name_is_package_root():
    assert log_manager.get_logger().name == "smartbash"


def test_level_accepts_names():
    assert log_manager.get_logger("sb.level", level="debug").level == logging.DEBUG
    assert log_manager.get_logger("sb.level2", level=logging.ERROR).level == logging.ERROR


def test_file_handler(tmp_path):
    log_file = tmp_path / "sb.log"
    logger = log_manager.get_logger("sb.file", level=logging.INFO, log_to_file=str(log_file))
    logger.info("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_same_file_attached_once(tmp_path):
    log_file = str(tmp_path / "one.log")
    log_manager.get_logger("sb.once", log_to_file=log_file)
    logger = log_manager.get_logger("sb.once", log_to_file=log_file)
    assert len([h for h in logger.handlers if isinstance(h, logging.FileHandler)]) == 1


def test_unopenable_log_file_is_reported_not_raised(tmp_path, capsys):
    logger = log_manager.get_logger("sb.badfile", log_to_file=str(tmp_path))
    assert not [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert "Failed to open log file" in capsys.readouterr().err


def test_single_stream_handler():
    for _ in range(3):
        logger = log_manager.get_logger("sb.nodup")
    streams = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    assert len(streams) == 1


def test_logs_go_to_stderr_plain(monkeypatch, capsys):
    monkeypatch.setenv("SMARTBASH_FORCE_COLOR", "false")
    logger = log_manager.get_logger("sb.plain", level=logging.INFO)
    logger.info("to-stderr")
    out, err = capsys.readouterr()
    assert "to-stderr" in err and "to-stderr" not in out
    assert "[INFO]" in err and "\x1b[" not in err


def test_forced_color_uses_colorlog(monkeypatch):
    monkeypatch.setenv("SMARTBASH_FORCE_COLOR", "1")
    logger = log_manager.get_logger("sb.color")
    assert any(
        isinstance(h.formatter, log_manager.colorlog.ColoredFormatter) for h in logger.handlers
    )


def test_propagate_false():
    assert log_manager.get_logger("sb.prop").propagate is False
