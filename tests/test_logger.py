from datetime import datetime

import pytest

from piksy.config import LoggerConfig, LogLevel
from piksy.logger import FatalError, Logger, get_logger


@pytest.fixture
def logger(tmp_path):
    log = Logger()
    log.init(LoggerConfig(level=LogLevel.TRACE, log_file=tmp_path / "app.log"))
    yield log
    log.close()


def test_format_message_layout(logger):
    text = logger.format_message(LogLevel.WARN, "hi")
    assert text[0] == "["
    assert text[20] == "]"
    assert text[21:] == "[WARN] hi"
    stamp = datetime.strptime(text[1:20], "%Y-%m-%d %H:%M:%S")
    assert stamp.year >= 2000


def test_info_with_arguments(logger):
    logger.info("Pressed key: %d", 7)
    level, text = logger.messages()[-1]
    assert level == LogLevel.INFO
    assert text.endswith("[INFO] Pressed key: 7")


def test_bad_arguments_fall_back_to_format_string(logger):
    logger.debug("value %d", "not a number")
    assert logger.messages()[-1][1].endswith("value %d")


def test_overlong_message_falls_back_to_format_string(logger):
    logger.info("%s", "x" * 2000)
    assert logger.messages()[-1][1].endswith("] %s")


def test_level_filter(tmp_path):
    with Logger() as log:
        log.init(LoggerConfig(level=LogLevel.WARN, log_file=tmp_path / "a.log"))
        log.debug("hidden")
        log.info("hidden")
        log.warn("shown")
        log.error("shown too")
        assert [level for level, _ in log.messages()] == [LogLevel.WARN, LogLevel.ERROR]


def test_history_is_bounded(logger):
    for number in range(Logger.MAX_MESSAGES + 5):
        logger.trace("message %d", number)
    messages = logger.messages()
    assert len(messages) == Logger.MAX_MESSAGES
    assert messages[0][1].endswith("message 5")


def test_clear_messages(logger):
    logger.info("one")
    logger.clear_messages()
    assert logger.messages() == []


def test_messages_written_to_file(tmp_path):
    path = tmp_path / "out.log"
    with Logger() as log:
        log.init(LoggerConfig(log_file=path))
        log.info("saved %s", "project")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("[INFO] saved project")


def test_file_is_appended(tmp_path):
    path = tmp_path / "out.log"
    for word in ("first", "second"):
        with Logger() as log:
            log.init(LoggerConfig(log_file=path))
            log.info(word)
    assert len(path.read_text(encoding="utf-8").splitlines()) == 2


def test_colored_stdout(tmp_path, capsys):
    with Logger() as log:
        log.init(LoggerConfig(log_file=tmp_path / "c.log", enable_colors=True))
        log.error("boom")
    out = capsys.readouterr().out
    assert out.startswith("\033[31m")
    assert out.rstrip("\n").endswith("boom\033[0m")


def test_plain_stdout(tmp_path, capsys):
    with Logger() as log:
        log.init(LoggerConfig(log_file=tmp_path / "p.log", enable_colors=False))
        log.warn("careful")
    out = capsys.readouterr().out
    assert "\033[" not in out
    assert out.rstrip("\n").endswith("[WARN] careful")


def test_fatal_raises_and_logs(logger):
    with pytest.raises(FatalError, match="^failed at 3$"):
        logger.fatal("failed at %d", 3)
    level, text = logger.messages()[-1]
    assert level == LogLevel.FATAL
    assert text.endswith("[FATAL] failed at 3")


def test_fatal_with_exception(logger):
    cause = ValueError("bad input")
    with pytest.raises(FatalError) as info:
        logger.fatal("loading", exc=cause)
    assert str(info.value) == "loading"
    assert info.value.__cause__ is cause
    assert logger.messages()[-1][1].endswith("loading: bad input")


def test_init_failure(tmp_path):
    log = Logger()
    with pytest.raises(OSError, match="Failed to open log file"):
        log.init(LoggerConfig(log_file=tmp_path))


def test_get_logger_is_shared(tmp_path):
    get_logger().init(LoggerConfig(log_file=tmp_path / "shared.log"))
    try:
        get_logger().info("shared %s", "message")
        level, text = get_logger().messages()[-1]
        assert level == LogLevel.INFO
        assert text.endswith("[INFO] shared message")
    finally:
        get_logger().clear_messages()
        get_logger().close()