# tests/utils/test_logger.py
from loguru import logger

from timeflow.config import LogConfig
from timeflow.utils.logger import Logging


def test_file_sink_written_when_dir_configured(tmp_path):
    log_dir = tmp_path / "logs"
    logs = Logging()
    logs.configure(LogConfig(dir=str(log_dir), level="DEBUG"))

    logs.debug("hello from test")
    logger.complete()
    logger.remove()

    files = list(log_dir.glob("*.log"))
    assert len(files) == 1
    assert "hello from test" in files[0].read_text(encoding="utf-8")


def test_level_filters_messages(tmp_path):
    log_dir = tmp_path / "logs"
    logs = Logging(log_dir=str(log_dir), log_level="WARNING")

    logs.info("quiet")
    logs.warning("loud")
    logger.complete()
    logger.remove()

    text = next(log_dir.glob("*.log")).read_text(encoding="utf-8")
    assert "loud" in text
    assert "quiet" not in text


def test_default_logging_writes_no_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Logging()
    logger.remove()

    assert list(tmp_path.iterdir()) == []
