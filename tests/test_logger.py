from codepicks.utils.logger import logger, setup_logger


def test_setup_logger_writes_to_given_file_at_given_level(tmp_path):
    log_file = tmp_path / "logs" / "batch.log"
    try:
        setup_logger(log_level="debug", log_file=str(log_file))
        logger.debug("数据源 Zenn 抓取到 3 条")
    finally:
        setup_logger()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG" in content
    assert "数据源 Zenn 抓取到 3 条" in content


def test_setup_logger_with_empty_file_only_logs_to_console(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    try:
        setup_logger(log_file="")
        logger.info("console only")
        assert list(tmp_path.iterdir()) == []
    finally:
        setup_logger()
