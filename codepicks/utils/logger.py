"""日志配置模块"""
import sys
from pathlib import Path
from typing import Optional
from loguru import logger
from codepicks.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(log_level: Optional[str] = None, log_file: Optional[str] = None):
    """
    配置日志系统，可重复调用（如批处理 --verbose 时切到 DEBUG）

    Args:
        log_level: 日志级别，默认取配置 log_level
        log_file: 日志文件路径，默认取配置 log_file；为空串时只输出到控制台
    """
    level = (log_level or settings.log_level).upper()
    log_file = settings.log_file if log_file is None else log_file

    logger.remove()
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            encoding="utf-8",
        )

    return logger


# 初始化日志
setup_logger()
