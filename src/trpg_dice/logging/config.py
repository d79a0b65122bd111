"""日志配置模块

控制台与文件输出、轮转和保留策略。库本身不在导入时配置日志。
"""
import sys
import os
from pathlib import Path
from typing import Optional
from loguru import logger

from ..config import settings


# 控制台格式，component 由 get_logger 绑定
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level:<7}</level> "
    "<magenta>[{extra[component]}]</magenta> "
    "<level>{message}</level>"
)

# 文件格式
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level:<7} [{extra[component]}] {name}:{line} {message}"

DEFAULT_COMPONENT = "dice"


def setup_logging(
    level: Optional[str] = None,
    log_path: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    enable_console: bool = True,
    enable_file: bool = True,
) -> None:
    """配置日志系统

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)，默认取配置
        log_path: 日志文件目录路径，为空且配置开启 log_to_file 时取配置
        rotation: 日志轮转策略 (如 "10 MB", "1 day")
        retention: 日志保留策略 (如 "7 days")
        enable_console: 是否启用控制台输出
        enable_file: 是否启用文件输出
    """
    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})

    if log_path is None and settings.log_to_file:
        log_path = settings.log_path

    # 环境变量优先
    env_level = os.environ.get("LOG_LEVEL", level or settings.log_level).upper()

    if enable_console:
        logger.add(
            sys.stderr,
            level=env_level,
            format=CONSOLE_FORMAT,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    if enable_file and log_path:
        log_path = Path(log_path)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "dice_{time:YYYY-MM-DD}.log",
            level=env_level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )


def get_logger(component: Optional[str] = None):
    """获取绑定组件名的 logger，如 get_logger("parser")"""
    return logger.bind(component=component or DEFAULT_COMPONENT)
