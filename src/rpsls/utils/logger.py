"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

# 所有组件日志记录器的名称前缀
LOGGER_PREFIX = "RPSLS"

# 游戏输出走stdout，日志默认只输出警告及以上
DEFAULT_LEVEL = logging.WARNING

# 日志文件绝对路径 -> 共用的文件处理器
_file_handlers: Dict[str, logging.FileHandler] = {}


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别，无法识别时返回默认级别
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), DEFAULT_LEVEL)


def setup_logger(
    name: str = LOGGER_PREFIX,
    log_file: Optional[str] = None,
    level: int = DEFAULT_LEVEL,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 避免重复添加处理器
    if logger.handlers:
        return logger

    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    formatter = logging.Formatter(format_string)

    # 控制台处理器（stderr，不与游戏画面混在一起）
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        _add_file_handler(logger, log_file, level, formatter)

    # 组件日志记录器各自带处理器，不再向根记录器传播
    logger.propagate = False
    return logger


def _add_file_handler(logger: logging.Logger, log_file: str, level: int,
                      formatter: logging.Formatter):
    """为日志记录器挂上文件处理器，同一文件的所有记录器共用一个处理器"""
    log_path = Path(log_file).resolve()
    key = str(log_path)
    file_handler = _file_handlers.get(key)
    if file_handler is None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(key, encoding='utf-8')
        file_handler.setFormatter(formatter)
        _file_handlers[key] = file_handler
    file_handler.setLevel(level)
    if file_handler not in logger.handlers:
        logger.addHandler(file_handler)


def setup_logger_from_config(config: Dict[str, Any], name: str = LOGGER_PREFIX) -> logging.Logger:
    """
    从配置字典设置日志记录器

    Args:
        config: 配置字典（包含level和file键）
        name: 日志记录器名称

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    level = get_log_level(config.get('level', 'WARNING'))
    log_file = config.get('file')

    return setup_logger(name=name, log_file=log_file, level=level)


def configure_logging(config: Dict[str, Any]):
    """
    将日志配置应用到所有已创建的组件日志记录器

    模块级日志记录器在导入时就已创建，这里统一调整级别，
    并在配置了日志文件时为每个记录器挂上同一个文件处理器。

    Args:
        config: 日志配置字典（包含level和file键）
    """
    level = get_log_level(config.get('level', 'WARNING'))
    log_file = config.get('file')
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    for name in list(logging.Logger.manager.loggerDict):
        if name != LOGGER_PREFIX and not name.startswith(LOGGER_PREFIX + "."):
            continue
        logger = setup_logger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        if log_file:
            _add_file_handler(logger, log_file, level, formatter)
