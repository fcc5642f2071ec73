"""
配置加载与日志测试
Configuration Loader and Logger Tests
"""
import logging

import pytest
import yaml

import rpsls.utils.logger as logger_module
from rpsls.utils import (
    ConfigLoader, ConfigurationException, DEFAULT_CONFIG, ErrorHandler, GameException,
    InvalidInputException, configure_logging, get_log_level, setup_logger, setup_logger_from_config
)


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: DEBUG\ndisplay:\n  width: 60\n", encoding='utf-8')

    config = ConfigLoader.merge_defaults(ConfigLoader.load_config(str(path)))

    assert ConfigLoader.get_logging_config(config) == {'level': 'DEBUG', 'file': None}
    assert ConfigLoader.get_display_config(config) == {'clear_screen': True, 'width': 60}


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_config(str(tmp_path / "missing.yaml"))


def test_empty_config_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding='utf-8')

    assert ConfigLoader.load_config(str(path)) == {}
    assert ConfigLoader.merge_defaults({}) == DEFAULT_CONFIG
    assert ConfigLoader.merge_defaults({}) is not DEFAULT_CONFIG


def test_malformed_config(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("logging: [unclosed\n", encoding='utf-8')
    with pytest.raises(yaml.YAMLError):
        ConfigLoader.load_config(str(path))

    path.write_text("- just\n- a list\n", encoding='utf-8')
    with pytest.raises(ConfigurationException):
        ConfigLoader.load_config(str(path))

    with pytest.raises(ConfigurationException) as exc_info:
        ConfigLoader.merge_defaults({'display': 'wide'})
    assert exc_info.value.config_key == 'display'


@pytest.mark.parametrize("width", [0, -3, "wide", True])
def test_invalid_display_width(width):
    config = ConfigLoader.merge_defaults({'display': {'width': width}})
    with pytest.raises(ConfigurationException):
        ConfigLoader.get_display_config(config)


@pytest.mark.parametrize("clear_screen", ["no", "false", 0, 1, None])
def test_invalid_clear_screen(clear_screen):
    config = ConfigLoader.merge_defaults({'display': {'clear_screen': clear_screen}})
    with pytest.raises(ConfigurationException) as exc_info:
        ConfigLoader.get_display_config(config)
    assert exc_info.value.config_key == 'display.clear_screen'


def test_get_log_level():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("ERROR") == logging.ERROR
    assert get_log_level("verbose") == logging.WARNING


def test_setup_logger_does_not_duplicate_handlers():
    first = setup_logger("RPSLS.Test.Duplicate")
    second = setup_logger("RPSLS.Test.Duplicate")
    assert first is second
    assert len(second.handlers) == 1


def _detach_file_handler(log_file):
    """从所有组件日志记录器上摘下并关闭共用的文件处理器"""
    handler = logger_module._file_handlers.pop(str(log_file.resolve()), None)
    if handler is None:
        return
    for name in list(logging.Logger.manager.loggerDict):
        logger = logging.getLogger(name)
        if handler in logger.handlers:
            logger.removeHandler(handler)
    handler.close()


def test_setup_logger_from_config_with_file(tmp_path):
    log_file = tmp_path / "logs" / "rpsls.log"
    logger = setup_logger_from_config({'level': 'INFO', 'file': str(log_file)}, "RPSLS.Test.File")
    try:
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding='utf-8')
    finally:
        _detach_file_handler(log_file)


def test_configure_logging_shares_one_file_handler(tmp_path):
    log_file = tmp_path / "rpsls.log"
    first = setup_logger("RPSLS.Test.SharedA")
    second = setup_logger("RPSLS.Test.SharedB")
    try:
        configure_logging({'level': 'INFO', 'file': str(log_file)})
        configure_logging({'level': 'INFO', 'file': str(log_file)})

        first_files = [h for h in first.handlers if isinstance(h, logging.FileHandler)]
        second_files = [h for h in second.handlers if isinstance(h, logging.FileHandler)]
        assert len(first_files) == 1
        assert first_files == second_files

        first.info("from a")
        second.info("from b")
        first_files[0].flush()
        text = log_file.read_text(encoding='utf-8')
        assert "from a" in text and "from b" in text
    finally:
        _detach_file_handler(log_file)
        configure_logging({'level': 'WARNING'})


def test_configure_logging_updates_component_loggers():
    logger = setup_logger("RPSLS.Test.Configure")
    try:
        configure_logging({'level': 'DEBUG'})
        assert logger.level == logging.DEBUG
        assert all(handler.level == logging.DEBUG for handler in logger.handlers)
    finally:
        configure_logging({'level': 'WARNING'})
    assert logger.level == logging.WARNING


def test_error_handler_dispatch():
    handler = ErrorHandler()
    assert handler.handle(GameException("bad state", game_state="ROUND"))
    assert handler.handle(InvalidInputException("bad", value="x"))
    assert handler.handle(ConfigurationException("bad", config_key="display"), "test")
    assert not handler.handle(ValueError("unexpected"))

    seen = []
    handler.register_handler(ValueError, lambda exc, ctx: seen.append(ctx))
    assert handler.handle(ValueError("now handled"), "context")
    assert seen == ["context"]
