"""
配置加载工具模块
Configuration Loader Utility
"""
import copy
import yaml
from pathlib import Path
from typing import Dict, Any
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("RPSLS.ConfigLoader")

# 未提供配置文件时使用的默认配置
DEFAULT_CONFIG: Dict[str, Any] = {
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
    'display': {
        'clear_screen': True,
        'width': 74,
    },
}


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
            ConfigurationException: 顶层不是映射
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationException(f"配置文件顶层必须是映射: {config_path}")

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def merge_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        将配置与默认配置合并（按小节合并，配置文件中的值优先）

        Args:
            config: 从文件加载的配置字典

        Returns:
            Dict[str, Any]: 合并后的完整配置

        Raises:
            ConfigurationException: 小节不是映射
        """
        merged = copy.deepcopy(DEFAULT_CONFIG)
        for section, values in config.items():
            if values is None:
                continue
            if section in merged:
                if not isinstance(values, dict):
                    raise ConfigurationException(f"配置小节必须是映射: {section}", config_key=section)
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return config.get('logging', {})

    @staticmethod
    def get_display_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取终端显示配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 显示配置字典（clear_screen, width）

        Raises:
            ConfigurationException: clear_screen不是布尔值，或width不是正整数
        """
        display = config.get('display', {})
        clear_screen = display.get('clear_screen', DEFAULT_CONFIG['display']['clear_screen'])
        if not isinstance(clear_screen, bool):
            raise ConfigurationException(f"clear_screen必须是布尔值: {clear_screen!r}",
                                         config_key='display.clear_screen')
        width = display.get('width', DEFAULT_CONFIG['display']['width'])
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise ConfigurationException(f"显示宽度必须是正整数: {width!r}", config_key='display.width')
        return display
