"""
日志配置模块

应用入口处调用一次 setup_logging()，各模块用 structlog.get_logger(__name__) 或 get_logger 取 logger。
"""
from .logging import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
