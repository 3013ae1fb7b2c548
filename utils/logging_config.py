"""入口程序（CLI / 页面）的日志配置；库代码只调用 logging.getLogger(__name__)"""
import logging
from typing import Optional

from config.settings import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
