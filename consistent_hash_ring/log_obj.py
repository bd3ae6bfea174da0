# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:
包内统一使用的 logger
>>> from consistent_hash_ring.log_obj import log
>>> log.info('xxx')
"""

import logging
import sys

LOGGER_NAME = "ConsistentHashRing"
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s(%(filename)s:%(lineno)s) | %(message)s'


def has_level_handler(logger):
    """Check if there is a handler in the logging chain that will handle the
    given logger's :meth:`effective level <~logging.Logger.getEffectiveLevel>`.
    """
    level = logger.getEffectiveLevel()
    current = logger

    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True

        if not current.propagate:
            break

        current = current.parent

    return False


default_handler = logging.StreamHandler(sys.stdout)
default_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def create_logger(name=LOGGER_NAME, level=logging.INFO):
    """
    获取logger,调用方没有配置能处理该级别的handler时,添加默认的 stdout handler
    :param name: logger名称
    :param level: 日志级别
    :return:
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not has_level_handler(logger):
        logger.addHandler(default_handler)

    return logger


log = create_logger()
