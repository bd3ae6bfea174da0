# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:
异常类
"""


class RingException(Exception):
    """一致性hash环 相关异常的基类"""


class InvalidConfigException(RingException):
    """配置错误"""


class NoNodeAvailableException(RingException):
    """hash环上没有节点,无法给key分配节点"""
