# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""
from functools import wraps


def synchronized(f):
    """
    使用 实例的 _lock 属性,串行执行被装饰的方法
    :param f:
    :return:

    Usage:
    >>> class Foo:
    >>>     def __init__(self):
    >>>         self._lock = threading.RLock()
    >>>
    >>>     @synchronized
    >>>     def bar(self):
    >>>         pass
    """

    @wraps(f)
    def decorator(self, *args, **kwargs):
        """
        内部装饰器
        :param self:
        :param args:
        :param kwargs:
        :return:
        """
        with self._lock:
            return f(self, *args, **kwargs)

    return decorator
