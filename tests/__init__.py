# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""


class TestBase:
    nodes = ['foo', 'bar', 'baz']
    keys = [str(i) for i in range(1, 10)]

    @classmethod
    def check_result(cls, result, data):
        """
        结果校验
        :param result:
        :param data:
        :return:
        """
        print('返回值:', result)
        assert result == data

    @classmethod
    def check_un_equal(cls, result, data):
        """
        结果校验
        :param result:
        :param data:
        :return:
        """
        print('返回值:', result)
        assert result != data

    @classmethod
    def assignment(cls, ring, keys=None):
        """
        获取 key到节点 的分配结果
        :param ring:
        :param keys:
        :return:
        """
        return {key: ring.get_node(key) for key in (keys or cls.keys)}
