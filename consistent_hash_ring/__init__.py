# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:
提供 一致性hash环,及 根据key获取对应节点(如 分布式redis节点)的功能

1.直接使用:
>>> ring = HashRing(['redis://127.0.0.1:6379/1', 'redis://127.0.0.1:6380/1'], 10)
>>> ring.get_node('user:1')

2.作为Flask扩展使用:
>>> app.config['RING_NODES'] = 'redis://127.0.0.1:6379/1,redis://127.0.0.1:6380/1'
>>> ring_ext = ConsistentHashRing(app)
>>> ring_ext.get_redis_node_obj('user:1').get('user:1')
"""

from flask import current_app

from .__version__ import __version__
from .exception import RingException, InvalidConfigException, NoNodeAvailableException
from .log_obj import log
from .ring import HashRing, LockedHashRing
from .utils import str2byte, byte2str, canonical_repr, get_id, stable_hash, gen_key, url_format, get_redis_obj, \
    get_node_redis_obj
from .utils.constant import *


class ConsistentHashRing(object):
    """一致性hash环 Flask扩展类"""

    def __init__(self, app=None, config=None):
        """
        对象初始化
        :param app:
        :param config:
        """
        # Flask的config必须是dict或者None
        if not (config is None or isinstance(config, dict)):
            raise InvalidConfigException("`config`参数必须是dict的实例或者None")

        # 存储配置
        self.config = config
        self.ring = None

        # 加载时即配置
        if app is not None:
            self.app = app
            self.init_app(app, config)

    def init_app(self, app, config=None):
        """ Flask扩展懒加载实现 """

        # Flask的config必须是dict或者None
        if not (config is None or isinstance(config, dict)):
            raise InvalidConfigException("`config`参数必须是dict的实例或者None")

        # 更新所有的配置
        basic_config = app.config.copy()
        if self.config:
            basic_config.update(self.config)
        if config:
            basic_config.update(config)
        config = basic_config

        nodes = self._parse_nodes(config.get(k_ring_nodes))
        virtuals = config.get(k_ring_virtuals, DEFAULT_VIRTUALS)
        if not isinstance(virtuals, int) or isinstance(virtuals, bool) or virtuals < 0:
            raise InvalidConfigException(f'{k_ring_virtuals}必须是>=0的int')

        self.ring = LockedHashRing(nodes, virtuals)
        self.app = app

        app.extensions[EXTENSION_NAME] = self
        log.info(f"成功注册 一致性hash环 扩展,节点数:{len(nodes)},虚拟节点数:{virtuals}")

    @classmethod
    def _parse_nodes(cls, nodes):
        """
        格式化 节点配置
        :param nodes: None,list,tuple 或者 逗号分隔的字符串
        :return:
        """
        if nodes is None:
            return []
        if isinstance(nodes, str):
            return [item.strip() for item in nodes.split(',') if item.strip()]
        if isinstance(nodes, (list, tuple)):
            return list(nodes)
        raise InvalidConfigException(f'{k_ring_nodes}必须是list,tuple或者逗号分隔的字符串')

    def insert(self, node):
        self.ring.insert(node)

    def remove(self, node):
        self.ring.remove(node)

    def get_node(self, key):
        return self.ring.get_node(key)

    def require_node(self, key):
        """
        获取key对应的节点,hash环为空时报错
        :param key:
        :return:
        """
        node = self.ring.get_node(key)
        if node is None:
            raise NoNodeAvailableException('hash环上没有节点,请添加!')
        return node

    def get_redis_node_obj(self, key):
        """
        通过key获取对应 节点的redis obj,节点必须是redis url
        :param key:
        :return:
        """
        return get_redis_obj(self.require_node(key))


def get_ring():
    """
    获取当前Flask app 注册的 hash环
    :return:
    """
    ext = current_app.extensions.get(EXTENSION_NAME)
    if ext is None:
        raise RingException('当前app没有注册 ConsistentHashRing 扩展')
    return ext.ring
