# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""
import json

import pytest
from redis import Redis

from consistent_hash_ring import ConsistentHashRing, LockedHashRing, InvalidConfigException, \
    NoNodeAvailableException, RingException, get_ring
from tests import TestBase


class TestExtension(TestBase):

    def test_registered(self, ext):
        """ 测试 扩展注册及配置
        """
        assert isinstance(ext.ring, LockedHashRing)
        assert ext.app.extensions['consistent_hash_ring'] is ext
        self.check_result(ext.ring.virtuals, 10)
        self.check_result(len(ext.ring), 30)

    def test_api_node(self, client, ext):
        """ 测试 在请求中 通过当前app的hash环 获取节点
        """
        for key in self.keys:
            get_result = client.get(f'/api/node/{key}')
            self.check_result(get_result.data, json.dumps(ext.get_node(key)).encode())

    def test_get_redis_node_obj(self, ext):
        """ 测试 获取key对应节点的redis对象
        """
        redis_obj = ext.get_redis_node_obj('user:1')
        assert isinstance(redis_obj, Redis)
        kwargs = redis_obj.connection_pool.connection_kwargs
        self.check_result(kwargs['host'], '127.0.0.1')
        assert kwargs['port'] in (6379, 6380, 6381)

    def test_config_override(self, new_app):
        """ 测试 构造参数的配置 覆盖app配置,init_app的配置 覆盖构造参数的配置
        """
        new_app.config['RING_NODES'] = ['a', 'b', 'c']
        new_app.config['RING_VIRTUALS'] = 2
        ext = ConsistentHashRing(config={'RING_NODES': ('a', 'b')})
        ext.init_app(new_app, {'RING_VIRTUALS': 3})
        self.check_result(len(ext.ring), 6)
        self.check_result(sorted(ext.ring.nodes), ['a', 'b'])

    def test_nodes_str(self, new_app):
        """ 测试 逗号分隔的节点配置
        """
        ext = ConsistentHashRing(new_app, {'RING_NODES': ' a, b,,c ,'})
        self.check_result(sorted(ext.ring.nodes), ['a', 'b', 'c'])
        self.check_result(ext.ring.virtuals, 10)

    def test_mutation(self, new_app):
        """ 测试 通过扩展 添加,删除节点
        """
        ext = ConsistentHashRing(new_app, {'RING_NODES': ['foo', 'bar']})
        ext.insert('baz')
        self.check_result(len(ext.ring), 30)
        ext.remove('foo')
        self.check_result(sorted(ext.ring.nodes), ['bar', 'baz'])
        assert ext.require_node('1') in ('bar', 'baz')

    def test_empty(self, new_app):
        """ 测试 没有节点时
        """
        ext = ConsistentHashRing(new_app)
        self.check_result(ext.get_node('1'), None)
        with pytest.raises(NoNodeAvailableException):
            ext.require_node('1')
        with pytest.raises(NoNodeAvailableException):
            ext.get_redis_node_obj('1')

    @pytest.mark.parametrize('config', ['x', ['RING_NODES'], 1])
    def test_invalid_config(self, new_app, config):
        """ 测试 config参数类型错误
        """
        with pytest.raises(InvalidConfigException):
            ConsistentHashRing(new_app, config)
        with pytest.raises(InvalidConfigException):
            ConsistentHashRing().init_app(new_app, config)

    @pytest.mark.parametrize('virtuals', [-1, '10', 1.5, True, None])
    def test_invalid_virtuals(self, new_app, virtuals):
        """ 测试 虚拟节点数 配置错误
        """
        with pytest.raises(InvalidConfigException):
            ConsistentHashRing(new_app, {'RING_VIRTUALS': virtuals})

    def test_invalid_nodes(self, new_app):
        """ 测试 节点 配置错误
        """
        with pytest.raises(InvalidConfigException):
            ConsistentHashRing(new_app, {'RING_NODES': 5})

    def test_get_ring(self, new_app):
        """ 测试 获取当前app的hash环
        """
        with new_app.app_context():
            with pytest.raises(RingException):
                get_ring()

        ext = ConsistentHashRing(new_app, {'RING_NODES': ['foo']})
        with new_app.app_context():
            assert get_ring() is ext.ring
