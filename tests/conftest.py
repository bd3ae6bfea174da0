# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""
import json

import pytest
from flask import Flask, make_response

from consistent_hash_ring import ConsistentHashRing, HashRing, byte2str, get_ring

app = Flask(__name__)


class Config(object):
    """
    配置类
    """
    DEBUG = True
    RING_NODES = 'redis://127.0.0.1:6379/1,redis://127.0.0.1:6380/1,redis://127.0.0.1:6381/1'
    RING_VIRTUALS = 10


app.config.from_object(Config)
ring_ext = ConsistentHashRing(app)


def json_resp(result):
    if isinstance(result, bytes):
        result = byte2str(result)
    result = json.dumps(result)
    resp = make_response(result)
    resp.headers['Content-Type'] = 'application/json'
    return resp


@app.route("/api/node/<string:key>")
def api_node(key):
    """
    测试 通过当前app的hash环 获取key对应的节点
    :param key:
    :return:
    """
    return json_resp(get_ring().get_node(key))


@pytest.fixture
def client():
    """ 构建测试用例
    """
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def ext():
    """ 注册了 ConsistentHashRing 的app对应的扩展对象
    """
    return ring_ext


@pytest.fixture
def new_app():
    """ 没有注册扩展的app
    """
    _app = Flask(__name__)
    _app.config["TESTING"] = True
    return _app


@pytest.fixture
def ring():
    """ 3个节点,每个节点10个虚拟节点
    """
    return HashRing(['foo', 'bar', 'baz'], 10)
