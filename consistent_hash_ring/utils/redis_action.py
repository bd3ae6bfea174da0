# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:
真实节点为 redis url 时,根据key获取对应节点的 redis对象
"""

from redis import Redis

from ..exception import NoNodeAvailableException


def url_format(*args, **kwargs):
    """
    生成redis url
    :param args:参数顺序必须为 host,port,db,password
    :param kwargs:
    :return:

    Usage:
    >>> url_format('127.0.0.1', 6379, 1, 'xxx')
    >>> "redis://:xxx@127.0.0.1:6379/1"

    >>> url_format(**{'host': '127.0.0.1', 'port': 6379,'db':1,'password':'xxx'})
    >>> "redis://:xxx@127.0.0.1:6379/1"
    """
    password = None
    if args:
        if len(args) == 3:
            host, port, db = args
        else:
            host, port, db, password = args
    else:
        host = kwargs.get('host')
        port = kwargs.get('port')
        db = kwargs.get('db')
        password = kwargs.get('password')

    if password:
        return f"redis://:{password}@{host}:{port}/{db}"
    else:
        return f"redis://{host}:{port}/{db}"


def get_redis_obj(node_url: str):
    """
    通过url获取redis对象,此时不会建立连接,执行命令时才连接
    :param node_url:
    :return:
    """
    return Redis.from_url(node_url)


def get_node_redis_obj(ring, key):
    """
    通过key 在hash环上找到对应节点(redis url),获取该节点的redis对象
    :param ring: HashRing对象,节点必须是 redis url
    :param key:
    :return:
    """
    node_url = ring.get_node(key)
    if node_url is None:
        raise NoNodeAvailableException('hash环上没有节点,请添加!')
    return get_redis_obj(node_url)
