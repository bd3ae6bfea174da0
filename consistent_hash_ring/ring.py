# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:
一致性hash环
>>> ring = HashRing(['foo', 'bar', 'baz'], 10)
>>> ring.get_node('1')
>>> ring.remove('foo')
>>> ring.insert('foo')
"""
import threading
from bisect import bisect_left, insort

from .log_obj import log
from .utils import DEFAULT_VIRTUALS, stable_hash, gen_key, synchronized


class HashRing(object):
    """
    一致性hash环
    每个真实节点 在环上占 virtuals 个虚拟节点,虚拟节点的位置 只由 (虚拟节点序号, 节点hash值) 决定,
    所以同一个节点 重复添加/删除后再添加,位置都不变

    环的存储: key:虚拟节点位置 val:真实节点 的dict + 排好序的位置list,通过二分查找定位

    注意:此类没有加锁,多线程共享时 请使用 LockedHashRing
    """

    def __init__(self, nodes=None, virtuals: int = DEFAULT_VIRTUALS):
        """

        :param nodes: 真实节点list,可以重复
        :param virtuals: 每个真实节点的虚拟节点数,为0时 hash环永远为空
        """
        if not isinstance(virtuals, int) or isinstance(virtuals, bool):
            raise TypeError('virtuals必须是int')
        if virtuals < 0:
            raise ValueError('virtuals不能小于0')

        self._virtuals = virtuals
        self.ring = {}
        self.sorted_keys = []

        for node in nodes or ():
            self.insert(node)

    @property
    def virtuals(self):
        return self._virtuals

    def _virtual_position(self, node, index):
        return gen_key(f'{index}:{stable_hash(node)}')

    def _key_position(self, key):
        return gen_key(str(stable_hash(key)))

    def insert(self, node):
        """
        添加真实节点,已存在的节点再次添加 结果不变
        :param node:
        :return:
        """
        for i in range(self._virtuals):
            position = self._virtual_position(node, i)
            if position in self.ring:
                old_node = self.ring[position]
                if old_node != node:
                    log.warning(f'虚拟节点位置冲突,position:{position},{old_node!r} 被 {node!r} 覆盖')
            else:
                insort(self.sorted_keys, position)
            self.ring[position] = node
        log.debug(f'添加节点:{node!r},当前虚拟节点数:{len(self.sorted_keys)}')

    def remove(self, node):
        """
        删除真实节点,按重新计算出的位置删除;节点不存在时 不做任何操作
        :param node:
        :return:
        """
        for i in range(self._virtuals):
            position = self._virtual_position(node, i)
            if position not in self.ring:
                continue
            del self.ring[position]
            index = bisect_left(self.sorted_keys, position)
            del self.sorted_keys[index]
        log.debug(f'删除节点:{node!r},当前虚拟节点数:{len(self.sorted_keys)}')

    def get_node(self, key):
        """
        获取key对应的真实节点: 环上顺时针方向 第一个 位置>=key位置 的虚拟节点,
        超过最大位置时 回到环的起点
        :param key:
        :return: 真实节点,hash环为空时 返回None
        """
        if not self.sorted_keys:
            return None

        index = bisect_left(self.sorted_keys, self._key_position(key))
        if index == len(self.sorted_keys):
            index = 0
        return self.ring[self.sorted_keys[index]]

    def items(self):
        """
        按位置升序 返回 (虚拟节点位置, 真实节点) list
        :return:
        """
        return [(position, self.ring[position]) for position in self.sorted_keys]

    @property
    def nodes(self):
        """按环上首次出现的顺序 返回去重后的真实节点"""
        result = []
        for position in self.sorted_keys:
            node = self.ring[position]
            if node not in result:
                result.append(node)
        return result

    def __len__(self):
        return len(self.sorted_keys)

    def __contains__(self, node):
        return any(item == node for item in self.ring.values())

    def __repr__(self):
        return f'{self.__class__.__name__}(virtuals={self._virtuals}, nodes={self.nodes!r}, entries={len(self)})'


class LockedHashRing(HashRing):
    """
    所有操作 通过同一把锁串行执行的 hash环,用于多线程共享
    """

    def __init__(self, nodes=None, virtuals: int = DEFAULT_VIRTUALS):
        self._lock = threading.RLock()
        super(LockedHashRing, self).__init__(nodes, virtuals)

    insert = synchronized(HashRing.insert)
    remove = synchronized(HashRing.remove)
    get_node = synchronized(HashRing.get_node)
    items = synchronized(HashRing.items)
    nodes = property(synchronized(HashRing.nodes.fget))
    __len__ = synchronized(HashRing.__len__)
    __contains__ = synchronized(HashRing.__contains__)
    __repr__ = synchronized(HashRing.__repr__)
