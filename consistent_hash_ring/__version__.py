# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""

__title__ = 'consistent_hash_ring'
__description__ = '一致性hash环: 支持虚拟节点的 节点增删及 key到节点 的映射'
__version__ = '0.1.0'
__author__ = 'Rgc'
__author_email__ = '2020956572@qq.com'
__license__ = 'MIT'
