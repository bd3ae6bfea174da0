# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""

# 每个真实节点 默认生成的虚拟节点数
DEFAULT_VIRTUALS = 10

# Flask app.extensions 中注册的名称
EXTENSION_NAME = 'consistent_hash_ring'

# Flask配置信息
# 真实节点列表,可以是 list/tuple,或者 逗号分隔的字符串,如: 'redis://127.0.0.1:6379/1,redis://127.0.0.1:6380/1'
k_ring_nodes = 'RING_NODES'
# 每个真实节点的虚拟节点数,可以不设置,默认10
k_ring_virtuals = 'RING_VIRTUALS'
