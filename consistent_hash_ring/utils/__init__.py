# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""
from .constant import *
from .decorator import synchronized
from .transform import str2byte, byte2str, canonical_repr, get_id, stable_hash, gen_key
from .redis_action import url_format, get_redis_obj, get_node_redis_obj
