# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:
hash环 用到的 编码及hash函数
"""

import hashlib
import numbers


def str2byte(_str):
    """
    str to bytes
    :param _str:
    :return:
    """
    return bytes(_str, encoding='utf8')


def byte2str(_bytes):
    """
    bytes to str
    :param _bytes:
    :return:
    """
    return str(_bytes, encoding="utf-8")


def _number_repr(num):
    """
    相等的数字 使用相同的标识: 1, 1.0, True, Fraction(1), Decimal('1') 都为 '1'
    :param num:
    :return:
    """
    if isinstance(num, numbers.Complex) and not isinstance(num, numbers.Real):
        if num.imag != 0:
            return repr(complex(num))
        num = num.real
    try:
        if int(num) == num:
            return repr(int(num))
    except (ValueError, OverflowError):
        # nan, inf
        pass
    try:
        if float(num) == num:
            return repr(float(num))
    except (ValueError, OverflowError):
        pass
    return repr(num)


def canonical_repr(obj):
    """
    获取对象的 规范化字符串: python中相等的对象 得到相同的字符串,且不受 PYTHONHASHSEED 影响
    1.类型定义了 __ring_id__(self) 时,使用其返回值
    2.数字: 相等的数字 结果相同
    3.tuple/list: 逐个元素规范化
    4.set/frozenset: 元素规范化之后 排序
    5.其他对象(str,bytes,None等)使用 repr()

    注意:默认的 repr() 中带有内存地址的对象,只在同一进程内稳定,这种对象需要定义 __ring_id__
    :param obj:
    :return:

    Usage:
    >>> canonical_repr(frozenset([16, 8]))
    >>> 'frozenset({8, 16})'
    >>> canonical_repr((True, 2.0))
    >>> '(1, 2)'
    """
    # 和特殊方法一样 从类型上查找,obj本身是类时 不会拿到未绑定的函数
    ring_id = getattr(type(obj), "__ring_id__", None)
    if callable(ring_id):
        return canonical_repr(ring_id(obj))
    if isinstance(obj, numbers.Number):
        return _number_repr(obj)
    if isinstance(obj, tuple):
        items = [canonical_repr(item) for item in obj]
        if len(items) == 1:
            return f'({items[0]},)'
        return f"({', '.join(items)})"
    if isinstance(obj, list):
        return f"[{', '.join(canonical_repr(item) for item in obj)}]"
    if isinstance(obj, (set, frozenset)):
        if not obj:
            return 'frozenset()'
        items = sorted(canonical_repr(item) for item in obj)
        return f"frozenset({{{', '.join(items)}}})"
    return repr(obj)


def get_id(obj):
    """
    获取对象 用于hash的身份标识(bytes): 规范化字符串 的utf8编码
    所以 '1' 和 1 是不同的标识, 1 和 1.0 是相同的标识
    :param obj:
    :return:

    Usage:
    >>> get_id('foo')
    >>> b"'foo'"
    >>> get_id(b'foo')
    >>> b"b'foo'"
    """
    return str2byte(canonical_repr(obj))


def stable_hash(obj):
    """
    计算对象的 64位 稳定hash值(blake2b),不受 PYTHONHASHSEED 影响,跨进程一致
    :param obj:
    :return: int, 0 <= hash < 2 ** 64
    """
    digest = hashlib.blake2b(get_id(obj), digest_size=8).digest()
    return int.from_bytes(digest, 'big')


def gen_key(key: str):
    """
    生成 hash环上的位置: md5的 32位小写16进制字符串,字符串的大小顺序 即 数值的大小顺序
    :param key:
    :return:

    Usage:
    >>> gen_key('0:123')
    """
    if not isinstance(key, str):
        raise TypeError(f'gen_key只接受str,实际为{type(key).__name__}')
    return hashlib.md5(str2byte(key)).hexdigest()
