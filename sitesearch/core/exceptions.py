"""搜索核心的异常定义。"""
from __future__ import annotations


class SiteSearchError(Exception):
    """所有搜索核心异常的基类。"""


class InvalidArgument(SiteSearchError, ValueError):
    """检索参数非法（每页数量非正、offset 为负、缺少站点 ID 等）。"""


class OutOfRange(SiteSearchError, IndexError):
    """游标越界：在 has_more() 返回 False 之后仍调用 advance()。"""


class TransportFailure(SiteSearchError, RuntimeError):
    """ES 请求失败。原始异常通过 __cause__ 保留，不做任何解释。"""


class DocumentNotFound(SiteSearchError, LookupError):
    """命中的文章在读取时已不存在（检索与读取之间被删除）。"""
