"""
检索核心

参数翻译、分页计算、跨站点游标与检索会话
"""

from sitesearch.query.models import SearchArgs, ResultHit, Document
from sitesearch.query.pagination import total_pages, resolve_from
from sitesearch.query.builder import SiteQueryBuilder, translate
from sitesearch.query.cursor import CursorState, SiteResultCursor, needs_switch
from sitesearch.query.session import SiteSearchQuery
from sitesearch.query.loop import iter_documents, site_scope

__all__ = [
    # 数据模型
    "SearchArgs",
    "ResultHit",
    "Document",
    # 分页
    "total_pages",
    "resolve_from",
    # 翻译
    "SiteQueryBuilder",
    "translate",
    # 游标
    "CursorState",
    "SiteResultCursor",
    "needs_switch",
    # 会话
    "SiteSearchQuery",
    "iter_documents",
    "site_scope",
]
