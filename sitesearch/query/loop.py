"""
结果遍历

调用方一侧的遍历约定：每条命中在解析前按需切换站点，解析后必定恢复；
解析出的文章直接交给调用方，不写入任何共享的“当前文章”状态
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Tuple

from loguru import logger

from sitesearch.core.exceptions import DocumentNotFound
from sitesearch.query.base import IDocumentResolver, ISiteContext
from sitesearch.query.cursor import needs_switch
from sitesearch.query.models import Document, ResultHit
from sitesearch.query.session import SiteSearchQuery


@contextmanager
def site_scope(site_context: ISiteContext, hit: ResultHit, cross_site: bool) -> Iterator[int]:
    """在命中所属站点内执行代码块，退出时（包括异常）恢复原站点"""
    switched = needs_switch(hit, site_context.current_site_id, cross_site)
    if switched:
        site_context.switch_to(hit.site_id)
    try:
        yield site_context.current_site_id
    finally:
        if switched:
            site_context.restore_previous()


def iter_documents(
    query: SiteSearchQuery,
    resolver: IDocumentResolver,
    site_context: ISiteContext,
) -> Iterator[Tuple[ResultHit, Document]]:
    """依次产出 (命中, 文章)；提前 break 时站点同样会被恢复，已删除的文章被跳过"""
    while query.has_more():
        hit = query.advance()
        try:
            with site_scope(site_context, hit, query.cross_site):
                document = resolver.resolve(hit.site_id, hit.post_id)
        except DocumentNotFound as e:
            logger.warning(f"[iter_documents] 跳过已删除的文章: site_id={hit.site_id}, post_id={hit.post_id}, {e}")
            continue
        yield hit, document
