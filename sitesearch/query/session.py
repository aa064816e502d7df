"""
检索会话

一次检索一个会话：翻译 -> 执行 -> 保存结果，随后通过游标遍历
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from sitesearch.core.exceptions import SiteSearchError, TransportFailure
from sitesearch.query.base import ISearchTransport
from sitesearch.query.builder import SiteQueryBuilder
from sitesearch.query.cursor import SiteResultCursor
from sitesearch.query.models import ResultHit, SearchArgs
from sitesearch.query.pagination import total_pages


class SiteSearchQuery:
    """
    模仿 WP_Query 的检索会话，但命中记录带站点 ID

    构造时立即执行检索；结果只写入一次，之后只有游标会变化
    """

    def __init__(
        self,
        args: SearchArgs,
        transport: ISearchTransport,
        builder: Optional[SiteQueryBuilder] = None,
    ):
        self.args = args
        self.cross_site = args.cross_site
        self.page_size = args.page_size
        self.transport = transport
        self.builder = builder or SiteQueryBuilder()

        self.request: Dict[str, Any] = {}
        self.hits: List[ResultHit] = []
        self.found_posts = 0
        self.post_count = 0
        self.max_num_pages = 0
        self.cursor = SiteResultCursor([])

        self.query()

    @property
    def site_scope(self) -> Optional[int]:
        """跨站点时为 None，否则为当前站点"""
        if self.cross_site:
            return None
        return self.args.current_site_id

    def query(self) -> List[ResultHit]:
        """翻译参数并执行检索，保存命中与分页信息"""
        self.request = self.builder.build(self.args)

        try:
            if not self.transport.is_ready(self.site_scope):
                logger.warning(f"[SiteSearchQuery] 索引未就绪，返回空结果: site_scope={self.site_scope}")
                return self.hits
            hits, found = self.transport.execute(self.request, self.site_scope)
        except SiteSearchError:
            raise
        except Exception as e:
            logger.error(f"[SiteSearchQuery] 检索失败: {e}")
            raise TransportFailure(str(e)) from e

        self.hits = list(hits)
        self.found_posts = found
        self.post_count = len(self.hits)
        self.max_num_pages = total_pages(found, self.page_size)
        self.cursor = SiteResultCursor(self.hits)

        logger.info(
            f"[SiteSearchQuery] 检索完成: text={self.args.text!r}, cross_site={self.cross_site}, "
            f"found_posts={self.found_posts}, post_count={self.post_count}, "
            f"max_num_pages={self.max_num_pages}"
        )
        return self.hits

    @property
    def in_the_loop(self) -> bool:
        return self.cursor.in_the_loop

    @property
    def current_post(self) -> int:
        return self.cursor.position

    def has_more(self) -> bool:
        return self.cursor.has_more()

    def advance(self) -> ResultHit:
        return self.cursor.advance()
