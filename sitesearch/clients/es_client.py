"""
ElasticSearch 搜索引擎客户端

封装多站点索引的检索与文章读取，支持本地和远程部署
"""

from typing import Any, Dict, List, Optional, Tuple

from elasticsearch import Elasticsearch, NotFoundError
from loguru import logger

from sitesearch.core.config import Settings, settings as default_settings
from sitesearch.core.exceptions import DocumentNotFound, TransportFailure
from sitesearch.query.base import IDocumentResolver, ISearchTransport
from sitesearch.query.models import Document, ResultHit


class SearchEngineClient(ISearchTransport, IDocumentResolver):
    """
    ElasticSearch 客户端

    负责执行翻译后的请求体、检查索引是否就绪、按站点读取文章
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[Elasticsearch] = None):
        """
        初始化 ES 客户端

        Args:
            settings: 配置（默认使用全局 settings）
            client: 已创建的 ES 客户端（测试时注入）
        """
        self.settings = settings or default_settings
        self.client = client
        if self.client is None:
            self._create_client()

    def _create_client(self):
        """
        创建 ES 客户端连接

        根据配置自动适配本地/远程部署，支持 HTTPS 和基础认证
        """
        s = self.settings
        try:
            es_config: Dict[str, Any] = {
                "hosts": [f"{s.ES_SCHEME}://{s.ES_HOST}:{s.ES_PORT}"],
                "request_timeout": s.ES_REQUEST_TIMEOUT,
                "max_retries": s.ES_MAX_RETRIES,
                "retry_on_timeout": True,
            }

            if s.ES_USERNAME and s.ES_PASSWORD:
                es_config["basic_auth"] = (s.ES_USERNAME, s.ES_PASSWORD)
                logger.info(f"连接 ES 使用认证: user={s.ES_USERNAME}")

            if s.ES_SCHEME == "https":
                es_config["verify_certs"] = True
                logger.info("连接 ES 启用 HTTPS")

            self.client = Elasticsearch(**es_config)
            logger.info(f"成功创建 ES 客户端: {s.ES_SCHEME}://{s.ES_HOST}:{s.ES_PORT}")

        except Exception as e:
            logger.error(f"创建 ES 客户端失败: {e}")
            raise

    def execute(
        self, request: Dict[str, Any], site_scope: Optional[int] = None
    ) -> Tuple[List[ResultHit], int]:
        """
        执行检索

        Args:
            request: 翻译后的请求体
            site_scope: None 表示跨站点（使用全局别名），否则检索该站点索引

        Returns:
            (命中列表, 命中总数)
        """
        index_name = self.settings.index_name(site_scope)
        logger.debug(f"执行检索: index={index_name}, body={request}")

        try:
            response = self.client.search(index=index_name, body=request)
        except Exception as e:
            logger.error(f"ES 检索失败: index={index_name}, error={e}")
            raise TransportFailure(f"ES 检索失败: {e}") from e

        hits = [self._parse_hit(hit) for hit in response["hits"]["hits"]]
        found = self._parse_total(response["hits"].get("total", len(hits)))

        logger.info(f"ES 检索完成: index={index_name}, hits={len(hits)}, total={found}")
        return hits, found

    def is_ready(self, site_scope: Optional[int] = None) -> bool:
        index_name = self.settings.index_name(site_scope)
        try:
            return bool(self.client.indices.exists(index=index_name))
        except Exception as e:
            logger.error(f"检查 ES 索引失败: index={index_name}, error={e}")
            raise TransportFailure(f"检查 ES 索引失败: {e}") from e

    def resolve(self, site_id: int, post_id: int) -> Document:
        """从站点索引读取完整文章"""
        index_name = self.settings.index_name(site_id)
        try:
            response = self.client.get(index=index_name, id=str(post_id))
        except NotFoundError as e:
            raise DocumentNotFound(f"文章不存在: index={index_name}, post_id={post_id}") from e
        except Exception as e:
            logger.error(f"读取文章失败: index={index_name}, post_id={post_id}, error={e}")
            raise TransportFailure(f"读取文章失败: {e}") from e

        source = response["_source"]
        return Document(
            site_id=site_id,
            post_id=post_id,
            title=source.get("post_title", ""),
            excerpt=source.get("post_excerpt", ""),
            content=source.get("post_content", ""),
            post_type=source.get("post_type"),
            meta=source.get("post_meta") or {},
        )

    @staticmethod
    def _parse_hit(hit: Dict[str, Any]) -> ResultHit:
        source = hit.get("_source") or {}
        post_id = source.get("post_id", hit.get("_id"))
        score = hit.get("_score")
        return ResultHit(
            site_id=int(source["site_id"]),
            post_id=int(post_id),
            score=float(score) if score is not None else None,
            source=source,
        )

    @staticmethod
    def _parse_total(total: Any) -> int:
        # ES 7+ 返回 {"value": n, "relation": "eq"}，更早版本返回整数
        if isinstance(total, dict):
            return int(total.get("value", 0))
        return int(total)

    def close(self):
        """关闭连接"""
        try:
            if self.client:
                self.client.close()
                logger.info("ES 连接已关闭")
        except Exception as e:
            logger.warning(f"关闭 ES 连接时出错: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
