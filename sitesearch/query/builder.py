"""多站点检索请求构造器。"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from sitesearch.query.models import SearchArgs
from sitesearch.query.pagination import resolve_from

BASE_SEARCH_FIELDS = ("post_title", "post_excerpt", "post_content")

# filter.and 的槽位顺序：post_type 在前，站点在后
FILTER_SLOTS = ("post_type", "site")


class SiteQueryBuilder:
    """把 SearchArgs 翻译为 ES 请求体（纯函数，无外部调用）。"""

    def __init__(self, min_similarity: float = 0.5):
        """
        Args:
            min_similarity: fuzzy_like_this 的相似度阈值
        """
        self.min_similarity = min_similarity

    def build(self, args: SearchArgs) -> Dict[str, Any]:
        """
        构建 ES 请求体

        Args:
            args: 检索参数

        Returns:
            包含 from/size/sort，可选 filter 与 query 的请求体
        """
        request: Dict[str, Any] = {
            "from": resolve_from(args.offset, args.page, args.page_size),
            "size": args.page_size,
            "sort": [{"_score": {"order": "desc"}}],
        }

        slots: Dict[str, Optional[Dict[str, Any]]] = {name: None for name in FILTER_SLOTS}
        if not args.cross_site:
            slots["site"] = self.site_clause(args.current_site_id)
        if args.post_types:
            slots["post_type"] = self.post_type_clause(args.post_types)

        and_clauses = [slots[name] for name in FILTER_SLOTS if slots[name] is not None]
        if and_clauses:
            request["filter"] = {"and": and_clauses}

        if args.text:
            request["query"] = self.text_query(args.text, self.search_fields(args))

        logger.debug(f"ES 请求构造: args={args}, DSL={request}")
        return request

    @staticmethod
    def search_fields(args: SearchArgs) -> List[str]:
        """全文匹配字段：基础字段 -> 分类法 -> 自定义字段"""
        fields = list(BASE_SEARCH_FIELDS)
        fields.extend(f"terms.{tax}.name" for tax in args.taxonomy_fields)
        fields.extend(f"post_meta.{key}" for key in args.meta_fields)
        return fields

    def text_query(self, text: str, fields: List[str]) -> Dict[str, Any]:
        return {
            "bool": {
                "must": {
                    "fuzzy_like_this": {
                        "fields": fields,
                        "like_text": text,
                        "min_similarity": self.min_similarity,
                    }
                }
            }
        }

    @staticmethod
    def site_clause(site_id: int) -> Dict[str, Any]:
        return {"term": {"site_id": site_id}}

    @staticmethod
    def post_type_clause(post_types) -> Dict[str, Any]:
        # 单个类型用 term，多个用 terms；两种形态都要保留
        if len(post_types) < 2:
            return {"term": {"post_type": list(post_types)}}
        return {"terms": {"post_type": list(post_types)}}


_default_builder = SiteQueryBuilder()


def translate(args: SearchArgs) -> Dict[str, Any]:
    """使用默认构造器翻译检索参数"""
    return _default_builder.build(args)
