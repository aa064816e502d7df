"""
外部协作者接口定义

检索核心只依赖这些接口：ES 传输、配置、文章解析、站点上下文
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from sitesearch.query.models import Document, ResultHit


class ISearchTransport(ABC):
    """ES 传输层接口"""

    @abstractmethod
    def execute(
        self, request: Dict[str, Any], site_scope: Optional[int] = None
    ) -> Tuple[List[ResultHit], int]:
        """
        执行检索请求

        Args:
            request: 翻译后的 ES 请求体（站点过滤已经写在 filter 中）
            site_scope: 站点范围；None 表示跨站点检索

        Returns:
            (命中列表, 命中总数)
        """
        pass

    @abstractmethod
    def is_ready(self, site_scope: Optional[int] = None) -> bool:
        """目标索引是否已建立"""
        pass


class ISearchConfig(ABC):
    """全局配置接口"""

    @abstractmethod
    def get_default_page_size(self) -> int:
        pass

    @abstractmethod
    def is_cross_tenant_enabled(self) -> bool:
        pass


class IDocumentResolver(ABC):
    """把 (站点, 文章 ID) 解析为完整文章"""

    @abstractmethod
    def resolve(self, site_id: int, post_id: int) -> Document:
        pass


class ISiteContext(ABC):
    """站点上下文：切换 / 恢复必须成对调用"""

    @property
    @abstractmethod
    def current_site_id(self) -> int:
        pass

    @abstractmethod
    def switch_to(self, site_id: int) -> None:
        pass

    @abstractmethod
    def restore_previous(self) -> None:
        pass
