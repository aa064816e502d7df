"""
检索数据模型

SearchArgs：经过一次性校验的检索参数
ResultHit：ES 返回的命中记录（站点 ID + 文章 ID）
Document：解析后的完整文章
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from sitesearch.core.exceptions import InvalidArgument


def _as_tuple(value: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    """post_type 等参数既可以是单个字符串，也可以是列表。"""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(v for v in value if v)


@dataclass(frozen=True)
class SearchArgs:
    """
    检索参数

    构造后不可变；所有校验在 __post_init__ 中一次完成
    """

    page_size: int
    text: Optional[str] = None
    post_types: Tuple[str, ...] = ()
    taxonomy_fields: Tuple[str, ...] = ()
    meta_fields: Tuple[str, ...] = ()
    offset: Optional[int] = None
    page: Optional[int] = None
    cross_site: bool = False
    current_site_id: Optional[int] = None

    def __post_init__(self):
        """数据验证"""
        # 允许传入 list / 单个字符串，统一成 tuple
        object.__setattr__(self, "post_types", _as_tuple(self.post_types))
        object.__setattr__(self, "taxonomy_fields", _as_tuple(self.taxonomy_fields))
        object.__setattr__(self, "meta_fields", _as_tuple(self.meta_fields))

        if self.page_size is None or self.page_size <= 0:
            raise InvalidArgument(f"page_size 必须为正整数: {self.page_size}")
        if self.offset is not None and self.offset < 0:
            raise InvalidArgument(f"offset 不能为负数: {self.offset}")
        if not self.cross_site and self.current_site_id is None:
            raise InvalidArgument("非跨站点检索必须提供 current_site_id")

    @classmethod
    def build(
        cls,
        config,
        current_site_id: Optional[int] = None,
        *,
        page_size: Optional[int] = None,
        **params: Any,
    ) -> "SearchArgs":
        """
        按配置补全默认值后构造 SearchArgs

        Args:
            config: 配置协作者（默认每页数量、跨站点开关）
            current_site_id: 调用方当前所在站点
            page_size: 每页数量，缺省时取配置
            **params: 其余检索参数（text、post_types、page 等）
        """
        if page_size is None:
            page_size = config.get_default_page_size()
        return cls(
            page_size=page_size,
            cross_site=config.is_cross_tenant_enabled(),
            current_site_id=current_site_id,
            **params,
        )


@dataclass(frozen=True)
class ResultHit:
    """ES 命中记录，score/source 不在核心中解释"""

    site_id: int
    post_id: int
    score: Optional[float] = None
    source: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass
class Document:
    """解析后的文章"""

    site_id: int
    post_id: int
    title: str = ""
    excerpt: str = ""
    content: str = ""
    post_type: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "site_id": self.site_id,
            "post_id": self.post_id,
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "post_type": self.post_type,
            "meta": self.meta,
        }
