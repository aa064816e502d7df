"""
搜索 API Schema

定义文章检索请求和响应的数据模型（字段沿用 WP_Query 的命名）
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union


class PostSearchRequest(BaseModel):
    """文章检索请求"""

    s: Optional[str] = Field(default=None, description="检索关键词")
    post_type: Optional[Union[str, List[str]]] = Field(default=None, description="文章类型，单个或列表")
    search_tax: List[str] = Field(default_factory=list, description="参与全文匹配的分类法")
    search_meta: List[str] = Field(default_factory=list, description="参与全文匹配的自定义字段")
    offset: Optional[int] = Field(default=None, ge=0, description="结果偏移量，优先于 paged")
    paged: Optional[int] = Field(default=None, description="页码（1-based）")
    posts_per_page: Optional[int] = Field(default=None, ge=1, description="每页数量，缺省取配置")
    site_id: Optional[int] = Field(default=None, description="当前站点，缺省取配置")

    class Config:
        json_schema_extra = {
            "example": {
                "s": "cats",
                "post_type": "post",
                "search_tax": ["category"],
                "search_meta": [],
                "paged": 2,
                "posts_per_page": 5,
                "site_id": 4,
            }
        }


class PostSearchItem(BaseModel):
    """单篇文章结果"""

    site_id: int = Field(..., description="站点ID")
    post_id: int = Field(..., description="文章ID")
    score: Optional[float] = Field(None, description="相关性分数")
    title: str = Field("", description="标题")
    excerpt: str = Field("", description="摘要")
    post_type: Optional[str] = Field(None, description="文章类型")
    meta: Dict[str, Any] = Field(default_factory=dict, description="自定义字段")


class PostSearchResponse(BaseModel):
    """文章检索响应"""

    found_posts: int = Field(..., description="命中总数")
    max_num_pages: int = Field(..., description="总页数")
    post_count: int = Field(..., description="本页数量")
    page: int = Field(..., description="当前页码（1-based）")
    cross_site: bool = Field(..., description="是否跨站点检索")
    items: List[PostSearchItem] = Field(..., description="本页结果")
