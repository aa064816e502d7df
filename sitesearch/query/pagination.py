"""
分页计算（纯函数，便于单测）

- total_pages：命中总数 + 每页数量 -> 总页数
- resolve_from：offset / page -> ES 的 from
"""
from __future__ import annotations

from typing import Optional

from sitesearch.core.exceptions import InvalidArgument


def total_pages(found_total: int, page_size: int) -> int:
    """ceil(found_total / page_size)，没有命中时为 0"""
    if page_size <= 0:
        raise InvalidArgument(f"page_size 必须为正整数: {page_size}")
    if found_total < 0:
        raise InvalidArgument(f"found_total 不能为负数: {found_total}")
    return -(-found_total // page_size)


def resolve_from(offset: Optional[int], page: Optional[int], page_size: int) -> int:
    """
    计算 ES 请求的 from

    优先级：offset > page > 0
    - offset 显式给出时直接作为 from
    - page 为 1-based，<= 1 都视为第一页
    """
    if page_size <= 0:
        raise InvalidArgument(f"page_size 必须为正整数: {page_size}")
    if offset is not None:
        if offset < 0:
            raise InvalidArgument(f"offset 不能为负数: {offset}")
        return offset
    if page is not None:
        return page_size * max(page - 1, 0)
    return 0
