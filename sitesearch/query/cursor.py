"""
跨站点结果游标

单向、单次遍历命中列表；每次 advance() 返回新的当前命中，
调用方据此判断是否需要切换站点（游标本身不做切换）
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from sitesearch.core.exceptions import OutOfRange
from sitesearch.query.models import ResultHit


class CursorState(str, Enum):
    before_start = "before_start"
    iterating = "iterating"
    exhausted = "exhausted"


class SiteResultCursor:
    def __init__(self, hits: Sequence[ResultHit]):
        self._hits: List[ResultHit] = list(hits)
        self._position = -1
        self._exhausted = False
        self.in_the_loop = False

    def __len__(self) -> int:
        return len(self._hits)

    @property
    def position(self) -> int:
        return self._position

    @property
    def state(self) -> CursorState:
        if self._exhausted or self._position >= len(self._hits):
            return CursorState.exhausted
        if self._position < 0:
            return CursorState.before_start
        return CursorState.iterating

    @property
    def current(self) -> Optional[ResultHit]:
        if 0 <= self._position < len(self._hits):
            return self._hits[self._position]
        return None

    def has_more(self) -> bool:
        """
        是否还有下一条命中

        返回 False 时游标进入 exhausted 并清除 in_the_loop；重复调用是幂等的
        """
        if self._position + 1 < len(self._hits):
            return True
        self._exhausted = True
        self.in_the_loop = False
        return False

    def advance(self) -> ResultHit:
        """前进到下一条命中并返回它"""
        if self._position + 1 >= len(self._hits):
            self._exhausted = True
            raise OutOfRange(
                f"游标已到末尾: position={self._position}, hits={len(self._hits)}"
            )
        self.in_the_loop = True
        self._position += 1
        return self._hits[self._position]


def needs_switch(hit: ResultHit, active_site_id: int, cross_site: bool) -> bool:
    """跨站点模式下命中所属站点与当前站点不同时需要切换"""
    return cross_site and hit.site_id != active_site_id
