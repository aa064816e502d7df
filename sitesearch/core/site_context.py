"""
站点上下文

多站点部署下的 switch_to_blog / restore_current_blog 语义：切换时压栈，恢复时出栈
"""
from __future__ import annotations

from typing import List

from loguru import logger

from sitesearch.query.base import ISiteContext


class SiteSwitcher(ISiteContext):
    """基于栈的站点上下文实现。"""

    def __init__(self, default_site_id: int):
        self._current = default_site_id
        self._stack: List[int] = []

    @property
    def current_site_id(self) -> int:
        return self._current

    @property
    def depth(self) -> int:
        return len(self._stack)

    def switch_to(self, site_id: int) -> None:
        self._stack.append(self._current)
        logger.debug(f"[SiteSwitcher] 切换站点: {self._current} -> {site_id}")
        self._current = site_id

    def restore_previous(self) -> None:
        # 未切换过时恢复是空操作
        if not self._stack:
            return
        previous = self._stack.pop()
        logger.debug(f"[SiteSwitcher] 恢复站点: {self._current} -> {previous}")
        self._current = previous
