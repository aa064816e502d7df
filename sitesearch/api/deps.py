# 依赖注入（ES 客户端、配置、站点上下文）
from functools import lru_cache

from sitesearch.clients.es_client import SearchEngineClient
from sitesearch.core.config import SettingsSearchConfig, settings
from sitesearch.core.site_context import SiteSwitcher


@lru_cache
def get_search_client() -> SearchEngineClient:
    return SearchEngineClient(settings)


def get_search_config() -> SettingsSearchConfig:
    return SettingsSearchConfig(settings)


def get_site_context() -> SiteSwitcher:
    # 每个请求一个站点上下文，切换状态不跨请求共享
    return SiteSwitcher(settings.DEFAULT_SITE_ID)
