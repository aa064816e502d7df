# 读取 .env 配置
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitesearch.query.base import ISearchConfig


class Settings(BaseSettings):
    # Elasticsearch
    ES_SCHEME: str = "http"
    ES_HOST: str = "localhost"
    ES_PORT: int = 9200
    ES_USERNAME: str = ""
    ES_PASSWORD: str = ""
    ES_INDEX_PREFIX: str = "sitesearch"
    ES_GLOBAL_ALIAS: str = "sitesearch-global"
    ES_REQUEST_TIMEOUT: int = 30
    ES_MAX_RETRIES: int = 3

    # 分页 / 多站点
    POSTS_PER_PAGE: int = 10
    CROSS_SITE_SEARCH_ACTIVE: bool = False
    DEFAULT_SITE_ID: int = 1

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""
    DEBUG: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # 忽略多余的环境变量
    )

    def index_name(self, site_id=None) -> str:
        """站点索引名；site_id 为 None 时使用跨站点别名。"""
        if site_id is None:
            return self.ES_GLOBAL_ALIAS
        return f"{self.ES_INDEX_PREFIX}-{site_id}"


class SettingsSearchConfig(ISearchConfig):
    """基于 Settings 的配置协作者（默认每页数量、跨站点开关）。"""

    def __init__(self, settings: Settings):
        self._settings = settings

    def get_default_page_size(self) -> int:
        return self._settings.POSTS_PER_PAGE

    def is_cross_tenant_enabled(self) -> bool:
        return self._settings.CROSS_SITE_SEARCH_ACTIVE


settings = Settings()
