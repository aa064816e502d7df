"""
基础设施客户端模块

封装 ElasticSearch 客户端
"""

from sitesearch.clients.es_client import SearchEngineClient

__all__ = ["SearchEngineClient"]
