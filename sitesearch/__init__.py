"""
多站点搜索引擎

将 WP_Query 风格的检索参数翻译为 Elasticsearch 请求，并以跨站点游标的方式遍历结果
"""
