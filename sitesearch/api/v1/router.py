# 路由汇总
from fastapi import APIRouter
from sitesearch.api.v1.endpoints import search

api_router = APIRouter()

# 挂载文章检索模块 (访问地址: /api/v1/search/...)
api_router.include_router(search.router, prefix="/search", tags=["文章检索模块"])
