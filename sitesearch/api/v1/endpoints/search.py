"""
搜索 API 端点

多站点文章检索接口
"""

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from sitesearch.api.deps import get_search_client, get_search_config, get_site_context
from sitesearch.core.exceptions import InvalidArgument, TransportFailure
from sitesearch.query.base import IDocumentResolver, ISearchConfig, ISearchTransport, ISiteContext
from sitesearch.query.loop import iter_documents
from sitesearch.query.models import SearchArgs
from sitesearch.query.session import SiteSearchQuery
from sitesearch.schemas.search_schema import PostSearchItem, PostSearchRequest, PostSearchResponse

router = APIRouter()


@router.post("/posts", response_model=PostSearchResponse, tags=["搜索"])
def search_posts(
    request: PostSearchRequest,
    client=Depends(get_search_client),
    config: ISearchConfig = Depends(get_search_config),
    site_context: ISiteContext = Depends(get_site_context),
):
    """
    文章检索

    **流程：**
    1. 参数校验并补全默认值（每页数量、跨站点开关）
    2. 翻译为 ES 请求体（关键词模糊匹配、文章类型、站点过滤、分页）
    3. 执行检索，计算总页数
    4. 遍历结果：按需切换站点 -> 读取文章 -> 恢复站点

    **参数说明：**
    - `s`: 检索关键词，缺省时只做过滤
    - `offset`: 显式偏移量，同时给出时优先于 `paged`
    - `site_id`: 当前站点，非跨站点模式下用于限定结果
    """
    return run_search(request, transport=client, resolver=client, config=config, site_context=site_context)


def run_search(
    request: PostSearchRequest,
    *,
    transport: ISearchTransport,
    resolver: IDocumentResolver,
    config: ISearchConfig,
    site_context: ISiteContext,
) -> PostSearchResponse:
    try:
        logger.info(f"[API] 收到检索请求: s={request.s!r}, post_type={request.post_type}, paged={request.paged}")

        # 请求指定站点时，遍历期间以该站点作为当前站点
        entered = request.site_id is not None and request.site_id != site_context.current_site_id
        if entered:
            site_context.switch_to(request.site_id)
        try:
            return _search_in_site(request, transport, resolver, config, site_context)
        finally:
            if entered:
                site_context.restore_previous()

    except InvalidArgument as e:
        logger.warning(f"[API] 检索参数非法: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except TransportFailure as e:
        logger.error(f"[API] ES 请求失败: {e}")
        raise HTTPException(status_code=502, detail=f"检索失败: {str(e)}")
    except Exception as e:
        logger.error(f"[API] 检索失败: {e}")
        raise HTTPException(status_code=500, detail=f"检索失败: {str(e)}")


def _search_in_site(
    request: PostSearchRequest,
    transport: ISearchTransport,
    resolver: IDocumentResolver,
    config: ISearchConfig,
    site_context: ISiteContext,
) -> PostSearchResponse:
    args = SearchArgs.build(
        config,
        site_context.current_site_id,
        page_size=request.posts_per_page,
        text=request.s,
        post_types=request.post_type,
        taxonomy_fields=request.search_tax,
        meta_fields=request.search_meta,
        offset=request.offset,
        page=request.paged,
    )

    query = SiteSearchQuery(args, transport)

    items = []
    for hit, document in iter_documents(query, resolver, site_context):
        items.append(
            PostSearchItem(
                site_id=hit.site_id,
                post_id=hit.post_id,
                score=hit.score,
                title=document.title,
                excerpt=document.excerpt,
                post_type=document.post_type,
                meta=document.meta,
            )
        )

    logger.info(f"[API] 检索成功: found_posts={query.found_posts}, post_count={query.post_count}")
    return PostSearchResponse(
        found_posts=query.found_posts,
        max_num_pages=query.max_num_pages,
        post_count=query.post_count,
        page=max(request.paged or 1, 1),
        cross_site=query.cross_site,
        items=items,
    )


@router.get("/health", tags=["健康检查"])
def health_check():
    """
    健康检查端点

    用于检查检索服务是否正常运行
    """
    return {"status": "healthy", "service": "site-search"}
