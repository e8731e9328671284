"""文章聚合服务：并发抓取所有数据源，合并后按发布时间倒序，标签搜索时分页"""
import asyncio
from typing import Any, Dict, List, Optional, Sequence, Tuple
from codepicks.exceptions import InvalidRequestError
from codepicks.models.article import Article, Pagination, SearchResult
from codepicks.services.fetcher_factory import FetcherFactory
from codepicks.services.fetchers.base import BaseFetcher
from codepicks.utils.dates import pub_date_sort_key
from codepicks.utils.logger import logger

# 标签搜索每页条数（固定）
PER_PAGE = 12


async def gather_articles(fetchers: Sequence[BaseFetcher]) -> List[Article]:
    """
    并发执行所有抓取器并等待全部完成，按数据源配置顺序拼接结果。
    单个抓取器的失败已在 BaseFetcher.fetch 中转为空列表。
    """
    results = await asyncio.gather(*(f.fetch() for f in fetchers))
    merged: List[Article] = []
    for articles in results:
        merged.extend(articles)
    return merged


def sort_articles(articles: Sequence[Article]) -> List[Article]:
    """按发布时间倒序；时间相同保持原有顺序（稳定排序），无法解析的时间排最后"""
    return sorted(articles, key=lambda a: pub_date_sort_key(a.pub_date), reverse=True)


def paginate(
    articles: Sequence[Article], page: int = 1, per_page: int = PER_PAGE
) -> Tuple[List[Article], Pagination]:
    """切出第 page 页（从 1 开始），分页信息按全部结果计算"""
    if page < 1:
        raise InvalidRequestError("Page must be a positive integer")
    if per_page < 1:
        raise InvalidRequestError("perPage must be a positive integer")
    start = (page - 1) * per_page
    return list(articles[start:start + per_page]), Pagination.build(len(articles), page, per_page)


async def list_articles(
    sources: List[Dict[str, Any]], limit: Optional[int] = None
) -> List[Article]:
    """全量列表：抓取全部数据源，合并并排序"""
    fetchers = FetcherFactory.create_all(sources, limit=limit)
    articles = sort_articles(await gather_articles(fetchers))
    logger.info(f"文章聚合完成，数据源 {len(fetchers)} 个，共 {len(articles)} 条")
    return articles


async def search_articles(
    sources: List[Dict[str, Any]],
    tag: Optional[str],
    page: int = 1,
    per_page: int = PER_PAGE,
) -> SearchResult:
    """
    标签搜索：校验参数后抓取全部匹配结果，排序并返回第 page 页。

    Raises:
        InvalidRequestError: tag 为空或 page 不合法（此时不发起任何抓取）
    """
    if tag is None or not tag.strip():
        raise InvalidRequestError("Tag is required")
    if page < 1:
        raise InvalidRequestError("Page must be a positive integer")
    tag = tag.strip()

    fetchers = FetcherFactory.create_all(sources, tag=tag)
    articles = sort_articles(await gather_articles(fetchers))
    page_items, pagination = paginate(articles, page=page, per_page=per_page)
    logger.info(
        f"标签搜索完成 tag={tag}, page={page}, 共 {pagination.total} 条, {pagination.total_pages} 页"
    )
    return SearchResult(articles=page_items, pagination=pagination)


async def aggregate(
    sources: List[Dict[str, Any]],
    tag: Optional[str] = None,
    page: Optional[int] = None,
    search: bool = False,
) -> Tuple[List[Article], Optional[Pagination]]:
    """
    聚合入口。

    search=False 且未传 tag 时为全量列表，返回 (articles, None)；
    否则为标签搜索，返回 (当前页文章, 分页信息)。
    """
    if not search and tag is None:
        return await list_articles(sources), None
    result = await search_articles(sources, tag, page=page or 1)
    return result.articles, result.pagination
