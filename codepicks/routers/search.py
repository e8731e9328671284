"""标签搜索 API 路由"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from codepicks.config import get_search_sources
from codepicks.exceptions import InvalidRequestError
from codepicks.models.article import SearchResult
from codepicks.services.aggregator import PER_PAGE, search_articles
from codepicks.utils.logger import logger

router = APIRouter()


@router.get("/search", response_model=SearchResult)
async def search(
    tag: Optional[str] = Query(default=None, description="标签，如 typescript"),
    page: int = Query(default=1, description="页码，从 1 开始"),
    sources: List[Dict[str, Any]] = Depends(get_search_sources),
):
    """按标签搜索 Qiita / Zenn 文章，每页 12 条"""
    try:
        return await search_articles(sources, tag, page=page, per_page=PER_PAGE)
    except InvalidRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception(f"标签搜索失败 tag={tag}")
        raise HTTPException(status_code=500, detail="Failed to fetch articles")
