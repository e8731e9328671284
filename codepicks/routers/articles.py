"""文章列表 API 路由"""
from typing import Any, Dict, List
from fastapi import APIRouter, Depends, HTTPException
from codepicks.config import settings, get_listing_sources
from codepicks.exceptions import SnapshotReadError
from codepicks.models.article import Article
from codepicks.services.aggregator import list_articles
from codepicks.services.snapshot_service import SnapshotStore
from codepicks.utils.logger import logger

router = APIRouter()


def get_snapshot_store() -> SnapshotStore:
    """快照存储（依赖注入）"""
    return SnapshotStore(settings.snapshot_path)


@router.get("/articles", response_model=List[Article])
async def get_articles(
    sources: List[Dict[str, Any]] = Depends(get_listing_sources),
    store: SnapshotStore = Depends(get_snapshot_store),
):
    """
    全部文章（按发布时间倒序）。

    默认实时抓取所有数据源；SERVE_FROM_SNAPSHOT=true 时直接返回快照文件内容，不回退到实时抓取。
    """
    if settings.serve_from_snapshot:
        try:
            return store.read()
        except SnapshotReadError as e:
            logger.error(f"读取快照失败: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch articles")

    try:
        return await list_articles(sources, limit=settings.listing_entry_limit)
    except Exception:
        logger.exception("文章聚合失败")
        raise HTTPException(status_code=500, detail="Failed to fetch articles")
