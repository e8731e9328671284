"""批处理：抓取全部首页数据源并覆盖写入快照文件

用法: codepicks-snapshot [--output data/articles.json] [--limit 10]
"""
import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional
from codepicks.config import settings, get_listing_sources
from codepicks.services.aggregator import list_articles
from codepicks.services.snapshot_service import SnapshotStore
from codepicks.utils.logger import logger, setup_logger


async def build_snapshot(
    store: SnapshotStore,
    sources: Optional[List[Dict[str, Any]]] = None,
    limit: Optional[int] = None,
) -> int:
    """抓取、排序并写入快照，返回写入条数"""
    if sources is None:
        sources = get_listing_sources()
    if limit is None:
        limit = settings.snapshot_entry_limit
    articles = await list_articles(sources, limit=limit)
    return store.write(articles)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="抓取文章并写入快照文件")
    parser.add_argument("--output", default=settings.snapshot_path, help="快照文件路径")
    parser.add_argument(
        "--limit",
        type=int,
        default=settings.snapshot_entry_limit,
        help="每个数据源最多保留条数",
    )
    parser.add_argument("--verbose", action="store_true", help="输出 DEBUG 日志")
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logger(log_level="DEBUG")

    store = SnapshotStore(args.output)
    try:
        count = asyncio.run(build_snapshot(store, limit=args.limit))
    except OSError as e:
        logger.error(f"快照写入失败: {e}")
        return 1
    logger.info(f"✅ 已保存 {count} 条到 {store.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
