"""抓取器工厂类"""
from typing import Any, Dict, List, Optional, Type
from urllib.parse import quote
from codepicks.models.article import Site
from codepicks.services.fetchers.base import BaseFetcher
from codepicks.services.fetchers.qiita import QiitaApiFetcher
from codepicks.services.fetchers.rss import RssFetcher


class FetcherFactory:
    """抓取器工厂，根据数据源配置创建抓取器实例（每次请求新建，无共享状态）"""

    _fetcher_types: Dict[str, Type[BaseFetcher]] = {
        "rss": RssFetcher,
        "qiita_api": QiitaApiFetcher,
    }

    @classmethod
    def create(
        cls,
        source: Dict[str, Any],
        tag: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> BaseFetcher:
        """
        创建抓取器

        Args:
            source: 数据源配置，如 {"type": "rss", "site": "Zenn", "url": "https://zenn.dev/topics/{tag}/feed"}
            tag: 搜索标签，替换 url 中的 {tag}（URL 编码）
            limit: 每个源最多保留条数

        Returns:
            抓取器实例

        Raises:
            ValueError: 不支持的数据源类型或站点
        """
        source_type = (source.get("type") or "rss").lower()
        fetcher_cls = cls._fetcher_types.get(source_type)
        if fetcher_cls is None:
            raise ValueError(
                f"不支持的数据源类型: {source_type}，可选: {', '.join(cls.get_supported_types())}"
            )

        site = Site(source.get("site"))
        url = source.get("url") or ""
        if not url:
            raise ValueError(f"数据源 {site.value} 缺少 url")
        if "{tag}" in url:
            if not tag:
                raise ValueError(f"数据源 {site.value} 需要 tag")
            url = url.replace("{tag}", quote(tag, safe=""))

        return fetcher_cls(site, url, limit=limit)

    @classmethod
    def create_all(
        cls,
        sources: List[Dict[str, Any]],
        tag: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[BaseFetcher]:
        """按配置顺序批量创建抓取器"""
        return [cls.create(src, tag=tag, limit=limit) for src in sources]

    @classmethod
    def get_supported_types(cls) -> list:
        """
        获取支持的数据源类型列表

        Returns:
            类型名称列表
        """
        return list(cls._fetcher_types)
