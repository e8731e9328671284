"""抓取器基类"""
from abc import ABC, abstractmethod
from typing import List, Optional
import httpx
from codepicks.models.article import Article, Site
from codepicks.utils.logger import logger


class BaseFetcher(ABC):
    """数据源抓取器基类，定义统一接口"""

    def __init__(
        self,
        site: Site,
        url: str,
        limit: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化抓取器

        Args:
            site: 来源站点
            url: 数据源地址（已替换 {tag}）
            limit: 只保留前 limit 条，None 表示全部
            transport: 自定义 httpx 传输层，测试用
        """
        self.site = Site(site)
        self.url = url
        self.limit = limit
        self.transport = transport

    @abstractmethod
    async def _fetch(self) -> List[Article]:
        """
        实际抓取逻辑，失败时直接抛异常

        Returns:
            文章列表
        """
        pass

    async def fetch(self) -> List[Article]:
        """
        抓取并转换为文章列表。任何异常都在此处记录并转为空列表，不影响其他数据源。
        """
        try:
            articles = await self._fetch()
        except Exception as e:
            logger.warning(f"数据源 {self.site.value} 抓取失败 url={self.url}: {e}")
            return []
        if self.limit is not None:
            articles = articles[: self.limit]
        logger.info(f"数据源 {self.site.value} 抓取到 {len(articles)} 条")
        return articles

    def __repr__(self) -> str:
        return f"{type(self).__name__}(site={self.site.value!r}, url={self.url!r})"
