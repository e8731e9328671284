"""Qiita API v2 抓取器（标签搜索）

文档: https://qiita.com/api/v2/docs#get-apiv2tagstag_iditems
"""
from typing import Any, Dict, List, Optional
import httpx
from codepicks.config import settings
from codepicks.exceptions import SourceFetchError
from codepicks.models.article import Article, Site
from codepicks.services.fetchers.base import BaseFetcher
from codepicks.utils.http_client import HttpClient


def item_to_article(item: Dict[str, Any]) -> Article:
    """将 Qiita API 的 item 转为 Article（title/url/created_at）"""
    return Article(
        site=Site.QIITA,
        title=item.get("title") or "",
        link=item.get("url") or "",
        pub_date=item.get("created_at") or "",
    )


class QiitaApiFetcher(BaseFetcher):
    """
    使用 Bearer 令牌访问 Qiita 标签文章接口。
    未配置令牌时视为抓取失败（返回空列表），不影响服务启动。
    """

    def __init__(
        self,
        site: Site,
        url: str,
        limit: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        token: Optional[str] = None,
        per_page: Optional[int] = None,
    ):
        super().__init__(site, url, limit=limit, transport=transport)
        self.token = token if token is not None else settings.qiita_token
        self.per_page = per_page or settings.qiita_api_per_page

    async def _fetch(self) -> List[Article]:
        if not self.token:
            raise SourceFetchError(self.site.value, "QIITA_TOKEN 未设置")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token}",
        }
        async with HttpClient(transport=self.transport) as client:
            data = await client.get_json(
                self.url,
                params={"per_page": self.per_page},
                headers=headers,
            )

        if not isinstance(data, list):
            raise SourceFetchError(self.site.value, f"响应格式错误: {type(data).__name__}")
        return [item_to_article(item) for item in data if isinstance(item, dict)]
