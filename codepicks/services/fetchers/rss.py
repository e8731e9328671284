"""RSS/Atom 抓取器（Qiita / Zenn / Hatena 的 feed）"""
from typing import Any, List, Optional
import feedparser
import httpx
from codepicks.exceptions import SourceFetchError
from codepicks.models.article import Article, Site
from codepicks.services.fetchers.base import BaseFetcher
from codepicks.utils.http_client import HttpClient


def _entry_pub_date(entry: Any) -> str:
    """RSS 2.0 pubDate -> published；Atom / RSS 1.0 dc:date -> updated；都没有则为空串"""
    return (entry.get("published") or entry.get("updated") or "").strip()


def entry_to_article(entry: Any, site: Site) -> Article:
    """将 feedparser 条目转为 Article"""
    return Article(
        site=site,
        title=(entry.get("title") or "").strip(),
        link=(entry.get("link") or "").strip(),
        pub_date=_entry_pub_date(entry),
    )


def parse_feed(content: bytes, site: Site) -> List[Article]:
    """
    解析 feed 内容。

    feedparser 对不规范的 XML 会设置 bozo 但仍尽量解析；只有既不规范又没有条目时才视为失败。
    """
    feed = feedparser.parse(content)
    entries = getattr(feed, "entries", []) or []
    if feed.get("bozo") and not entries:
        raise SourceFetchError(site.value, f"feed 解析失败: {feed.get('bozo_exception')}")
    return [entry_to_article(e, site) for e in entries]


class RssFetcher(BaseFetcher):
    """从 RSS/Atom feed 拉取文章"""

    async def _fetch(self) -> List[Article]:
        async with HttpClient(transport=self.transport) as client:
            content = await client.get_bytes(self.url)
        return parse_feed(content, self.site)


async def fetch_feed(
    url: str,
    site: Site,
    limit: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Article]:
    """抓取单个 feed（失败返回空列表）"""
    return await RssFetcher(site, url, limit=limit, transport=transport).fetch()
