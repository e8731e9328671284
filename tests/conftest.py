import os

# 测试时只输出到控制台
os.environ.setdefault("LOG_FILE", "")

from typing import Any, Dict, List

import pytest

from codepicks.models.article import Article, Site
from codepicks.services.fetcher_factory import FetcherFactory
from codepicks.services.fetchers.base import BaseFetcher


class FakeFeeds:
    """按 url 预设每个假数据源的返回：文章列表、异常，或返回二者之一的协程函数"""

    def __init__(self) -> None:
        self.responses: Dict[str, Any] = {}
        self.calls: List[str] = []


class FakeFetcher(BaseFetcher):
    feeds: FakeFeeds = FakeFeeds()

    async def _fetch(self) -> List[Article]:
        self.feeds.calls.append(self.url)
        response = self.feeds.responses[self.url]
        if callable(response):
            response = await response()
        if isinstance(response, Exception):
            raise response
        return list(response)


@pytest.fixture
def fake_feeds(monkeypatch) -> FakeFeeds:
    feeds = FakeFeeds()
    monkeypatch.setitem(FetcherFactory._fetcher_types, "fake", FakeFetcher)
    monkeypatch.setattr(FakeFetcher, "feeds", feeds)
    return feeds


def make_article(site: Site, pub_date: str, title: str = "") -> Article:
    title = title or f"{site.value} {pub_date}"
    return Article(site=site, title=title, link=f"https://example.com/{title}", pub_date=pub_date)


def fake_source(site: Site, url: str) -> Dict[str, Any]:
    return {"type": "fake", "site": site.value, "url": url}
