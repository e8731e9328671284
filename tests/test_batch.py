import asyncio
import json

from fastapi.testclient import TestClient

from codepicks import batch
from codepicks.config import settings
from codepicks.main import app
from codepicks.models.article import Site
from codepicks.routers.articles import get_snapshot_store
from codepicks.services.snapshot_service import SnapshotStore
from conftest import fake_source, make_article

LISTING = [
    fake_source(Site.QIITA, "fake://qiita"),
    fake_source(Site.ZENN, "fake://zenn"),
    fake_source(Site.HATENA, "fake://hatena"),
]


def _responses():
    return {
        "fake://qiita": [make_article(Site.QIITA, f"2025-01-{d:02d}") for d in (20, 10, 5)],
        "fake://zenn": [make_article(Site.ZENN, f"2025-01-{d:02d}") for d in (21, 11)],
        "fake://hatena": RuntimeError("hatena is down"),
    }


def test_main_writes_sorted_snapshot_with_per_source_limit(fake_feeds, monkeypatch, tmp_path):
    fake_feeds.responses = _responses()
    monkeypatch.setattr(batch, "get_listing_sources", lambda: LISTING)
    output = tmp_path / "data" / "articles.json"

    assert batch.main(["--output", str(output), "--limit", "2"]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [(item["site"], item["pubDate"]) for item in data] == [
        ("Zenn", "2025-01-21"),
        ("Qiita", "2025-01-20"),
        ("Zenn", "2025-01-11"),
        ("Qiita", "2025-01-10"),
    ]


def test_main_returns_1_when_snapshot_cannot_be_written(fake_feeds, monkeypatch, tmp_path):
    fake_feeds.responses = _responses()
    monkeypatch.setattr(batch, "get_listing_sources", lambda: LISTING)
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")

    assert batch.main(["--output", str(blocker / "articles.json")]) == 1


def test_snapshot_written_by_batch_is_served_verbatim(fake_feeds, monkeypatch, tmp_path):
    fake_feeds.responses = _responses()
    store = SnapshotStore(tmp_path / "articles.json")
    count = asyncio.run(batch.build_snapshot(store, sources=LISTING, limit=10))
    assert count == 5
    written = json.loads(store.path.read_text(encoding="utf-8"))

    monkeypatch.setattr(settings, "serve_from_snapshot", True)
    app.dependency_overrides[get_snapshot_store] = lambda: store
    try:
        response = TestClient(app).get("/articles")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == written
    assert len(fake_feeds.calls) == 3


def test_verbose_switches_logging_to_debug(fake_feeds, monkeypatch, tmp_path):
    fake_feeds.responses = _responses()
    monkeypatch.setattr(batch, "get_listing_sources", lambda: LISTING)
    levels = []
    monkeypatch.setattr(batch, "setup_logger", lambda log_level=None: levels.append(log_level))

    assert batch.main(["--output", str(tmp_path / "articles.json"), "--verbose"]) == 0
    assert levels == ["DEBUG"]
