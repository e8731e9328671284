import json
import stat

import pytest

from codepicks.exceptions import SnapshotReadError
from codepicks.models.article import Site
from codepicks.services import snapshot_service
from codepicks.services.snapshot_service import SnapshotStore
from conftest import make_article


def _articles():
    return [
        make_article(Site.ZENN, "Fri, 03 Jan 2025 01:00:00 GMT", title="Zenn の記事"),
        make_article(Site.HATENA, "2025-01-02T10:00:00+09:00", title="はてなの記事"),
        make_article(Site.QIITA, "", title="日付なし"),
    ]


def test_write_then_read_preserves_records_and_order(tmp_path):
    store = SnapshotStore(tmp_path / "data" / "articles.json")
    assert store.write(_articles()) == 3
    assert store.read() == _articles()


def test_snapshot_file_layout(tmp_path):
    path = tmp_path / "articles.json"
    SnapshotStore(path).write(_articles())

    text = path.read_text(encoding="utf-8")
    assert "はてなの記事" in text
    assert text.startswith('[\n  {\n    "site": "Zenn",')
    data = json.loads(text)
    assert [list(item) for item in data] == [["site", "title", "link", "pubDate"]] * 3


def test_write_overwrites_and_leaves_no_temp_files(tmp_path):
    path = tmp_path / "articles.json"
    store = SnapshotStore(path)
    store.write(_articles())
    store.write(_articles()[:1])

    assert [p.name for p in tmp_path.iterdir()] == ["articles.json"]
    assert len(store.read()) == 1


def test_failed_write_keeps_previous_snapshot(tmp_path, monkeypatch):
    path = tmp_path / "articles.json"
    store = SnapshotStore(path)
    store.write(_articles())
    before = path.read_bytes()

    def broken_dump(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(snapshot_service.json, "dump", broken_dump)
    with pytest.raises(OSError):
        store.write(_articles()[:1])

    assert path.read_bytes() == before
    assert [p.name for p in tmp_path.iterdir()] == ["articles.json"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(SnapshotReadError):
        SnapshotStore(tmp_path / "missing.json").read()


@pytest.mark.parametrize(
    "content",
    [
        "[{\"site\": \"Zenn\", ",
        "{\"site\": \"Zenn\"}",
        "[{\"site\": \"Medium\", \"title\": \"x\", \"link\": \"\", \"pubDate\": \"\"}]",
    ],
)
def test_read_corrupt_file_raises(tmp_path, content):
    path = tmp_path / "articles.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SnapshotReadError):
        SnapshotStore(path).read()


def test_snapshot_file_is_world_readable(tmp_path):
    path = tmp_path / "articles.json"
    SnapshotStore(path).write(_articles())
    assert stat.S_IMODE(path.stat().st_mode) == 0o644
