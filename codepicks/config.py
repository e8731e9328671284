"""配置管理模块"""
from pydantic_settings import BaseSettings
from typing import Dict, Any, List, Optional
import json


def _default_listing_sources() -> List[Dict[str, Any]]:
    """默认首页数据源：Qiita 人气、Zenn、Hatena IT 热门（均为 RSS）"""
    return [
        {
            "type": "rss",
            "site": "Qiita",
            "url": "https://qiita.com/popular-items/feed",
        },
        {
            "type": "rss",
            "site": "Zenn",
            "url": "https://zenn.dev/feed",
        },
        {
            "type": "rss",
            "site": "Hatena",
            "url": "https://b.hatena.ne.jp/hotentry/it.rss",
        },
    ]


def _default_search_sources() -> List[Dict[str, Any]]:
    """默认标签搜索数据源：Qiita API + Zenn topic RSS，url 中的 {tag} 会被替换"""
    return [
        {
            "type": "qiita_api",
            "site": "Qiita",
            "url": "https://qiita.com/api/v2/tags/{tag}/items",
        },
        {
            "type": "rss",
            "site": "Zenn",
            "url": "https://zenn.dev/topics/{tag}/feed",
        },
    ]


class Settings(BaseSettings):
    """应用配置"""

    # 应用配置
    app_name: str = "CodePicks"
    app_version: str = "1.0.0"
    debug: bool = False

    # 服务器配置
    host: str = "0.0.0.0"
    port: int = 8000

    # 日志配置（log_file 为空则只输出到控制台）
    log_level: str = "INFO"
    log_file: str = "logs/app.log"

    # 抓取配置
    feed_timeout: float = 15.0
    user_agent: str = "Mozilla/5.0 (compatible; CodePicks/1.0)"

    # Qiita API 访问令牌，未设置时标签搜索的 Qiita 源返回空列表
    qiita_token: Optional[str] = None
    qiita_api_per_page: int = 20

    # 快照配置
    snapshot_path: str = "data/articles.json"
    snapshot_entry_limit: int = 10  # 批处理时每个源最多保留条数
    listing_entry_limit: Optional[int] = None  # 实时列表每个源最多保留条数，None 表示全部
    serve_from_snapshot: bool = False  # True 时 /articles 直接返回快照文件内容

    # 数据源（JSON 数组，可覆盖默认）
    # 每项: {"type":"rss","site":"Zenn","url":"..."} 或 {"type":"qiita_api","site":"Qiita","url":".../{tag}/items"}
    listing_sources: str = ""
    search_sources: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# 全局配置实例
settings = Settings()


def _load_sources(raw: str, default: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    if not raw or not raw.strip():
        return default
    sources = json.loads(raw)
    if not isinstance(sources, list):
        raise ValueError("数据源配置必须是 JSON 数组")
    return sources


def get_listing_sources() -> List[Dict[str, Any]]:
    """获取首页列表数据源（支持 .env 中 LISTING_SOURCES JSON 覆盖默认）"""
    return _load_sources(settings.listing_sources, _default_listing_sources())


def get_search_sources() -> List[Dict[str, Any]]:
    """获取标签搜索数据源（支持 .env 中 SEARCH_SOURCES JSON 覆盖默认）"""
    return _load_sources(settings.search_sources, _default_search_sources())
