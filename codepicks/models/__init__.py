"""数据模型模块"""
from codepicks.models.common import ErrorResponse
from codepicks.models.article import Site, Article, Pagination, SearchResult

__all__ = [
    "ErrorResponse",
    "Site",
    "Article",
    "Pagination",
    "SearchResult",
]
