"""文章与分页模型"""
import math
from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class Site(str, Enum):
    """文章来源站点（固定集合）"""
    QIITA = "Qiita"
    ZENN = "Zenn"
    HATENA = "Hatena"


class Article(BaseModel):
    """统一后的文章记录，序列化键为 site/title/link/pubDate"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    site: Site
    title: str = ""
    link: str = ""
    pub_date: str = Field(default="", alias="pubDate")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class Pagination(BaseModel):
    """分页信息（由结果总数推导，不存储）"""
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    per_page: int = Field(alias="perPage")
    total_pages: int = Field(alias="totalPages")

    @classmethod
    def build(cls, total: int, page: int, per_page: int) -> "Pagination":
        return cls(
            total=total,
            page=page,
            per_page=per_page,
            total_pages=math.ceil(total / per_page) if per_page > 0 else 0,
        )

    @classmethod
    def full_listing(cls, total: int) -> "Pagination":
        """全量列表的单页分页信息：page=1, perPage=total, totalPages=1"""
        return cls(total=total, page=1, per_page=total, total_pages=1)


class SearchResult(BaseModel):
    """标签搜索结果"""
    articles: List[Article]
    pagination: Pagination
