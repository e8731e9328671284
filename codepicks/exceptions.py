"""异常定义"""


class CodePicksError(Exception):
    """基础异常"""


class SourceFetchError(CodePicksError):
    """单个数据源抓取失败（网络、解析、凭证），由抓取器内部捕获并转为空结果"""

    def __init__(self, site: str, message: str):
        super().__init__(f"{site}: {message}")


class InvalidRequestError(CodePicksError):
    """请求参数不合法（如搜索缺少 tag），对应 HTTP 400"""


class SnapshotReadError(CodePicksError):
    """快照文件不存在或内容损坏，对应 HTTP 500"""
