"""HTTP客户端封装"""
from typing import Dict, Any, Optional
import httpx
from codepicks.config import settings
from codepicks.utils.logger import logger


class HttpClient:
    """
    异步HTTP客户端（短生命周期，每次抓取创建一次，用完即关闭）

    不做重试：单个数据源失败由调用方转换为空结果。
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化HTTP客户端

        Args:
            timeout: 请求超时时间（秒），默认取配置 feed_timeout
            headers: 默认请求头
            transport: 自定义传输层（测试时可传入 httpx.MockTransport）
        """
        self.timeout = timeout if timeout is not None else settings.feed_timeout
        default_headers = {"User-Agent": settings.user_agent}
        if headers:
            default_headers.update(headers)
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            headers=default_headers,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """关闭客户端"""
        await self.client.aclose()

    async def _get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        logger.debug(f"GET请求: {url}, 参数: {params}")
        try:
            response = await self.client.get(url, params=params, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP状态错误: {e.response.status_code}, url: {url}")
            raise
        return response

    async def get_bytes(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> bytes:
        """
        发送GET请求并返回原始响应内容（RSS/Atom 等 XML，编码交给解析器判断）

        Raises:
            httpx.HTTPError: HTTP请求错误
        """
        response = await self._get(url, params=params, headers=headers)
        return response.content

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        发送GET请求并返回 JSON 数据

        Raises:
            httpx.HTTPError: HTTP请求错误
            ValueError: 响应不是合法 JSON
        """
        response = await self._get(url, params=params, headers=headers)
        return response.json()
