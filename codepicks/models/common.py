"""通用响应模型"""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """错误响应格式：{"error": "..."}"""
    error: str
