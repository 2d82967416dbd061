"""
SDK 异常类型定义

提供详细的错误信息和类型，方便调用方区分网络错误与业务错误。
"""

from typing import Optional, Dict, Any


class MoiraError(Exception):
    """
    Moira SDK 基础异常类

    所有 SDK 异常都继承自此类，可用于捕获所有 SDK 相关错误。

    Example:
        ```python
        try:
            trigger = await client.get_trigger("trigger-123")
        except MoiraError as e:
            print(f"SDK error: {e}")
        ```
    """

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, code={self.code!r})"


class APIError(MoiraError):
    """
    API 请求错误

    当 API 返回非成功状态码时抛出。

    Attributes:
        status_code: HTTP 状态码
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code=code, details=details)
        self.status_code = status_code

    def __str__(self) -> str:
        base = f"[HTTP {self.status_code}]"
        if self.code:
            base += f" [{self.code}]"
        return f"{base} {self.message}"


class TriggerNotFoundError(APIError):
    """
    触发器未找到错误

    Attributes:
        trigger_id: 未找到的触发器 ID
    """

    def __init__(
        self,
        trigger_id: str,
        *,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"Trigger not found: {trigger_id}",
            status_code=404,
            code="TRIGGER_NOT_FOUND",
        )
        self.trigger_id = trigger_id


class ValidationError(APIError):
    """
    请求验证错误

    请求参数不符合要求时抛出（400/422）。
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 400,
    ):
        super().__init__(
            message,
            status_code=status_code,
            code="VALIDATION_ERROR",
        )


class ServerError(APIError):
    """服务器内部错误"""

    def __init__(
        self,
        message: str = "Internal server error",
        *,
        status_code: int = 500,
    ):
        super().__init__(
            message,
            status_code=status_code,
            code="INTERNAL_ERROR",
        )


class ConnectionError(MoiraError):
    """
    连接错误

    无法连接到 API 服务器或请求超时时抛出。
    """

    def __init__(self, message: str = "Failed to connect to server"):
        super().__init__(message, code="CONNECTION_ERROR")
