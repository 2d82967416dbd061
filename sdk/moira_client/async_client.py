"""
Moira 异步客户端

提供触发器页面所需的读写 API 的异步调用接口。
"""

from __future__ import annotations

from typing import Optional, Dict, Any

import httpx
import structlog

from .models import Trigger, TriggerState, EventPage
from .exceptions import (
    APIError,
    TriggerNotFoundError,
    ValidationError,
    ConnectionError as SDKConnectionError,
    ServerError,
)

logger = structlog.get_logger(__name__)


class AsyncMoiraClient:
    """
    Moira 异步客户端

    Example:
        ```python
        async with AsyncMoiraClient("http://moira.local") as client:
            trigger = await client.get_trigger("a1b2c3")
            state = await client.get_trigger_state("a1b2c3")
        ```

    Args:
        base_url: Moira 服务地址
        api_prefix: API 路径前缀
        timeout: 请求超时时间（秒）
        max_retries: 连接重试次数
        login: 以该用户身份请求（X-Webauth-User）
        events_page_size: 事件历史默认每页条数
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        api_prefix: str = "/api",
        timeout: float = 30.0,
        max_retries: int = 3,
        login: Optional[str] = None,
        events_page_size: int = 100,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        self.timeout = timeout
        self.max_retries = max_retries
        self.events_page_size = events_page_size

        headers = {
            "User-Agent": "AsyncMoiraClient/0.1.0",
            "Accept": "application/json",
        }
        if login:
            headers["X-Webauth-User"] = login

        transport = httpx.AsyncHTTPTransport(retries=max_retries)
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings=None) -> "AsyncMoiraClient":
        """根据配置创建客户端"""
        if settings is None:
            from core.config import get_settings
            settings = get_settings()
        moira = settings.moira
        return cls(
            base_url=moira.base_url,
            api_prefix=moira.api_prefix,
            timeout=moira.timeout,
            max_retries=moira.max_retries,
            login=moira.login,
            events_page_size=moira.events_page_size,
        )

    def _url(self, path: str) -> str:
        """构建完整 URL"""
        if path.startswith(f"{self.api_prefix}/"):
            return f"{self.base_url}{path}"
        return f"{self.base_url}{self.api_prefix}{path}"

    def _handle_error(self, response: httpx.Response, trigger_id: Optional[str] = None) -> None:
        """处理错误响应"""
        try:
            data = response.json()
            message = data.get("error", data.get("message", str(response.text)))
            code = data.get("status")
        except Exception:
            message = response.text or f"HTTP {response.status_code}"
            code = None

        status = response.status_code

        if status == 404 and trigger_id is not None:
            raise TriggerNotFoundError(trigger_id, message=message)
        elif status in (400, 422):
            raise ValidationError(message, status_code=status)
        elif status >= 500:
            raise ServerError(message, status_code=status)
        else:
            raise APIError(message, status_code=status, code=code)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        trigger_id: Optional[str] = None,
        **kwargs,
    ) -> Dict[str, Any]:
        """发送请求并返回 JSON（空响应体返回空字典）"""
        try:
            response = await self._client.request(method, self._url(path), **kwargs)
        except httpx.ConnectError as e:
            raise SDKConnectionError(f"Failed to connect to {self.base_url}: {e}")
        except httpx.TimeoutException as e:
            raise SDKConnectionError(f"Request timed out: {e}")

        if not response.is_success:
            logger.warning(
                "moira_request_failed",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            self._handle_error(response, trigger_id)

        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError as e:
            # 代理或登录页返回的 HTML
            logger.warning("moira_invalid_json", method=method, path=path, status_code=response.status_code)
            raise APIError(f"Invalid JSON response: {e}", status_code=response.status_code, code="INVALID_RESPONSE")
        if not isinstance(data, dict):
            raise APIError(
                f"Unexpected JSON response: {type(data).__name__}",
                status_code=response.status_code,
                code="INVALID_RESPONSE",
            )
        return data

    # ===== 读取 =====

    async def get_trigger(self, trigger_id: str) -> Trigger:
        """获取触发器定义"""
        result = await self._request("GET", f"/trigger/{trigger_id}", trigger_id=trigger_id)
        return Trigger.from_dict(result)

    async def get_trigger_state(self, trigger_id: str) -> TriggerState:
        """获取触发器各指标的当前状态"""
        result = await self._request("GET", f"/trigger/{trigger_id}/state", trigger_id=trigger_id)
        return TriggerState.from_dict(result)

    async def get_trigger_events(
        self,
        trigger_id: str,
        *,
        page: int = 0,
        size: Optional[int] = None,
    ) -> EventPage:
        """获取触发器事件历史（分页）"""
        params = {"p": page, "size": size or self.events_page_size}
        result = await self._request("GET", f"/event/{trigger_id}", trigger_id=trigger_id, params=params)
        return EventPage.from_dict(result)

    # ===== 写入 =====

    async def del_throttling(self, trigger_id: str) -> None:
        """解除触发器通知节流"""
        await self._request("DELETE", f"/trigger/{trigger_id}/throttling", trigger_id=trigger_id)

    async def set_maintenance(self, trigger_id: str, data: Dict[str, int]) -> None:
        """
        设置指标维护时间

        Args:
            trigger_id: 触发器 ID
            data: 指标名 -> 维护截止时间 (Unix 秒)
        """
        await self._request("PUT", f"/trigger/{trigger_id}/maintenance", trigger_id=trigger_id, json=data)

    async def del_metric(self, trigger_id: str, metric: str) -> None:
        """从触发器中删除指标"""
        await self._request(
            "DELETE",
            f"/trigger/{trigger_id}/metrics",
            trigger_id=trigger_id,
            params={"name": metric},
        )

    # ===== 生命周期 =====

    async def close(self) -> None:
        """关闭客户端"""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncMoiraClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
