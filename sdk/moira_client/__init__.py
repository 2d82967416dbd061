"""
Moira Python SDK

用于读取触发器、状态与事件历史，并执行节流、维护、指标删除等写操作的异步客户端。

基本用法:
    ```python
    from sdk.moira_client import AsyncMoiraClient

    async with AsyncMoiraClient("http://moira.local") as client:
        trigger = await client.get_trigger("a1b2c3")
        events = await client.get_trigger_events("a1b2c3", page=0)
    ```
"""

from .async_client import AsyncMoiraClient
from .exceptions import (
    MoiraError,
    APIError,
    TriggerNotFoundError,
    ValidationError,
    ServerError,
    ConnectionError,
)
from .models import (
    Trigger,
    TriggerState,
    Metric,
    Event,
    EventPage,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "AsyncMoiraClient",
    # Exceptions
    "MoiraError",
    "APIError",
    "TriggerNotFoundError",
    "ValidationError",
    "ServerError",
    "ConnectionError",
    # Models
    "Trigger",
    "TriggerState",
    "Metric",
    "Event",
    "EventPage",
    # Version
    "__version__",
]
