"""
触发器页面控制器

持有单个触发器的视图状态:
- 获取: 依次读取触发器、状态、事件历史，全部成功后整体提交
- 写操作: 解除节流、设置维护、删除指标，完成后重新获取
- 排序: 点击列切换排序键与方向
"""
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Protocol, Union

import httpx
import structlog

from sdk.moira_client.exceptions import MoiraError
from sdk.moira_client.models import EventPage, Trigger, TriggerState

from .maintenance import MaintenanceInput, maintenance_timestamp
from .sorting import SortKey, toggle_sorting
from .state import NETWORK_ERROR_MESSAGE, Idle, Loading, Snapshot, ViewState
from .view import TriggerView, build_view

logger = structlog.get_logger(__name__)

# 只把网络/接口错误转成页面错误，其余异常照常抛出
FETCH_ERRORS = (MoiraError, httpx.HTTPError)


class TriggerService(Protocol):
    """控制器依赖的 Moira 接口"""

    async def get_trigger(self, trigger_id: str) -> Trigger: ...

    async def get_trigger_state(self, trigger_id: str) -> TriggerState: ...

    async def get_trigger_events(self, trigger_id: str) -> EventPage: ...

    async def del_throttling(self, trigger_id: str) -> None: ...

    async def set_maintenance(self, trigger_id: str, data: Dict[str, int]) -> None: ...

    async def del_metric(self, trigger_id: str, metric: str) -> None: ...


StateListener = Callable[[ViewState], None]


def _is_valid_trigger_id(trigger_id: Any) -> bool:
    return isinstance(trigger_id, str) and bool(trigger_id)


class TriggerController:
    """
    单个触发器页面的状态控制器

    loading 标志只是提示性的：控制器本身不排队也不加锁，进行中的请求不会被取消，
    结果按完成顺序生效。

    Example:
        ```python
        async with AsyncMoiraClient("http://moira.local") as client:
            controller = TriggerController(client, "a1b2c3")
            await controller.refresh()
            view = controller.view()
        ```

    Args:
        service: Moira 接口实现
        trigger_id: 页面路由中的触发器 ID
    """

    def __init__(self, service: TriggerService, trigger_id: Any):
        self.service = service
        self.trigger_id = trigger_id
        self.last_error: Optional[BaseException] = None
        self._state = ViewState.initial()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """注册状态变更回调，返回取消订阅函数"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, state: ViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def view(self) -> TriggerView:
        """当前渲染快照"""
        return build_view(self._state)

    # ===== 获取 =====

    async def refresh(self, trigger_id: Any = None) -> None:
        """
        获取一次完整快照

        三个读取依次执行；任何一个失败则不提交任何数据，只设置错误信息。

        Args:
            trigger_id: 默认使用控制器自身的触发器 ID
        """
        if trigger_id is None:
            trigger_id = self.trigger_id
        if not _is_valid_trigger_id(trigger_id):
            logger.debug("trigger_refresh_skipped", trigger_id=trigger_id)
            return

        log = logger.bind(trigger_id=trigger_id)
        log.debug("trigger_refresh_started")
        try:
            trigger = await self.service.get_trigger(trigger_id)
            trigger_state = await self.service.get_trigger_state(trigger_id)
            trigger_events = await self.service.get_trigger_events(trigger_id)
        except FETCH_ERRORS as e:
            self.last_error = e
            log.warning("trigger_refresh_failed", error=str(e))
            self._commit(self._state.failed(NETWORK_ERROR_MESSAGE))
            return

        self._commit(self._state.loaded(Snapshot(trigger, trigger_state, trigger_events)))
        log.info(
            "trigger_refreshed",
            metrics=len(trigger_state.metrics),
            events=len(trigger_events.list),
        )

    # ===== 写操作 =====

    async def _mutate(self, action: str, trigger_id: str, write: Callable[[], Any], **context) -> None:
        """置 loading -> 执行一次写操作 -> 重新获取；写失败时在刷新后保留错误"""
        previous = self._state.phase
        self._commit(self._state.start_loading())
        log = logger.bind(trigger_id=trigger_id, action=action, **context)
        failed = False
        try:
            await write()
        except FETCH_ERRORS as e:
            failed = True
            self.last_error = e
            log.error("trigger_mutation_failed", error=str(e))
        else:
            log.info("trigger_mutation_done")

        if _is_valid_trigger_id(trigger_id):
            await self.refresh(trigger_id)
        elif self._state.loading:
            # 无法重新获取，恢复写操作之前的阶段；之前也在加载中则退回 Idle
            if isinstance(previous, Loading):
                previous = Idle(last_good=previous.last_good)
            self._commit(replace(self._state, phase=previous))
        if failed:
            self._commit(self._state.failed(NETWORK_ERROR_MESSAGE))

    async def disable_throttling(self, trigger_id: str) -> None:
        """解除通知节流"""
        await self._mutate(
            "disable_throttling",
            trigger_id,
            lambda: self.service.del_throttling(trigger_id),
        )

    async def set_maintenance(
        self,
        trigger_id: str,
        maintenance: MaintenanceInput,
        metric: str,
    ) -> None:
        """
        设置单个指标的维护时间

        Args:
            trigger_id: 触发器 ID
            maintenance: 预设名或分钟数
            metric: 指标名
        """
        timestamp = maintenance_timestamp(maintenance)
        await self._mutate(
            "set_maintenance",
            trigger_id,
            lambda: self.service.set_maintenance(trigger_id, {metric: timestamp}),
            metric=metric,
            maintenance=timestamp,
        )

    async def remove_metric(self, trigger_id: str, metric: str) -> None:
        """删除指标"""
        await self._mutate(
            "remove_metric",
            trigger_id,
            lambda: self.service.del_metric(trigger_id, metric),
            metric=metric,
        )

    # ===== 排序 =====

    def select_sorting(self, key: Union[SortKey, str]) -> None:
        """点击排序列：同列翻转方向，换列恢复初始方向"""
        self._commit(self._state.with_sorting(toggle_sorting(self._state.sort, key)))
