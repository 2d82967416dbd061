"""
触发器页面视图状态

状态不可变，每次变更都生成新对象。数据字段只能通过 Snapshot 整体替换，
部分更新在结构上不可能发生。

阶段:
- Idle: 尚未开始加载
- Loading: 加载中（可能保留上一次成功的数据，视为过期数据）
- Loaded: 最近一次加载成功
- Failed: 最近一次加载或写操作失败（保留上一次成功的数据）
"""
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from sdk.moira_client.models import Trigger, TriggerState, EventPage

from .sorting import Sorting


NETWORK_ERROR_MESSAGE = "Network error. Please, reload page"


@dataclass(frozen=True)
class Snapshot:
    """一次完整获取周期的结果"""
    trigger: Trigger
    trigger_state: TriggerState
    trigger_events: EventPage


@dataclass(frozen=True)
class Idle:
    last_good: Optional[Snapshot] = None


@dataclass(frozen=True)
class Loading:
    last_good: Optional[Snapshot] = None


@dataclass(frozen=True)
class Loaded:
    snapshot: Snapshot

    @property
    def last_good(self) -> Snapshot:
        return self.snapshot


@dataclass(frozen=True)
class Failed:
    message: str
    last_good: Optional[Snapshot] = None


Phase = Union[Idle, Loading, Loaded, Failed]


@dataclass(frozen=True)
class ViewState:
    """
    视图状态

    对外暴露 loading / error / trigger / trigger_state / trigger_events /
    sorting / sorting_down 只读属性，变更通过返回新状态的方法完成。
    """
    phase: Phase = field(default_factory=Idle)
    sort: Sorting = field(default_factory=Sorting)

    @classmethod
    def initial(cls) -> "ViewState":
        """挂载时的初始状态：加载中、无数据、按 value 排序"""
        return cls(phase=Loading(), sort=Sorting())

    # ===== 派生属性 =====

    @property
    def loading(self) -> bool:
        return isinstance(self.phase, Loading)

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.phase, Failed):
            return self.phase.message
        return None

    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self.phase.last_good

    @property
    def trigger(self) -> Optional[Trigger]:
        return self.snapshot.trigger if self.snapshot else None

    @property
    def trigger_state(self) -> Optional[TriggerState]:
        return self.snapshot.trigger_state if self.snapshot else None

    @property
    def trigger_events(self) -> Optional[EventPage]:
        return self.snapshot.trigger_events if self.snapshot else None

    @property
    def sorting(self) -> str:
        return self.sort.key.value

    @property
    def sorting_down(self) -> bool:
        return self.sort.descending_first

    # ===== 状态迁移 =====

    def start_loading(self) -> "ViewState":
        return replace(self, phase=Loading(last_good=self.snapshot))

    def loaded(self, snapshot: Snapshot) -> "ViewState":
        return replace(self, phase=Loaded(snapshot))

    def failed(self, message: str = NETWORK_ERROR_MESSAGE) -> "ViewState":
        return replace(self, phase=Failed(message, last_good=self.snapshot))

    def with_sorting(self, sort: Sorting) -> "ViewState":
        return replace(self, sort=sort)
