"""
提供给展示层的只读视图快照

展示层拿到的指标已经排好序；没有数据的标签页不会出现在 tabs 中。
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from sdk.moira_client.models import Event, Metric, Trigger

from .sorting import sort_metrics
from .state import ViewState


STATE_TAB = "state"
EVENTS_TAB = "events"


@dataclass(frozen=True)
class Tab:
    id: str
    label: str


@dataclass(frozen=True)
class TriggerView:
    """触发器页面渲染所需的全部数据"""
    loading: bool
    error: Optional[str]
    trigger: Optional[Trigger]
    metrics: Dict[str, Metric]
    events: List[Event]
    sorting: str
    sorting_down: bool
    tabs: Tuple[Tab, ...]
    active_tab: Optional[str]

    @property
    def has_tabs(self) -> bool:
        return bool(self.tabs)


def build_view(state: ViewState) -> TriggerView:
    """由视图状态生成渲染快照，每次调用都重新排序"""
    trigger = state.trigger
    metrics = state.trigger_state.metrics if state.trigger_state else {}
    events = state.trigger_events.list if state.trigger_events else []

    has_metrics = bool(metrics) and trigger is not None
    has_events = bool(events)

    tabs = []
    if has_metrics:
        tabs.append(Tab(STATE_TAB, "Current state"))
    if has_events:
        tabs.append(Tab(EVENTS_TAB, "Events history"))

    if has_metrics:
        active_tab = STATE_TAB
    elif has_events:
        active_tab = EVENTS_TAB
    else:
        active_tab = None

    return TriggerView(
        loading=state.loading,
        error=state.error,
        trigger=trigger,
        metrics=sort_metrics(metrics, state.sort.key, state.sort.descending_first),
        events=list(events),
        sorting=state.sorting,
        sorting_down=state.sorting_down,
        tabs=tuple(tabs),
        active_tab=active_tab,
    )
