"""
视图状态测试
"""
import dataclasses

import pytest

from sdk.moira_client.models import EventPage, Trigger, TriggerState
from triggers.sorting import SortKey, Sorting
from triggers.state import (
    NETWORK_ERROR_MESSAGE,
    Failed,
    Idle,
    Loaded,
    Loading,
    Snapshot,
    ViewState,
)


def make_snapshot(trigger_id="t1"):
    return Snapshot(
        trigger=Trigger(id=trigger_id, name="CPU load"),
        trigger_state=TriggerState(trigger_id=trigger_id),
        trigger_events=EventPage(total=0, list=[], page=0, size=100),
    )


class TestViewState:
    """ViewState 测试"""

    def test_initial(self):
        """挂载时加载中且无数据"""
        state = ViewState.initial()
        assert isinstance(state.phase, Loading)
        assert state.loading is True
        assert state.error is None
        assert state.trigger is None
        assert state.trigger_state is None
        assert state.trigger_events is None
        assert state.sorting == "value"
        assert state.sorting_down is True

    def test_default_is_idle(self):
        """未开始加载"""
        state = ViewState()
        assert isinstance(state.phase, Idle)
        assert state.loading is False
        assert state.snapshot is None

    def test_loaded_sets_all_fields(self):
        """成功后三个数据字段同时就绪"""
        snapshot = make_snapshot()
        state = ViewState.initial().loaded(snapshot)

        assert isinstance(state.phase, Loaded)
        assert state.loading is False
        assert state.error is None
        assert state.trigger is snapshot.trigger
        assert state.trigger_state is snapshot.trigger_state
        assert state.trigger_events is snapshot.trigger_events

    def test_failed_keeps_last_good(self):
        """失败不清除旧数据"""
        snapshot = make_snapshot()
        state = ViewState.initial().loaded(snapshot).start_loading().failed()

        assert isinstance(state.phase, Failed)
        assert state.loading is False
        assert state.error == NETWORK_ERROR_MESSAGE
        assert state.trigger is snapshot.trigger

    def test_failed_without_data(self):
        """首次加载失败"""
        state = ViewState.initial().failed("boom")
        assert state.error == "boom"
        assert state.trigger is None

    def test_start_loading_keeps_stale_data(self):
        """加载中保留过期数据"""
        snapshot = make_snapshot()
        state = ViewState.initial().loaded(snapshot).start_loading()
        assert state.loading is True
        assert state.snapshot is snapshot

    def test_success_clears_error(self):
        """成功清除之前的错误"""
        state = ViewState.initial().failed().start_loading().loaded(make_snapshot())
        assert state.error is None

    def test_with_sorting(self):
        """切换排序不影响数据"""
        snapshot = make_snapshot()
        state = ViewState.initial().loaded(snapshot)
        sorted_state = state.with_sorting(Sorting(SortKey.NAME, False))

        assert sorted_state.sorting == "name"
        assert sorted_state.sorting_down is False
        assert sorted_state.snapshot is snapshot
        assert state.sorting == "value"

    def test_immutable(self):
        """状态不可变"""
        state = ViewState.initial()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.phase = Idle()
