"""
渲染快照测试
"""
from sdk.moira_client.models import Event, EventPage, Metric, Trigger, TriggerState
from triggers.sorting import SortKey, Sorting
from triggers.state import Snapshot, ViewState
from triggers.view import EVENTS_TAB, STATE_TAB, build_view


def make_state(metrics, events, trigger=True):
    snapshot = Snapshot(
        trigger=Trigger(id="t1", name="CPU load") if trigger else None,
        trigger_state=TriggerState(trigger_id="t1", metrics=metrics),
        trigger_events=EventPage(total=len(events), list=events, page=0, size=100),
    )
    return ViewState.initial().loaded(snapshot)


EVENT = Event(timestamp=1500000000, metric="m1", state="ERROR", old_state="OK")


class TestBuildView:
    """build_view 测试"""

    def test_loading_without_data(self):
        """加载中且无数据"""
        view = build_view(ViewState.initial())
        assert view.loading is True
        assert view.trigger is None
        assert view.metrics == {}
        assert view.events == []
        assert view.tabs == ()
        assert view.active_tab is None

    def test_empty_metrics_and_events_no_tabs(self):
        """无指标无事件时不生成标签页"""
        view = build_view(make_state({}, []))
        assert view.trigger is not None
        assert not view.has_tabs
        assert view.active_tab is None

    def test_both_tabs(self):
        """指标与事件都有"""
        view = build_view(make_state({"m1": Metric(state="OK")}, [EVENT]))
        assert [t.id for t in view.tabs] == [STATE_TAB, EVENTS_TAB]
        assert [t.label for t in view.tabs] == ["Current state", "Events history"]
        assert view.active_tab == STATE_TAB

    def test_events_only(self):
        """只有事件"""
        view = build_view(make_state({}, [EVENT]))
        assert [t.id for t in view.tabs] == [EVENTS_TAB]
        assert view.active_tab == EVENTS_TAB
        assert view.events == [EVENT]

    def test_metrics_tab_requires_trigger(self):
        """没有触发器时不显示指标页"""
        view = build_view(make_state({"m1": Metric(state="OK")}, [], trigger=False))
        assert view.tabs == ()

    def test_metrics_sorted(self):
        """指标按当前排序输出"""
        state = make_state(
            {
                "b": Metric(state="ERROR"),
                "a": Metric(state="OK"),
                "c": Metric(state="WARN"),
            },
            [],
        ).with_sorting(Sorting(SortKey.STATE, False))

        view = build_view(state)

        assert list(view.metrics) == ["b", "c", "a"]
        assert view.sorting == "state"
        assert view.sorting_down is False

    def test_error_shown(self):
        """错误信息透传"""
        view = build_view(ViewState.initial().failed())
        assert view.loading is False
        assert view.error == "Network error. Please, reload page"
