# 触发器页面模块
from .controller import TriggerController, TriggerService
from .maintenance import Maintenance, get_maintenance_time, maintenance_timestamp
from .sorting import SortKey, Sorting, normalize_metric_name, sort_metrics, toggle_sorting
from .state import (
    NETWORK_ERROR_MESSAGE,
    Failed,
    Idle,
    Loaded,
    Loading,
    Snapshot,
    ViewState,
)
from .status import Status, get_status_weight
from .view import Tab, TriggerView, build_view

__all__ = [
    "TriggerController",
    "TriggerService",
    "Maintenance",
    "get_maintenance_time",
    "maintenance_timestamp",
    "SortKey",
    "Sorting",
    "normalize_metric_name",
    "sort_metrics",
    "toggle_sorting",
    "NETWORK_ERROR_MESSAGE",
    "Failed",
    "Idle",
    "Loaded",
    "Loading",
    "Snapshot",
    "ViewState",
    "Status",
    "get_status_weight",
    "Tab",
    "TriggerView",
    "build_view",
]
