"""
指标排序

对 指标名 -> Metric 的无序映射按 (排序键, 方向) 排序，返回新的有序字典。
纯函数，不修改输入。
"""
import re
from dataclasses import dataclass, replace
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, Dict, Mapping, Tuple, Union

from sdk.moira_client.models import Metric

from .status import get_status_weight


class SortKey(str, Enum):
    """排序键"""
    STATE = "state"
    NAME = "name"
    EVENT = "event"
    VALUE = "value"


@dataclass(frozen=True)
class Sorting:
    """
    当前排序设置

    descending_first 为初始方向（True），并非对所有键都意味着降序：
    比较结果 A < B 时，True 返回 -1，False 返回 1。
    """
    key: SortKey = SortKey.VALUE
    descending_first: bool = True


_NAME_STRIP = re.compile(r"[^a-zA-Z0-9\-.]")


def normalize_metric_name(name: str) -> str:
    """去首尾空白、去掉 [A-Za-z0-9-.] 以外的字符、转小写，仅用于比较"""
    return _NAME_STRIP.sub("", name.strip()).lower()


Item = Tuple[str, Metric]

_KEY_EXTRACTORS: Dict[SortKey, Callable[[Item], Any]] = {
    SortKey.STATE: lambda item: get_status_weight(item[1].state),
    SortKey.NAME: lambda item: normalize_metric_name(item[0]),
    SortKey.EVENT: lambda item: item[1].event_timestamp or 0,
    SortKey.VALUE: lambda item: item[1].value or 0,
}


def _comparator(extract: Callable[[Item], Any], descending_first: bool) -> Callable[[Item, Item], int]:
    def compare(a: Item, b: Item) -> int:
        left, right = extract(a), extract(b)
        if left < right:
            return -1 if descending_first else 1
        if left > right:
            return 1 if descending_first else -1
        return 0
    return compare


def sort_metrics(
    metrics: Mapping[str, Metric],
    sort_key: Union[SortKey, str],
    descending_first: bool = True,
) -> Dict[str, Metric]:
    """
    排序指标

    Args:
        metrics: 指标名 -> Metric
        sort_key: state / name / event / value
        descending_first: 排序方向，见 Sorting

    Returns:
        新的字典，键顺序即排序结果，值为原对象

    Raises:
        ValueError: 未知的排序键
    """
    compare = _comparator(_KEY_EXTRACTORS[SortKey(sort_key)], descending_first)
    ordered = sorted(metrics.items(), key=cmp_to_key(compare))
    return {name: metric for name, metric in ordered}


def toggle_sorting(current: Sorting, key: Union[SortKey, str]) -> Sorting:
    """
    点击排序列

    同一列翻转方向；换列时采用新列并恢复初始方向。
    """
    key = SortKey(key)
    if key == current.key:
        return replace(current, descending_first=not current.descending_first)
    return Sorting(key=key, descending_first=True)
