"""
指标状态与严重度权重

权重沿用 Moira 服务端计算 trigger score 时的分值，DEL 排在 OK 之下，
保证状态集合上是严格全序。
"""
from enum import Enum
from typing import Dict, Union


class Status(str, Enum):
    """指标状态"""
    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"
    NODATA = "NODATA"
    EXCEPTION = "EXCEPTION"
    DEL = "DEL"


STATUS_WEIGHTS: Dict[Status, int] = {
    Status.DEL: -1,
    Status.OK: 0,
    Status.WARN: 1,
    Status.ERROR: 100,
    Status.NODATA: 1000,
    Status.EXCEPTION: 100000,
}

# 服务端新增、本地未知的状态排在最后
UNKNOWN_STATUS_WEIGHT = -2


def get_status_weight(status: Union[Status, str, None]) -> int:
    """返回状态的严重度权重，越严重越大"""
    try:
        return STATUS_WEIGHTS[Status(status)]
    except ValueError:
        return UNKNOWN_STATUS_WEIGHT
