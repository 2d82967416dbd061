"""
指标维护时间

用户在界面上选择一个预设时长（或直接给出分钟数），写入服务端前换算成
Unix 时间戳。时长 <= 0 时原值透传，服务端据此关闭维护。
"""
import time
from enum import Enum
from typing import Dict, Optional, Union


class Maintenance(str, Enum):
    """维护时长预设"""
    OFF = "off"
    QUARTER_HOUR = "quarterHour"
    ONE_HOUR = "oneHour"
    THREE_HOURS = "threeHours"
    SIX_HOURS = "sixHours"
    ONE_DAY = "oneDay"
    ONE_WEEK = "oneWeek"
    ONE_MONTH = "oneMonth"


MAINTENANCE_MINUTES: Dict[Maintenance, int] = {
    Maintenance.OFF: -1,
    Maintenance.QUARTER_HOUR: 15,
    Maintenance.ONE_HOUR: 60,
    Maintenance.THREE_HOURS: 3 * 60,
    Maintenance.SIX_HOURS: 6 * 60,
    Maintenance.ONE_DAY: 24 * 60,
    Maintenance.ONE_WEEK: 7 * 24 * 60,
    Maintenance.ONE_MONTH: 30 * 24 * 60,
}


MaintenanceInput = Union[Maintenance, str, int]


def get_maintenance_time(maintenance: MaintenanceInput) -> int:
    """
    获取维护时长（分钟）

    Args:
        maintenance: 预设名或分钟数

    Returns:
        分钟数；OFF 为 -1

    Raises:
        ValueError: 未知的预设名
    """
    if isinstance(maintenance, bool):
        raise ValueError(f"Invalid maintenance: {maintenance!r}")
    if isinstance(maintenance, int):
        return maintenance
    return MAINTENANCE_MINUTES[Maintenance(maintenance)]


def maintenance_timestamp(maintenance: MaintenanceInput, now: Optional[float] = None) -> int:
    """
    计算写入服务端的维护截止时间

    时长为正时返回 now + 时长；否则原样返回时长值（0、-1 等哨兵值）。

    Args:
        maintenance: 预设名或分钟数
        now: 当前 Unix 时间，默认取系统时间

    Returns:
        Unix 时间戳（秒）或透传的哨兵值
    """
    minutes = get_maintenance_time(maintenance)
    if minutes <= 0:
        return minutes
    if now is None:
        now = time.time()
    return int(now) + minutes * 60
