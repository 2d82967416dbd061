"""
数据模型定义

使用 dataclass 定义 Moira API 返回的数据结构，提供完整的类型注解。
所有模型都通过 from_dict 从 JSON 创建，缺失字段取默认值。
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


@dataclass
class Metric:
    """
    单个指标的当前评估状态

    Attributes:
        state: 状态 (OK, WARN, ERROR, NODATA, EXCEPTION, DEL)
        event_timestamp: 最近一次状态变化时间 (Unix 秒)
        value: 当前值
        timestamp: 最近一次检查时间 (Unix 秒)
        suppressed: 通知是否被抑制
        maintenance: 维护截止时间 (Unix 秒)
    """
    state: str
    event_timestamp: Optional[int] = None
    value: Optional[float] = None
    timestamp: Optional[int] = None
    suppressed: bool = False
    maintenance: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Metric":
        """从字典创建"""
        return cls(
            state=data.get("state", "NODATA"),
            event_timestamp=data.get("event_timestamp"),
            value=data.get("value"),
            timestamp=data.get("timestamp"),
            suppressed=data.get("suppressed", False),
            maintenance=data.get("maintenance"),
        )


@dataclass
class Trigger:
    """
    触发器定义（只读）

    Attributes:
        id: 触发器 ID
        name: 名称
        targets: Graphite 目标表达式
        tags: 标签
        warn_value: WARN 阈值
        error_value: ERROR 阈值
        throttling: 通知节流截止时间 (Unix 秒)，0 表示未节流
    """
    id: str
    name: str
    desc: str = ""
    targets: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    warn_value: Optional[float] = None
    error_value: Optional[float] = None
    ttl: Optional[int] = None
    ttl_state: Optional[str] = None
    expression: str = ""
    is_simple_trigger: bool = False
    throttling: int = 0
    patterns: List[str] = field(default_factory=list)
    sched: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_throttled(self) -> bool:
        """是否处于通知节流中"""
        return self.throttling > 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Trigger":
        """从字典创建"""
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            desc=data.get("desc") or "",
            targets=data.get("targets") or [],
            tags=data.get("tags") or [],
            warn_value=data.get("warn_value"),
            error_value=data.get("error_value"),
            ttl=data.get("ttl"),
            ttl_state=data.get("ttl_state"),
            expression=data.get("expression") or "",
            is_simple_trigger=data.get("is_simple_trigger", False),
            throttling=data.get("throttling") or 0,
            patterns=data.get("patterns") or [],
            sched=data.get("sched") or {},
        )


@dataclass
class TriggerState:
    """
    触发器的实时评估快照

    每次获取都整体替换，不做增量合并。
    """
    trigger_id: str
    state: str = "NODATA"
    timestamp: Optional[int] = None
    score: int = 0
    metrics: Dict[str, Metric] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TriggerState":
        """从字典创建"""
        metrics = data.get("metrics") or {}
        return cls(
            trigger_id=data.get("trigger_id", ""),
            state=data.get("state", "NODATA"),
            timestamp=data.get("timestamp"),
            score=data.get("score", 0),
            metrics={name: Metric.from_dict(m) for name, m in metrics.items()},
        )


@dataclass
class Event:
    """状态变化事件"""
    timestamp: int
    metric: str
    state: str
    old_state: Optional[str] = None
    value: Optional[float] = None
    trigger_id: str = ""
    msg: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        """从字典创建"""
        return cls(
            timestamp=data.get("timestamp", 0),
            metric=data.get("metric", ""),
            state=data.get("state", ""),
            old_state=data.get("old_state"),
            value=data.get("value"),
            trigger_id=data.get("trigger_id", ""),
            msg=data.get("msg"),
        )


@dataclass
class EventPage:
    """
    分页事件列表

    Attributes:
        total: 事件总数
        list: 当前页事件，保持服务端返回顺序
        page: 当前页码（从 0 开始）
        size: 每页大小
    """
    total: int
    list: List[Event]
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        """总页数"""
        if self.size > 0:
            return (self.total + self.size - 1) // self.size
        return 0

    @property
    def has_next(self) -> bool:
        """是否有下一页"""
        return self.page + 1 < self.total_pages

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventPage":
        """从字典创建"""
        events = [Event.from_dict(e) for e in data.get("list") or []]
        return cls(
            total=data.get("total", len(events)),
            list=events,
            page=data.get("page", 0),
            size=data.get("size", len(events)),
        )
