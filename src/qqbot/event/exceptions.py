"""消息事件异常体系

分类与规范化失败统一向调用方抛出，不在本地恢复。
传输层（send / recall / reaction 等）的异常不在此包装，原样透传。
"""


class EventError(Exception):
    """事件包基础异常"""

    def __init__(self, message: str, recoverable: bool = False) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 调用方是否可通过修正输入后重试恢复
        """
        super().__init__(message)
        self.recoverable = recoverable


class UnrecognizedEventKind(EventError):
    """事件类型不在已知集合内

    静默丢弃会掩盖平台协议漂移，因此直接抛出，不构造任何事件。
    """

    def __init__(self, event_kind: str) -> None:
        super().__init__(f"未知的消息事件类型: {event_kind!r}")
        self.event_kind = event_kind


class MalformedPayload(EventError):
    """payload 缺少必需字段或字段格式非法，无法安全构造事件"""

    def __init__(self, reason: str, event_kind: str = "") -> None:
        """
        Args:
            reason: 具体原因（缺失的字段、非法的取值等）
            event_kind: 触发该错误的事件类型，未知时为空
        """
        prefix = f"[{event_kind}] " if event_kind else ""
        super().__init__(f"{prefix}payload 格式错误: {reason}")
        self.reason = reason
        self.event_kind = event_kind
