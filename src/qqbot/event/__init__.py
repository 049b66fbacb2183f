"""QQBot 消息事件 -- 原始事件分类与消息事件变体

公开接口导出。
"""

from .config import EventConfig, load_event_config
from .enums import EventKind, MessageType, ReactionType

# 事件变体
from .events import (
    AnyMessageEvent,
    DirectMessageEvent,
    GroupMessageEvent,
    GuildMessageEvent,
    MessageEvent,
    PrivateMessageEvent,
)

# 异常
from .exceptions import EventError, MalformedPayload, UnrecognizedEventKind
from .models import CanonicalFields, Sender

# 分类入口
from .parser import (
    EVENT_TYPES,
    ReceiveLogger,
    classify,
    normalize_payload,
    resolve_event_type,
    to_epoch_seconds,
)
from .protocols import BotTransport, Recallable, Repliable

__all__ = [
    "classify",
    "normalize_payload",
    "resolve_event_type",
    "to_epoch_seconds",
    "EVENT_TYPES",
    "ReceiveLogger",
    "MessageEvent",
    "PrivateMessageEvent",
    "GroupMessageEvent",
    "DirectMessageEvent",
    "GuildMessageEvent",
    "AnyMessageEvent",
    "CanonicalFields",
    "Sender",
    "EventKind",
    "MessageType",
    "ReactionType",
    "BotTransport",
    "Repliable",
    "Recallable",
    "EventConfig",
    "load_event_config",
    "EventError",
    "UnrecognizedEventKind",
    "MalformedPayload",
]
