"""消息事件分类与规范化

classify() 是唯一入口：按事件类型判别原始 payload，规范化为统一字段，
实例化对应的事件变体，并通过注入的 hook 发出接收通知。

原始 payload 只读：去除 @bot、解析消息内容都作用于其深拷贝，
构造出的事件与调用方的映射之间没有别名关系。
"""

import copy
import math
import time
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from functools import cache
from typing import Any

import structlog
from pydantic import ValidationError

from .config import EventConfig, load_event_config
from .enums import EventKind
from .events import (
    DirectMessageEvent,
    GroupMessageEvent,
    GuildMessageEvent,
    MessageEvent,
    PrivateMessageEvent,
)
from .exceptions import MalformedPayload, UnrecognizedEventKind
from .models import BASE_PERMISSION, CanonicalFields, Sender
from .protocols import BotTransport

log = structlog.get_logger()

ReceiveHook = Callable[[MessageEvent], None]

# 事件类型 -> 变体，覆盖全部已知类型
EVENT_TYPES: dict[EventKind, type[MessageEvent]] = {
    EventKind.PRIVATE: PrivateMessageEvent,
    EventKind.GROUP: GroupMessageEvent,
    EventKind.GUILD: GuildMessageEvent,
    EventKind.DIRECT: DirectMessageEvent,
}


def resolve_event_type(event_kind: str) -> type[MessageEvent]:
    """按事件类型查找事件变体

    Raises:
        UnrecognizedEventKind: 事件类型不在已知集合内
    """
    try:
        return EVENT_TYPES[EventKind(event_kind)]
    except ValueError:
        raise UnrecognizedEventKind(event_kind) from None


def to_epoch_seconds(value: Any) -> float:
    """将平台时间戳转换为 epoch 秒

    支持 epoch 毫秒（数字或纯数字字符串）、ISO-8601 字符串、datetime。
    不带时区的时间按 UTC 处理。

    Raises:
        ValueError: 无法识别的时间戳，或换算结果不是有限值
        OverflowError: 毫秒数超出浮点数范围
    """
    if isinstance(value, bool):
        raise ValueError(f"非法时间戳: {value!r}")
    if isinstance(value, int | float):
        return _finite(value / 1000, value)
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return _finite(int(text) / 1000, value)
        moment = datetime.fromisoformat(text)
    else:
        raise ValueError(f"非法时间戳: {value!r}")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.timestamp()


def _finite(seconds: float, raw: Any) -> float:
    if not math.isfinite(seconds):
        raise ValueError(f"非法时间戳: {raw!r}")
    return seconds


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def build_sender(author: Mapping[str, Any], member: Any) -> Sender:
    """由 author / member 派生发送者信息

    permissions 恒以 normal 开头，其后依次追加 member.roles。
    """
    roles = member.get("roles") if isinstance(member, Mapping) else None
    if roles is None:
        roles = ()
    elif isinstance(roles, str) or not isinstance(roles, Sequence):
        # 单个身份组按一个元素追加
        roles = (roles,)
    return Sender(
        user_id=_optional_str(author.get("id")),
        user_name=_optional_str(author.get("username")),
        permissions=(BASE_PERMISSION, *(str(role) for role in roles)),
        user_openid=_optional_str(
            author.get("user_openid") or author.get("member_openid")
        ),
    )


def normalize_payload(
    bot: BotTransport,
    payload: Mapping[str, Any],
    event_kind: str = "",
) -> tuple[CanonicalFields, dict[str, Any]]:
    """规范化原始 payload

    Args:
        bot: 提供去除 @bot 与内容解析能力的 bot
        payload: 原始 payload（不会被修改）
        event_kind: 事件类型，仅用于错误信息

    Returns:
        (规范化字段, 经预处理的 payload 副本)

    Raises:
        MalformedPayload: 缺少 id / author，或时间戳无法识别
    """
    if not isinstance(payload, Mapping):
        raise MalformedPayload(
            f"payload 必须是映射类型，实际为 {type(payload).__name__}", event_kind
        )

    working = copy.deepcopy(dict(payload))

    message_id = working.get("id")
    if message_id is None or message_id == "":
        raise MalformedPayload("缺少消息 id", event_kind)
    author = working.get("author")
    if not isinstance(author, Mapping):
        raise MalformedPayload("缺少 author", event_kind)

    bot.strip_self_mentions(working)
    content, brief = bot.parse_message_content(working)

    raw_timestamp = working.get("timestamp")
    if raw_timestamp is None:
        # 未携带时间戳时以接收时间为准
        timestamp = time.time()
    else:
        try:
            timestamp = to_epoch_seconds(raw_timestamp)
        except (ValueError, OverflowError) as e:
            raise MalformedPayload(f"非法时间戳: {raw_timestamp!r}", event_kind) from e

    fields = CanonicalFields(
        id=str(message_id),
        message_id=str(message_id),
        user_id=_optional_str(author.get("id")),
        message=content,
        raw_message=brief or "",
        sender=build_sender(author, working.get("member")),
        timestamp=timestamp,
    )
    return fields, working


class ReceiveLogger:
    """默认接收 hook：输出消息接收日志"""

    def __init__(self, config: EventConfig | None = None) -> None:
        self._config = config if config is not None else load_event_config()

    def __call__(self, event: MessageEvent) -> None:
        if not self._config.log_received:
            return
        log.info(
            "message_received",
            origin=event.origin,
            message_type=str(event.message_type),
            message_id=event.message_id,
            content=self._preview(event.raw_message),
        )

    def _preview(self, brief: str) -> str:
        limit = self._config.log_preview_length
        if limit and len(brief) > limit:
            return brief[:limit] + "..."
        return brief


@cache
def _default_receive_hook() -> ReceiveLogger:
    return ReceiveLogger()


def classify(
    bot: BotTransport,
    event_kind: str,
    payload: Mapping[str, Any],
    *,
    on_received: ReceiveHook | None = None,
) -> MessageEvent:
    """分类原始消息事件并构造对应的事件变体

    Args:
        bot: 事件绑定的 bot 传输客户端（仅引用，不复制）
        event_kind: 事件类型，message.private / group / guild / direct
        payload: 原始 payload
        on_received: 构造完成后调用的接收 hook，None 时使用 ReceiveLogger；
            hook 异常不影响分类结果

    Returns:
        对应变体的事件实例

    Raises:
        UnrecognizedEventKind: 事件类型未知，不调用任何协作方
        MalformedPayload: payload 缺少必需字段
    """
    event_type = resolve_event_type(event_kind)

    try:
        fields, working = normalize_payload(bot, payload, event_kind)
        event = event_type.from_fields(bot, fields, working)
    except ValidationError as e:
        raise MalformedPayload(
            "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ),
            event_kind,
        ) from e

    hook = on_received if on_received is not None else _default_receive_hook()
    try:
        hook(event)
    except Exception as e:
        log.debug(
            "receive_hook_failed",
            error=str(e),
            error_type=type(e).__name__,
            message_id=event.message_id,
        )

    return event
