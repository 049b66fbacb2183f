"""枚举定义

包含消息类型判别值、入站事件类型、表态表情类型。
"""

from enum import IntEnum, StrEnum


class MessageType(StrEnum):
    """消息类型 -- 构造时确定，之后不可变"""

    PRIVATE = "private"
    GROUP = "group"
    DIRECT = "direct"
    GUILD = "guild"


class EventKind(StrEnum):
    """入站消息事件类型（判别字符串）"""

    PRIVATE = "message.private"
    GROUP = "message.group"
    GUILD = "message.guild"
    DIRECT = "message.direct"


class ReactionType(IntEnum):
    """表态表情类型"""

    # 系统表情
    SYSTEM = 1
    # emoji 表情
    EMOJI = 2
