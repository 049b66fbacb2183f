"""Bot 传输层 Protocol 接口定义

事件只持有对 bot 的引用，实际的发送、撤回、表态等网络操作由实现本接口的
传输客户端完成。使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .enums import ReactionType
    from .events import MessageEvent


class BotTransport(Protocol):
    """消息事件依赖的 bot 能力集合"""

    def strip_self_mentions(self, payload: MutableMapping[str, Any]) -> None:
        """移除消息体中 @bot 自身的片段（原地修改）"""
        ...

    def parse_message_content(self, payload: Mapping[str, Any]) -> tuple[Any, str]:
        """解析消息内容，返回 (结构化内容, 摘要)"""
        ...

    async def send_private_message(
        self, user_id: str, content: Any, source: "MessageEvent", quote: bool = False
    ) -> Any:
        """发送私聊消息"""
        ...

    async def send_group_message(
        self, group_id: str, content: Any, source: "MessageEvent", quote: bool = False
    ) -> Any:
        """发送群消息"""
        ...

    async def send_direct_message(
        self, guild_id: str, content: Any, source: "MessageEvent", quote: bool = False
    ) -> Any:
        """发送频道私信"""
        ...

    async def send_guild_message(
        self, channel_id: str, content: Any, source: "MessageEvent", quote: bool = False
    ) -> Any:
        """发送子频道消息"""
        ...

    async def recall_direct_message(
        self, guild_id: str, message_id: str, hide_tip: bool = False
    ) -> Any:
        """撤回频道私信"""
        ...

    async def recall_guild_message(
        self, channel_id: str, message_id: str, hide_tip: bool = False
    ) -> Any:
        """撤回子频道消息"""
        ...

    async def set_channel_announce(
        self, guild_id: str, channel_id: str, message_id: str
    ) -> Any:
        """将消息设为子频道公告，返回公告对象"""
        ...

    async def pin_channel_message(self, channel_id: str, message_id: str) -> Any:
        """置顶子频道消息，返回置顶记录"""
        ...

    async def reaction_guild_message(
        self,
        channel_id: str,
        message_id: str,
        type: "ReactionType",
        emoji_id: str,
    ) -> Any:
        """对消息添加表态"""
        ...

    async def delete_guild_message_reaction(
        self,
        channel_id: str,
        message_id: str,
        type: "ReactionType",
        emoji_id: str,
    ) -> Any:
        """删除消息表态"""
        ...

    async def get_guild_message_reaction_members(
        self,
        channel_id: str,
        message_id: str,
        type: "ReactionType",
        emoji_id: str,
    ) -> Sequence[Any]:
        """获取对消息进行该表态的用户列表"""
        ...


@runtime_checkable
class Repliable(Protocol):
    """可回复的事件（所有消息事件）"""

    async def reply(self, content: Any, quote: bool = False) -> Any: ...


@runtime_checkable
class Recallable(Protocol):
    """可撤回触发消息的事件（频道私信、子频道消息）"""

    async def recall(self, hide_tip: bool = False) -> Any: ...
