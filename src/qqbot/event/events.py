"""消息事件变体

四种消息事件（私聊、群、频道私信、子频道）共享规范化字段和 reply 能力；
频道私信与子频道消息额外支持 recall；表态、置顶、公告仅子频道消息支持。
每个变体只暴露自身适用的能力，不从基类继承不存在的操作。

事件本身只是数据加分发：所有能力都通过构造时绑定的 bot 传输客户端完成。
"""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Annotated, Any, Literal, Self

from pydantic import Field, PrivateAttr

from .enums import MessageType, ReactionType
from .models import CanonicalFields
from .protocols import BotTransport


def _pick(payload: Mapping[str, Any], *keys: str) -> dict[str, Any]:
    """从 payload 中挑选非空字段"""
    return {key: str(payload[key]) for key in keys if payload.get(key) is not None}


class MessageEvent(CanonicalFields):
    """消息事件基类

    message_type 由各变体以 Literal 默认值固定，冻结后不可修改。
    """

    message_type: MessageType

    _bot: BotTransport | None = PrivateAttr(default=None)

    def __init__(self, bot: BotTransport | None = None, /, **data: Any) -> None:
        super().__init__(**data)
        self._bot = bot

    @property
    def bot(self) -> BotTransport | None:
        """事件绑定的 bot 传输客户端"""
        return self._bot

    @classmethod
    def from_fields(
        cls,
        bot: BotTransport,
        fields: CanonicalFields,
        payload: Mapping[str, Any],
    ) -> Self:
        """由规范化字段与原始 payload 中的来源标识构造事件

        Raises:
            pydantic.ValidationError: 变体必需的来源标识缺失
        """
        return cls(bot, **dict(fields), **cls.identifiers_from(payload))

    @classmethod
    def identifiers_from(cls, payload: Mapping[str, Any]) -> dict[str, Any]:
        """提取变体自身的来源标识字段"""
        return {}

    @property
    @abstractmethod
    def origin(self) -> str:
        """消息来源描述，用于日志"""

    @abstractmethod
    async def reply(self, content: Any, quote: bool = False) -> Any:
        """向触发消息的来源发送回复

        Args:
            content: 回复内容
            quote: 是否引用触发消息
        """


class PrivateMessageEvent(MessageEvent):
    """私聊消息事件"""

    message_type: Literal[MessageType.PRIVATE] = MessageType.PRIVATE
    user_id: str = Field(description="发送者 ID，私聊回复目标")

    @property
    def origin(self) -> str:
        return f"User({self.user_id})"

    async def reply(self, content: Any, quote: bool = False) -> Any:
        return await self._bot.send_private_message(
            self.user_id, content, self, quote=quote
        )


class GroupMessageEvent(MessageEvent):
    """群消息事件"""

    message_type: Literal[MessageType.GROUP] = MessageType.GROUP
    group_id: str = Field(description="群 ID")
    group_name: str = Field(default="", description="群名称")

    @classmethod
    def identifiers_from(cls, payload: Mapping[str, Any]) -> dict[str, Any]:
        identifiers = _pick(payload, "group_id", "group_name")
        # 部分推送只携带 group_openid
        if "group_id" not in identifiers and payload.get("group_openid") is not None:
            identifiers["group_id"] = str(payload["group_openid"])
        return identifiers

    @property
    def origin(self) -> str:
        return f"Group({self.group_id})"

    async def reply(self, content: Any, quote: bool = False) -> Any:
        return await self._bot.send_group_message(
            self.group_id, content, self, quote=quote
        )


class DirectMessageEvent(MessageEvent):
    """频道私信事件"""

    message_type: Literal[MessageType.DIRECT] = MessageType.DIRECT
    guild_id: str = Field(description="私信会话所在的频道 ID")
    channel_id: str = Field(description="私信子频道 ID")

    @classmethod
    def identifiers_from(cls, payload: Mapping[str, Any]) -> dict[str, Any]:
        return _pick(payload, "guild_id", "channel_id")

    @property
    def origin(self) -> str:
        return f"Direct({self.guild_id})"

    async def reply(self, content: Any, quote: bool = False) -> Any:
        return await self._bot.send_direct_message(
            self.guild_id, content, self, quote=quote
        )

    async def recall(self, hide_tip: bool = False) -> Any:
        """撤回触发消息

        Args:
            hide_tip: 是否隐藏撤回提示
        """
        return await self._bot.recall_direct_message(
            self.guild_id, self.message_id, hide_tip
        )


class GuildMessageEvent(MessageEvent):
    """子频道消息事件"""

    message_type: Literal[MessageType.GUILD] = MessageType.GUILD
    guild_id: str = Field(description="频道 ID")
    guild_name: str = Field(default="", description="频道名称")
    channel_id: str = Field(description="子频道 ID")
    channel_name: str = Field(default="", description="子频道名称")

    @classmethod
    def identifiers_from(cls, payload: Mapping[str, Any]) -> dict[str, Any]:
        return _pick(payload, "guild_id", "guild_name", "channel_id", "channel_name")

    @property
    def origin(self) -> str:
        return f"Guild({self.guild_id})Channel({self.channel_id})"

    async def reply(self, content: Any, quote: bool = False) -> Any:
        return await self._bot.send_guild_message(
            self.channel_id, content, self, quote=quote
        )

    async def recall(self, hide_tip: bool = False) -> Any:
        """撤回触发消息

        Args:
            hide_tip: 是否隐藏撤回提示
        """
        return await self._bot.recall_guild_message(
            self.channel_id, self.message_id, hide_tip
        )

    async def as_announce(self) -> Any:
        """将触发消息设置为子频道公告"""
        return await self._bot.set_channel_announce(
            self.guild_id, self.channel_id, self.id
        )

    async def pin(self) -> Any:
        """置顶触发消息"""
        return await self._bot.pin_channel_message(self.channel_id, self.id)

    async def reaction(self, type: ReactionType | int, emoji_id: str) -> Any:
        """对触发消息添加表态

        Args:
            type: 表情类型（1 系统表情 / 2 emoji）
            emoji_id: 表情 ID

        Raises:
            ValueError: 表情类型不在已知集合内
        """
        return await self._bot.reaction_guild_message(
            self.channel_id, self.message_id, ReactionType(type), str(emoji_id)
        )

    async def delete_reaction(self, type: ReactionType | int, emoji_id: str) -> Any:
        """删除触发消息上的表态"""
        return await self._bot.delete_guild_message_reaction(
            self.channel_id, self.message_id, ReactionType(type), str(emoji_id)
        )

    async def get_reaction_members(
        self, type: ReactionType | int, emoji_id: str
    ) -> Any:
        """获取对触发消息进行该表态的用户列表"""
        return await self._bot.get_guild_message_reaction_members(
            self.channel_id, self.message_id, ReactionType(type), str(emoji_id)
        )


# 按 message_type 判别的事件联合类型，用于校验已序列化的事件（不绑定 bot）
AnyMessageEvent = Annotated[
    PrivateMessageEvent | GroupMessageEvent | DirectMessageEvent | GuildMessageEvent,
    Field(discriminator="message_type"),
]
