"""规范化消息字段模型

分类器从原始 payload 得到的统一字段集合，所有消息事件变体共享。
模型冻结，构造后不可修改。
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# 所有发送者默认拥有的基础身份
BASE_PERMISSION = "normal"


class Sender(BaseModel):
    """消息发送者信息"""

    model_config = ConfigDict(frozen=True)

    user_id: str | None = Field(default=None, description="发送者 ID")
    user_name: str | None = Field(default=None, description="发送者昵称")
    permissions: tuple[str, ...] = Field(
        default=(BASE_PERMISSION,),
        description="身份列表，首个元素恒为 normal，其后为平台身份组（保持原顺序）",
    )
    user_openid: str | None = Field(default=None, description="发送者 openid")


class CanonicalFields(BaseModel):
    """规范化消息字段

    message_id 与 id 相同，保留用于兼容旧字段名。
    timestamp 为 epoch 秒（浮点数）。
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="平台消息 ID")
    message_id: str = Field(description="id 的别名")
    user_id: str | None = Field(default=None, description="发送者 ID")
    message: Any = Field(default=None, description="结构化消息内容，由内容解析器产生")
    raw_message: str = Field(default="", description="消息摘要")
    sender: Sender = Field(default_factory=Sender, description="发送者信息")
    timestamp: float = Field(description="消息时间戳（epoch 秒）")
