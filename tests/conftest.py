"""消息事件测试 fixtures"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

_ASYNC_METHODS = (
    "send_private_message",
    "send_group_message",
    "send_direct_message",
    "send_guild_message",
    "recall_direct_message",
    "recall_guild_message",
    "set_channel_announce",
    "pin_channel_message",
    "reaction_guild_message",
    "delete_guild_message_reaction",
    "get_guild_message_reaction_members",
)


def _parse_message_content(payload: dict[str, Any]) -> tuple[list[dict], str]:
    """简化的内容解析：content 文本即摘要"""
    text = payload.get("content", "")
    return [{"type": "text", "text": text}], text


@pytest.fixture
def bot() -> MagicMock:
    """Mock bot 传输客户端

    同步协作方（去除 @bot、内容解析）为 MagicMock，网络操作为 AsyncMock。
    """
    mock = MagicMock()
    mock.strip_self_mentions = MagicMock(return_value=None)
    mock.parse_message_content = MagicMock(side_effect=_parse_message_content)
    for name in _ASYNC_METHODS:
        setattr(mock, name, AsyncMock(return_value={"ok": name}))
    return mock


@pytest.fixture
def author() -> dict[str, Any]:
    return {
        "id": "U1",
        "username": "alice",
        "user_openid": "OPEN-U1",
    }


@pytest.fixture
def private_payload(author) -> dict[str, Any]:
    return {
        "id": "M1",
        "author": author,
        "content": "hello",
        "timestamp": 1700000000000,
    }


@pytest.fixture
def group_payload(author) -> dict[str, Any]:
    return {
        "id": "M2",
        "author": {"id": "U2", "member_openid": "MEMBER-U2"},
        "group_id": "G100",
        "group_name": "测试群",
        "content": "hi group",
        "timestamp": "2023-11-14T22:13:20+00:00",
    }


@pytest.fixture
def direct_payload(author) -> dict[str, Any]:
    return {
        "id": "M3",
        "author": author,
        "guild_id": "DG1",
        "channel_id": "DC1",
        "content": "psst",
        "timestamp": 1700000000000,
    }


@pytest.fixture
def guild_payload(author) -> dict[str, Any]:
    return {
        "id": "M1",
        "author": {"id": "U1", "username": "alice"},
        "member": {"roles": ["2", "4"]},
        "guild_id": "G1",
        "guild_name": "测试频道",
        "channel_id": "C1",
        "channel_name": "闲聊",
        "content": "<@!BOT> hello guild",
        "timestamp": "2023-11-14T22:13:20Z",
    }
