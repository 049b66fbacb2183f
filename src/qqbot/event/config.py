"""EventConfig -- 事件层配置加载

从环境变量加载，仅影响日志等旁路行为，不影响分类结果。
"""

import os

import structlog
from pydantic import BaseModel, Field, ValidationError

log = structlog.get_logger()

DEFAULT_LOG_PREVIEW_LENGTH = 200

# 环境变量 -> EventConfig 字段
_ENV_FIELDS = {
    "QQBOT_EVENT_LOG_RECEIVED": "log_received",
    "QQBOT_EVENT_LOG_PREVIEW_LENGTH": "log_preview_length",
}


class EventConfig(BaseModel):
    """事件层配置

    环境变量:
        QQBOT_EVENT_LOG_RECEIVED: 是否输出消息接收日志（默认 true）
        QQBOT_EVENT_LOG_PREVIEW_LENGTH: 日志中消息摘要截断长度（默认 200）
    """

    log_received: bool = Field(default=True, description="是否输出消息接收日志")
    log_preview_length: int = Field(
        default=DEFAULT_LOG_PREVIEW_LENGTH,
        ge=0,
        description="日志中消息摘要的最大字符数，0 表示不截断",
    )


def load_event_config() -> EventConfig:
    """从环境变量加载事件层配置

    原始字符串交给 EventConfig 校验；非法取值记录 warning 并使用默认值，
    不阻塞启动，也不影响其他合法字段。

    Returns:
        EventConfig 实例
    """
    kwargs: dict = {}
    env_vars: dict[str, str] = {}

    for env_var, field in _ENV_FIELDS.items():
        if val := os.environ.get(env_var):
            kwargs[field] = val
            env_vars[field] = env_var

    try:
        return EventConfig(**kwargs)
    except ValidationError as e:
        for err in e.errors():
            field = str(err["loc"][0])
            log.warning(
                "invalid_event_config",
                env_var=env_vars.get(field, field),
                value=kwargs.pop(field, None),
                fallback=EventConfig.model_fields[field].default,
            )

    return EventConfig(**kwargs)
