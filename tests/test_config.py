"""EventConfig + load_event_config 单元测试

验证环境变量映射、默认值、非法取值降级。
"""

import pytest
from pydantic import ValidationError
from qqbot.event.config import EventConfig, load_event_config
from structlog.testing import capture_logs

_ENV_VARS = ("QQBOT_EVENT_LOG_RECEIVED", "QQBOT_EVENT_LOG_PREVIEW_LENGTH")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestEventConfig:
    """EventConfig 数据模型测试"""

    def test_default_values(self):
        config = EventConfig()
        assert config.log_received is True
        assert config.log_preview_length == 200

    def test_negative_preview_length_rejected(self):
        with pytest.raises(ValidationError):
            EventConfig(log_preview_length=-1)


class TestLoadEventConfig:
    """load_event_config() 环境变量映射测试"""

    def test_default_when_no_env(self):
        config = load_event_config()
        assert config == EventConfig()

    @pytest.mark.parametrize("value", ["false", "0", "No", "off"])
    def test_log_received_disabled(self, monkeypatch, value):
        monkeypatch.setenv("QQBOT_EVENT_LOG_RECEIVED", value)
        assert load_event_config().log_received is False

    def test_invalid_log_received_uses_default(self, monkeypatch):
        monkeypatch.setenv("QQBOT_EVENT_LOG_RECEIVED", "maybe")
        assert load_event_config().log_received is True

    def test_preview_length_from_env(self, monkeypatch):
        monkeypatch.setenv("QQBOT_EVENT_LOG_PREVIEW_LENGTH", "50")
        assert load_event_config().log_preview_length == 50

    @pytest.mark.parametrize("value", ["abc", "-5"])
    def test_invalid_preview_length_uses_default(self, monkeypatch, value):
        """非法值不阻塞启动，使用默认值"""
        monkeypatch.setenv("QQBOT_EVENT_LOG_PREVIEW_LENGTH", value)
        assert load_event_config().log_preview_length == 200

    def test_invalid_value_logged_and_other_fields_kept(self, monkeypatch):
        """单个非法值只回退该字段，并记录 warning"""
        monkeypatch.setenv("QQBOT_EVENT_LOG_RECEIVED", "off")
        monkeypatch.setenv("QQBOT_EVENT_LOG_PREVIEW_LENGTH", "abc")

        with capture_logs() as logs:
            config = load_event_config()

        assert config.log_received is False
        assert config.log_preview_length == 200
        assert logs == [
            {
                "event": "invalid_event_config",
                "log_level": "warning",
                "env_var": "QQBOT_EVENT_LOG_PREVIEW_LENGTH",
                "value": "abc",
                "fallback": 200,
            }
        ]
