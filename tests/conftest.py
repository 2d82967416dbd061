"""
pytest 配置
"""
import os

import pytest

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("MOIRA_BASE_URL", "http://moira.test")


@pytest.fixture(scope="session")
def test_settings():
    """测试配置"""
    from core.config import Settings
    return Settings()


@pytest.fixture
def metric_factory():
    """构造 Metric"""
    from sdk.moira_client.models import Metric

    def make(state="OK", value=None, event_timestamp=None, **kwargs):
        return Metric(state=state, value=value, event_timestamp=event_timestamp, **kwargs)

    return make
