"""日志配置：loguru 运行日志与 structlog 业务事件。"""

import pytest
import structlog
from loguru import logger

from src.core.config import settings
from src.core.infrastructure import logging as app_logging
from src.core.infrastructure.logging import BusinessEvents, setup_logging


@pytest.fixture
def local_logging(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "local")
    monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
    yield
    structlog.reset_defaults()
    logger.remove()


def test_log_level_numbers():
    assert app_logging._get_log_level_number("debug") == 10
    assert app_logging._get_log_level_number("ERROR") == 40
    assert app_logging._get_log_level_number("verbose") == 20


def test_local_setup_respects_level(local_logging):
    setup_logging()
    messages: list[str] = []
    logger.add(messages.append, level="WARNING", format="{level}:{message}")

    logger.info("hidden")
    logger.warning("shown")

    assert [m.strip() for m in messages] == ["WARNING:shown"]


def test_business_events_after_setup(local_logging):
    setup_logging()

    BusinessEvents.content_deleted(content_type="contact", content_id=1, actor_id="1")
    BusinessEvents.content_viewed(content_type="post", content_id=2, views=3)
