"""Logging configuration with structlog integration.

提供两种日志记录方式：
1. loguru: 用于一般调试日志
2. structlog: 用于关键业务事件的结构化日志
"""

import sys
from typing import Any

import structlog
from loguru import logger

from src.core.config import settings


def setup_logging() -> None:
    """Configure application logging with structlog and loguru."""
    # structlog：业务事件（BusinessEvents）
    _configure_structlog()

    # loguru：运行日志
    _configure_loguru()

    logger.info(f"Logging configured with level: {settings.LOG_LEVEL}")


def _configure_structlog() -> None:
    """配置 structlog 处理器链。"""
    # 根据环境选择渲染器
    if settings.ENVIRONMENT == "local":
        # 本地开发使用人类可读格式
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        # staging / production 输出 JSON，便于日志平台按字段检索
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            # 请求级上下文变量
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            # 调用位置：模块、函数、行号
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.processors.format_exc_info,
            # 最终渲染
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _get_log_level_number(settings.LOG_LEVEL)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _configure_loguru() -> None:
    """配置 loguru。"""
    # Remove default handler
    logger.remove()

    # Console handler at the configured level
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # 非本地环境额外写入按天滚动的文件
    if settings.ENVIRONMENT != "local":
        logger.add(
            "logs/academy_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="30 days",
            level="INFO",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )


def _get_log_level_number(level: str) -> int:
    """将日志级别字符串转换为数字。"""
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 20)


# ============================================================================
# 业务事件日志记录器
# ============================================================================


class BusinessEvents:
    """业务事件日志助手类。

    Usage:
        from src.core.infrastructure.logging import BusinessEvents

        BusinessEvents.content_viewed(content_type="program", content_id=3, views=42)
    """

    _log = structlog.get_logger("business.events")

    @classmethod
    def content_viewed(
        cls,
        content_type: str,
        content_id: int,
        views: int,
        **extra: Any,
    ) -> None:
        """记录详情页浏览事件。"""
        cls._log.info(
            "content_viewed",
            event_type="view",
            content_type=content_type,
            content_id=content_id,
            views=views,
            **extra,
        )

    @classmethod
    def content_saved(
        cls,
        content_type: str,
        content_id: int,
        slug: str,
        status: str,
        created: bool,
        actor_id: str | None = None,
        **extra: Any,
    ) -> None:
        """记录后台内容新建/更新事件。"""
        cls._log.info(
            "content_created" if created else "content_updated",
            event_type="admin",
            content_type=content_type,
            content_id=content_id,
            slug=slug,
            status=status,
            actor_id=actor_id,
            **extra,
        )

    @classmethod
    def content_deleted(
        cls,
        content_type: str,
        content_id: int,
        actor_id: str | None = None,
        **extra: Any,
    ) -> None:
        """记录后台内容删除事件。"""
        cls._log.warning(
            "content_deleted",
            event_type="admin",
            content_type=content_type,
            content_id=content_id,
            actor_id=actor_id,
            **extra,
        )

    @classmethod
    def contact_received(
        cls,
        contact_id: int,
        ip_address: str,
        has_subject: bool,
        **extra: Any,
    ) -> None:
        """记录联系表单提交事件。"""
        cls._log.info(
            "contact_received",
            event_type="contact",
            contact_id=contact_id,
            ip_address=ip_address,
            has_subject=has_subject,
            **extra,
        )

    @classmethod
    def newsletter_subscribed(
        cls,
        subscriber_id: int,
        reactivated: bool,
        **extra: Any,
    ) -> None:
        """记录订阅事件。"""
        cls._log.info(
            "newsletter_subscribed",
            event_type="newsletter",
            subscriber_id=subscriber_id,
            reactivated=reactivated,
            **extra,
        )
