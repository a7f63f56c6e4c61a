"""客户端结构化日志（structlog）。

每次后端调用都包在 api_call_context 里，期间产生的日志自动带上 call_id、http_method、api_path；
落盘前按与请求体预览相同的敏感键名脱敏，token、password 不会出现在日志文件里。
"""

import json
import logging
import logging.handlers
import os
from collections.abc import Iterator
from contextlib import contextmanager
from urllib.parse import urlsplit
from uuid import uuid4

import structlog

from lesson_client.observability.http_trace import mask_sensitive

CLIENT_LOGGER_NAME = "lesson_client"
ALL_LOG_FILE = "client.log"
ERROR_LOG_FILE = "error.log"


@contextmanager
def api_call_context(method: str, url: str) -> Iterator[str]:
    """绑定一次后端调用的上下文，退出时解绑；返回本次调用的 call_id。"""
    call_id = uuid4().hex[:16]
    with structlog.contextvars.bound_contextvars(
        call_id=call_id,
        http_method=method,
        api_path=urlsplit(url).path,
    ):
        yield call_id


def mask_event_secrets(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    return mask_sensitive(event_dict)


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        mask_event_secrets,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _rotating_handler(
    path: str, level: int, backup_hours: int, formatter: logging.Formatter
) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=path,
        when="H",
        interval=1,
        backupCount=backup_hours,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def configure_logging(log_level: str = "INFO", log_dir: str = "./logs") -> None:
    """
    把 lesson_client.* 的日志按小时轮转写入 log_dir，JSON 一行一条。
    client.log 保留约 7 天，error.log 仅 ERROR、保留约 30 天。重复调用替换 handler，不会叠加。
    """
    os.makedirs(log_dir, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(
            serializer=lambda obj, **kw: json.dumps(obj, ensure_ascii=False, **kw)
        ),
        foreign_pre_chain=_shared_processors(),
    )

    client_logger = logging.getLogger(CLIENT_LOGGER_NAME)
    client_logger.setLevel(level)
    client_logger.handlers.clear()
    client_logger.addHandler(_rotating_handler(os.path.join(log_dir, ALL_LOG_FILE), level, 24 * 7, formatter))
    client_logger.addHandler(
        _rotating_handler(os.path.join(log_dir, ERROR_LOG_FILE), logging.ERROR, 24 * 30, formatter)
    )
    client_logger.propagate = False

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
