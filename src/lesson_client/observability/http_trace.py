"""出站请求日志辅助：请求 / 响应体预览的脱敏与截断。"""

import json
from typing import Any

# 请求/响应体日志最大长度（字符），超出截断
MAX_BODY_LOG_LEN = 2048
# 需脱敏的键名（不区分大小写）
SENSITIVE_KEYS = frozenset(
    {"password", "oldpassword", "newpassword", "token", "authorization", "secret", "api_key", "apikey"}
)


def mask_sensitive(obj: Any) -> Any:
    """递归脱敏：将敏感字段值替换为 ***。"""
    if isinstance(obj, dict):
        return {
            k: "***" if (isinstance(k, str) and k.lower() in SENSITIVE_KEYS) else mask_sensitive(v)
            for k, v in obj.items()
        }
    if isinstance(obj, list):
        return [mask_sensitive(i) for i in obj]
    return obj


def truncate(s: str, max_len: int = MAX_BODY_LOG_LEN) -> str:
    if len(s) <= max_len:
        return s
    return s[:max_len] + "...[truncated]"


def body_preview(body: Any) -> str | None:
    """生成可打印的请求/响应体预览：dict/list 直接脱敏，字节或字符串按 JSON 尝试解析后脱敏。"""
    if body is None:
        return None
    if isinstance(body, (dict, list)):
        return truncate(json.dumps(mask_sensitive(body), ensure_ascii=False, default=str))
    if isinstance(body, bytes):
        text = body.decode("utf-8", errors="replace")
    else:
        text = str(body)
    text = text.strip()
    if not text:
        return None
    try:
        obj = json.loads(text)
    except json.JSONDecodeError:
        return truncate(text)
    return truncate(json.dumps(mask_sensitive(obj), ensure_ascii=False, default=str))


def mask_headers(headers: dict[str, str]) -> dict[str, str]:
    """日志中隐藏 Authorization / Cookie 的值。"""
    hidden = {"authorization", "cookie"}
    return {k: ("***" if k.lower() in hidden else v) for k, v in headers.items()}
