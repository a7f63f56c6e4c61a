"""培训机构管理后台 API 客户端。"""

from lesson_client.client import LessonClient
from lesson_client.core.errors import ApiError

__all__ = ["ApiError", "LessonClient"]
