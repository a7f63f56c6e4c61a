"""客户端入口：组装配置、存储、登录态、统一请求函数与全部资源模块。"""

import time
from collections.abc import Callable
from typing import Any

import httpx

from lesson_client.api.auth import AuthApi
from lesson_client.api.campus import CampusApi
from lesson_client.api.coach import CoachApi
from lesson_client.api.constants import ConstantsApi
from lesson_client.api.course import CourseApi
from lesson_client.api.dashboard import DashboardApi, StatisticsApi
from lesson_client.api.finance import AttendanceApi, FinanceApi, PaymentApi
from lesson_client.api.institution import InstitutionApi
from lesson_client.api.schedule import ScheduleApi
from lesson_client.api.student import StudentApi
from lesson_client.api.user import UserApi
from lesson_client.core.auth import AuthTokenAccessor, CampusContext
from lesson_client.core.cache import TTLCache
from lesson_client.core.config import Settings, get_settings
from lesson_client.core.http import ApiClient
from lesson_client.core.interceptors import SessionExpiredCallback
from lesson_client.core.storage import FileStorage, Storage
from lesson_client.observability.logging import configure_logging, get_logger

logger = get_logger(__name__)


class LessonClient:
    """
    培训机构管理后台客户端。

    用法：
        async with LessonClient() as client:
            await client.auth.login({"phone": "13800000000", "password": "secret"})
            campuses = await client.campus.get_list({"pageNum": 1, "pageSize": 10})

    每个实例持有独立的存储、校区上下文与课程缓存，互不影响。
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        storage: Storage | None = None,
        on_session_expired: SessionExpiredCallback | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        cache_clock: Callable[[], float] = time.monotonic,
        setup_logging: bool = False,
    ) -> None:
        """
        Args:
            settings: 不传则用 get_settings()
            storage: 登录态与当前校区的持久化存储，不传则写入 settings.storage_path
            on_session_expired: 401 会话过期时的回调，参数为登录路由；可以是 async 函数，后台运行
            transport: 自定义 httpx 传输层，测试时注入
            cache_clock: 课程列表缓存使用的时钟
            setup_logging: 是否按 settings 初始化日志文件输出
        """
        self.settings = settings or get_settings()
        if setup_logging:
            configure_logging(self.settings.log_level, self.settings.log_dir)

        self.storage = storage if storage is not None else FileStorage(self.settings.storage_path)
        self.token_accessor = AuthTokenAccessor(self.storage)
        self.campus_context = CampusContext(self.storage)
        self.api_client = ApiClient(
            self.settings,
            token_accessor=self.token_accessor,
            on_session_expired=on_session_expired,
            transport=transport,
        )
        self.course_cache: TTLCache[Any] = TTLCache(self.settings.course_cache_ttl_ms, clock=cache_clock)

        ctx = self.campus_context
        self.auth = AuthApi(self.api_client, self.token_accessor)
        self.campus = CampusApi(self.api_client, ctx)
        self.course = CourseApi(self.api_client, ctx, cache=self.course_cache)
        self.coach = CoachApi(self.api_client, ctx)
        self.student = StudentApi(self.api_client, ctx)
        self.institution = InstitutionApi(self.api_client, ctx)
        self.user = UserApi(self.api_client, ctx)
        self.constants = ConstantsApi(self.api_client, ctx)
        self.schedule = ScheduleApi(self.api_client, ctx)
        self.payment = PaymentApi(self.api_client, ctx)
        self.finance = FinanceApi(self.api_client, ctx)
        self.attendance = AttendanceApi(self.api_client, ctx)
        self.statistics = StatisticsApi(self.api_client, ctx)
        self.dashboard = DashboardApi(self.api_client, ctx)

    async def aclose(self) -> None:
        await self.api_client.aclose()
        logger.info("lesson_client_closed")

    async def __aenter__(self) -> "LessonClient":
        logger.info("lesson_client_started", env=self.settings.env, api_host=self.settings.api_host)
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
