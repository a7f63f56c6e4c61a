"""资源模块聚合。"""

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

__all__ = [
    "AttendanceApi",
    "AuthApi",
    "CampusApi",
    "CoachApi",
    "ConstantsApi",
    "CourseApi",
    "DashboardApi",
    "FinanceApi",
    "InstitutionApi",
    "PaymentApi",
    "ScheduleApi",
    "StatisticsApi",
    "StudentApi",
    "UserApi",
]
