"""首页看板与统计分析接口。

统计类接口返回的图表数据结构随指标变化，原样返回 data。
"""

from typing import Any

from lesson_client.api.base import BaseResource
from lesson_client.schemas.dashboard import DashboardOverview, StatisticsQuery, TodayData

DASHBOARD_API_PATHS = {
    "today": "/lesson/api/dashboard/today",
    "overview": "/lesson/api/dashboard/overview",
    "courses": "/lesson/api/dashboard/courses",
    "refresh": "/lesson/api/dashboard/refresh",
}
STATISTICS_API_PREFIX = "/lesson/api/statistics"

StatisticsParams = StatisticsQuery | dict[str, Any] | None


class DashboardApi(BaseResource):
    async def get_today_data(self) -> TodayData:
        envelope = await self._client.request(DASHBOARD_API_PATHS["today"])
        return TodayData.model_validate(envelope.data)

    async def get_overview_data(self) -> DashboardOverview:
        envelope = await self._client.request(DASHBOARD_API_PATHS["overview"])
        return DashboardOverview.model_validate(envelope.data or {})

    async def get_courses_data(self) -> Any:
        envelope = await self._client.request(DASHBOARD_API_PATHS["courses"])
        return envelope.data

    async def refresh_today_data(self) -> None:
        await self._client.request(DASHBOARD_API_PATHS["refresh"], method="POST")


class StatisticsApi(BaseResource):
    async def _query(self, path: str, params: StatisticsParams) -> Any:
        params = StatisticsQuery.model_validate(params or {})
        body = params.to_payload()
        campus_id = self._resolve_campus_id(params.campus_id)
        if campus_id:
            body["campusId"] = campus_id
        envelope = await self._client.request(
            f"{STATISTICS_API_PREFIX}/{path}", method="POST", body=body
        )
        return envelope.data

    # 学员
    async def get_student_metrics(self, params: StatisticsParams = None) -> Any:
        return await self._query("student/metrics", params)

    async def get_student_growth_trend(self, params: StatisticsParams = None) -> Any:
        return await self._query("student/growth-trend", params)

    async def get_student_renewal_trend(self, params: StatisticsParams = None) -> Any:
        return await self._query("student/renewal-trend", params)

    async def get_student_source_distribution(self, params: StatisticsParams = None) -> Any:
        return await self._query("student/source-distribution", params)

    async def get_new_student_source(self, params: StatisticsParams = None) -> Any:
        return await self._query("student/new-student-source", params)

    # 课程
    async def get_course_metrics(self, params: StatisticsParams = None) -> Any:
        return await self._query("course/metrics", params)

    async def get_course_type_analysis(self, params: StatisticsParams = None) -> Any:
        return await self._query("course/type-analysis", params)

    async def get_course_sales_trend(self, params: StatisticsParams = None) -> Any:
        return await self._query("course/sales-trend", params)

    async def get_course_sales_performance(self, params: StatisticsParams = None) -> Any:
        return await self._query("course/sales-performance", params)

    async def get_course_sales_ranking(self, params: StatisticsParams = None) -> Any:
        return await self._query("course/sales-ranking", params)

    async def get_course_revenue_analysis(self, params: StatisticsParams = None) -> Any:
        return await self._query("course/revenue-analysis", params)

    async def get_course_revenue_distribution(self, params: StatisticsParams = None) -> Any:
        return await self._query("course/revenue-distribution", params)

    # 教练
    async def get_coach_metrics(self, params: StatisticsParams = None) -> Any:
        return await self._query("coach/metrics", params)

    async def get_coach_class_hour_trend(self, params: StatisticsParams = None) -> Any:
        return await self._query("coach/class-hour-trend", params)

    async def get_coach_top5_comparison(self, params: StatisticsParams = None) -> Any:
        return await self._query("coach/top5-comparison", params)

    async def get_coach_type_distribution(self, params: StatisticsParams = None) -> Any:
        return await self._query("coach/type-distribution", params)

    async def get_coach_salary_analysis(self, params: StatisticsParams = None) -> Any:
        return await self._query("coach/salary-analysis", params)

    async def get_coach_performance_ranking(self, params: StatisticsParams = None) -> Any:
        return await self._query("coach/performance-ranking", params)

    # 财务
    async def get_finance_metrics(self, params: StatisticsParams = None) -> Any:
        return await self._query("finance/metrics", params)

    async def get_finance_revenue_cost_trend(self, params: StatisticsParams = None) -> Any:
        return await self._query("finance/revenue-cost-trend", params)

    async def get_finance_cost_structure(self, params: StatisticsParams = None) -> Any:
        return await self._query("finance/cost-structure", params)

    async def get_finance_trend(self, params: StatisticsParams = None) -> Any:
        return await self._query("finance/finance-trend", params)

    async def get_finance_revenue_analysis(self, params: StatisticsParams = None) -> Any:
        return await self._query("finance/revenue-analysis", params)

    async def get_finance_cost_analysis(self, params: StatisticsParams = None) -> Any:
        return await self._query("finance/cost-analysis", params)

    async def get_finance_profit_analysis(self, params: StatisticsParams = None) -> Any:
        return await self._query("finance/profit-analysis", params)

    async def get_student_management_summary(self) -> Any:
        envelope = await self._client.request(f"{STATISTICS_API_PREFIX}/student-management/summary")
        return envelope.data

    async def refresh_stats(self) -> None:
        await self._client.request(f"{STATISTICS_API_PREFIX}/refresh-stats", method="POST")
