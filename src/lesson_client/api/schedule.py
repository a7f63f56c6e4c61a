"""固定课表接口。"""

from lesson_client.api.base import BaseResource, build_query
from lesson_client.schemas.coach import CoachSimple
from lesson_client.schemas.constants import FixedSchedule

SCHEDULE_API_PATHS = {
    "fixed_schedule": "/lesson/api/fixed-schedule/list",
    "coach_simple_list": "/lesson/api/coach/simple/list",
}


class ScheduleApi(BaseResource):
    async def get_fixed_schedule(self, campus_id: int | None = None) -> FixedSchedule:
        query = build_query({"campusId": self._require_campus_id(campus_id)})
        envelope = await self._client.request(f"{SCHEDULE_API_PATHS['fixed_schedule']}{query}")
        return FixedSchedule.model_validate(envelope.data or {})

    async def get_coach_simple_list(self, campus_id: int | None = None) -> list[CoachSimple]:
        query = build_query({"campusId": self._require_campus_id(campus_id)})
        envelope = await self._client.request(f"{SCHEDULE_API_PATHS['coach_simple_list']}{query}")
        return [CoachSimple.model_validate(item) for item in envelope.data or []]
