"""Pydantic 数据模型的单元测试。"""

import pytest
from pydantic import ValidationError

from lesson_client.schemas.auth import LoginResult, RegisterParams
from lesson_client.schemas.campus import Campus, CampusQueryParams
from lesson_client.schemas.common import (
    ApiResponse,
    PaginatedResult,
    PaginationParams,
    is_success_code,
)
from lesson_client.schemas.constants import FixedSchedule
from lesson_client.schemas.student import Student, StudentCreateParams, StudentUpdateParams


# ---------------------------------------------------------------------------
# common schemas
# ---------------------------------------------------------------------------


class TestSuccessCode:
    @pytest.mark.parametrize("code", [0, 200])
    def test_success(self, code):
        assert is_success_code(code)

    @pytest.mark.parametrize("code", [1, 201, 500, -1, None, "200", True, False, 200.0])
    def test_not_success(self, code):
        assert not is_success_code(code)


class TestApiResponse:
    def test_ok(self):
        r = ApiResponse(code=200, message="ok", data={"id": 1})
        assert r.ok
        assert r.data == {"id": 1}

    def test_null_message(self):
        r = ApiResponse.model_validate({"code": 0, "message": None, "data": None})
        assert r.message is None
        assert r.ok

    def test_extra_kept(self):
        r = ApiResponse.model_validate({"code": 0, "data": None, "timestamp": 123})
        assert r.model_dump()["timestamp"] == 123

    def test_code_required(self):
        with pytest.raises(ValidationError):
            ApiResponse.model_validate({"data": 1})


class TestPaginatedResult:
    def test_page_num_shape(self):
        page = PaginatedResult[Campus].model_validate(
            {"list": [{"id": 1, "name": "A"}], "total": 1, "pageNum": 1, "pageSize": 10}
        )
        assert page.items[0].name == "A"
        assert page.total == 1
        assert page.page_num == 1
        assert page.page_size == 10
        assert page.pages == 1

    def test_page_variant_folded(self):
        page = PaginatedResult[Campus].model_validate(
            {"list": [], "total": 25, "page": 3, "pageSize": 10}
        )
        assert page.page_num == 3
        assert page.pages == 3

    def test_null_list_and_total(self):
        page = PaginatedResult[Campus].model_validate({"list": None, "total": None})
        assert page.items == []
        assert page.total == 0
        assert page.pages is None

    def test_total_independent_of_items(self):
        page = PaginatedResult[Campus].model_validate(
            {"list": [{"id": 1, "name": "A"}], "total": 57, "pageNum": 2, "pageSize": 1}
        )
        assert len(page.items) == 1
        assert page.total == 57

    def test_dump_uses_wire_names(self):
        page = PaginatedResult[Campus].model_validate(
            {"list": [{"id": 1, "name": "A"}], "total": 1, "pageNum": 1, "pageSize": 10}
        )
        dumped = page.model_dump(by_alias=True, exclude_none=True)
        assert dumped["list"] == [{"id": 1, "name": "A"}]
        assert dumped["pageNum"] == 1


class TestPaginationParams:
    def test_defaults(self):
        assert PaginationParams().to_payload() == {"pageNum": 1, "pageSize": 10}

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            PaginationParams(page_num=0)

    def test_query_params_omit_none(self):
        params = CampusQueryParams.model_validate({"keyword": "浦东", "pageNum": 2})
        assert params.to_payload() == {"keyword": "浦东", "pageNum": 2, "pageSize": 10}


# ---------------------------------------------------------------------------
# auth schemas
# ---------------------------------------------------------------------------


def _register(**overrides):
    data = {
        "password": "secret1",
        "institutionName": "星火体育",
        "managerName": "王五",
        "managerPhone": "13800000000",
    }
    data.update(overrides)
    return RegisterParams.model_validate(data)


class TestRegisterParams:
    def test_valid(self):
        params = _register()
        assert params.to_payload()["managerPhone"] == "13800000000"

    def test_missing_required(self):
        with pytest.raises(ValidationError, match="请填写所有必填字段"):
            _register(managerName="  ")

    @pytest.mark.parametrize("phone", ["12800000000", "1380000000", "138000000001", "abc"])
    def test_bad_phone(self, phone):
        with pytest.raises(ValidationError, match="请输入正确的手机号"):
            _register(managerPhone=phone)

    def test_short_password(self):
        with pytest.raises(ValidationError, match="密码长度不能少于6位"):
            _register(password="12345")


class TestLoginResult:
    def test_identity_excludes_token(self):
        result = LoginResult.model_validate(
            {"token": "tok", "userId": 1, "phone": "13800000000", "roleName": "管理员"}
        )
        identity = result.identity()
        assert "token" not in identity
        assert identity["userId"] == 1
        assert identity["roleName"] == "管理员"


# ---------------------------------------------------------------------------
# student schemas
# ---------------------------------------------------------------------------


class TestStudentNormalization:
    def test_new_field_names_win(self):
        s = Student.model_validate(
            {
                "id": 1,
                "name": "旧名字",
                "studentId": 5,
                "studentName": "李雷",
                "studentGender": "MALE",
                "studentAge": 10,
                "studentPhone": "13900000000",
                "enrollmentDate": "2024-01-01",
                "endDate": "2024-12-31",
                "lastClassTime": "2024-03-01",
                "remainingHours": "12.5",
            }
        )
        assert s.id == 5
        assert s.name == "李雷"
        assert s.gender == "MALE"
        assert s.age == 10
        assert s.phone == "13900000000"
        assert s.enroll_date == "2024-01-01"
        assert s.expire_date == "2024-12-31"
        assert s.last_class_date == "2024-03-01"
        assert s.remaining_classes == 12.5

    def test_old_field_names_kept(self):
        s = Student.model_validate({"id": 2, "name": "韩梅梅", "enrollDate": "2023-09-01"})
        assert s.id == 2
        assert s.name == "韩梅梅"
        assert s.enroll_date == "2023-09-01"
        assert s.courses == []

    def test_course_type_fallback(self):
        assert Student.model_validate({"id": 1, "courseTypeName": "篮球"}).course_type == "篮球"
        s = Student.model_validate({"id": 1, "courseType": "足球", "courseTypeName": "篮球"})
        assert s.course_type == "足球"

    def test_fixed_schedule_parsed(self):
        s = Student.model_validate(
            {
                "id": 1,
                "fixedSchedule": '[{"weekday": "周一", "from": "09:00", "to": "10:00"}, {"weekday": "周三"}]',
            }
        )
        assert len(s.schedule_times) == 1
        assert s.schedule_times[0].weekday == "周一"
        assert s.schedule_times[0].time == "09:00"
        assert s.schedule_times[0].end_time == "10:00"

    def test_fixed_schedule_invalid_json(self):
        s = Student.model_validate({"id": 1, "fixedSchedule": "{broken"})
        assert s.schedule_times == []

    def test_null_courses(self):
        assert Student.model_validate({"id": 1, "courses": None}).courses == []

    def test_extra_fields_kept(self):
        s = Student.model_validate({"id": 1, "wechat": "lilei"})
        assert s.model_dump()["wechat"] == "lilei"


class TestStudentPayloads:
    def test_create_requires_course(self):
        with pytest.raises(ValidationError):
            StudentCreateParams.model_validate(
                {
                    "studentInfo": {"name": "李雷", "gender": "MALE", "phone": "13900000000"},
                    "courseInfoList": [],
                }
            )

    def test_update_syncs_course_id(self):
        params = StudentUpdateParams.model_validate(
            {
                "studentId": 1,
                "courseId": 3,
                "studentInfo": {"name": "李雷", "gender": "MALE", "phone": "13900000000"},
                "courseInfo": {"courseId": 9},
            }
        )
        payload = params.to_payload()
        assert payload["courseId"] == 3
        assert payload["courseInfo"]["courseId"] == 3
        assert payload["studentInfo"]["name"] == "李雷"

    @pytest.mark.parametrize("field", ["studentId", "courseId"])
    def test_update_rejects_non_positive_ids(self, field):
        data = {
            "studentId": 1,
            "courseId": 3,
            "studentInfo": {"name": "李雷", "gender": "MALE", "phone": "13900000000"},
            "courseInfo": {"courseId": 3},
        }
        data[field] = 0
        with pytest.raises(ValidationError):
            StudentUpdateParams.model_validate(data)


class TestFixedSchedule:
    def test_courses_at(self):
        fs = FixedSchedule.model_validate(
            {
                "timeSlots": ["09:00-10:00"],
                "days": ["周一"],
                "schedule": {"09:00-10:00": {"周一": [{"courseName": "篮球", "coachName": "张教练"}]}},
            }
        )
        courses = fs.courses_at("09:00-10:00", "周一")
        assert courses[0].course_name == "篮球"
        assert fs.courses_at("09:00-10:00", "周二") == []
