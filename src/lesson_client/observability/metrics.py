"""Prometheus 指标：客户端请求量、耗时与按来源分类的错误数。"""

from prometheus_client import Counter, Histogram

api_requests_total = Counter(
    "lesson_api_requests_total",
    "后端 API 调用次数",
    ["method", "outcome"],
)
api_request_seconds = Histogram(
    "lesson_api_request_seconds",
    "后端 API 调用耗时分布（秒）",
    ["method"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)
api_errors_total = Counter(
    "lesson_api_errors_total",
    "按来源分类的失败次数：timeout / network / http / business",
    ["error_type"],
)
