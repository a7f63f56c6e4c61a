"""统一的 API 错误类型。

所有失败（网络、超时、HTTP、业务码）都以同一个 ApiError 抛给调用方，
调用方通过 code 区分来源：

- HTTP 非 2xx：code 为 HTTP 状态码
- 业务失败：code 为响应信封里的业务码
- -1：客户端超时
- -2：其他网络 / 未知错误
"""

from typing import Any

TIMEOUT_ERROR_CODE = -1
NETWORK_ERROR_CODE = -2
HTTP_UNAUTHORIZED = 401


class ApiError(Exception):
    """API 调用失败。构造后不可修改，沿调用链原样传递。"""

    def __init__(self, message: str, code: int, data: Any = None) -> None:
        super().__init__(message)
        self._message = message
        self._code = code
        self._data = data

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> int:
        return self._code

    @property
    def data(self) -> Any:
        return self._data

    @property
    def is_timeout(self) -> bool:
        return self._code == TIMEOUT_ERROR_CODE

    @property
    def is_network_error(self) -> bool:
        return self._code == NETWORK_ERROR_CODE

    @property
    def is_unauthorized(self) -> bool:
        return self._code == HTTP_UNAUTHORIZED

    def __repr__(self) -> str:
        return f"ApiError(code={self._code!r}, message={self._message!r})"
