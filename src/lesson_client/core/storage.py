"""客户端本地持久化存储：键值对，语义对齐浏览器的 cookie / localStorage。"""

import json
import os
import threading
from pathlib import Path
from typing import Protocol


class Storage(Protocol):
    """单键读写的持久化存储接口。"""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """进程内存储，测试与一次性脚本使用。"""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class FileStorage:
    """JSON 文件存储，进程重启后仍保留登录态。

    每次读取都从磁盘加载，写入先落临时文件再 replace，保证单键读写原子。
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8").strip()
        if not text:
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"storage file is not a JSON object: {self.path}")
        return data

    def _dump(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        tmp.replace(self.path)

    def get_item(self, key: str) -> str | None:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._dump(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._load()
            if key not in data:
                return
            del data[key]
            self._dump(data)
