"""
数据获取状态封装：把一次 fetch 包装成 loading / error / data 三态，refetch() 重新拉取。
- 请求失败或响应不符合模型时 error 记录异常消息，data 保留上一次成功的结果
- 不做缓存、去重、乐观更新与重试
CollectionHook 额外提供 create / update / remove，成功后同步本地列表。
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import ValidationError

from .http import ApiClientError

logger = logging.getLogger("hrm.client")

T = TypeVar("T")


def _record_id(item: Any) -> Any:
    return item.get("id") if isinstance(item, dict) else getattr(item, "id", None)


class ResourceHook(Generic[T]):
    def __init__(self, fetcher: Callable[[], T], immediate: bool = True) -> None:
        self._fetcher = fetcher
        self.data: Optional[T] = None
        self.error: Optional[str] = None
        self.loading: bool = False
        if immediate:
            self.refetch()

    def refetch(self) -> Optional[T]:
        self.loading = True
        self.error = None
        try:
            self.data = self._fetcher()
        except (ApiClientError, ValidationError) as e:
            self.error = str(e)
            logger.warning("fetch failed: %s", e)
        finally:
            self.loading = False
        return self.data


class CollectionHook(ResourceHook[List[Any]]):
    """service 需提供 list/create/update/delete（见 ResourceService）。"""

    def __init__(self, service: Any, immediate: bool = True, **filters: Any) -> None:
        self.service = service
        super().__init__(lambda: service.list(**filters), immediate=immediate)

    def _items(self) -> List[Any]:
        if self.data is None:
            self.data = []
        return self.data

    def create(self, payload: dict) -> Any:
        created = self.service.create(payload)
        self._items().append(created)
        return created

    def update(self, record_id: str, changes: dict) -> Any:
        updated = self.service.update(record_id, changes)
        items = self._items()
        for i, item in enumerate(items):
            if _record_id(item) == record_id:
                items[i] = updated
                break
        return updated

    def remove(self, record_id: str) -> None:
        self.service.delete(record_id)
        self.data = [item for item in self._items() if _record_id(item) != record_id]
