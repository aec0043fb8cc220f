"""
HRM JSON 文件存储：全部集合常驻内存，每次变更整文件回写。
- load：文件存在则解析；不存在或解析失败则重新生成种子数据并写出。
- save：整体序列化覆盖文件；写失败只记日志，不回滚内存变更。
不做事务、索引与外键校验；id 在集合内唯一仅由生成方式保证。
"""
from __future__ import annotations

import json
import logging
import random
import string
import threading
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

logger = logging.getLogger("hrm.store")

COLLECTIONS: tuple = (
    "employees",
    "departments",
    "projects",
    "positions",
    "skills",
    "leaveTypes",
    "leaveRequests",
    "leaveBalances",
    "attendance",
    "trainings",
    "goals",
    "performanceReviews",
    "feedback",
    "notifications",
    "achievements",
    "projectAllocations",
    "mentoringRelationships",
    "policies",
    "policyAcknowledgments",
    "separations",
    "expenses",
    "expenseReports",
    "payrolls",
    "conferenceRooms",
    "roomBookings",
    "travelRequests",
    "surveys",
    "surveyResponses",
    "contractors",
    "contractLabor",
    "contractLaborAttendance",
    "taskAllocations",
    "workSchedules",
    "knowledgeArticles",
    "skillProficiencies",
)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_TS_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def new_id(length: int = 11) -> str:
    """短随机 id（base36 小写），与前端 Math.random().toString(36) 风格一致。"""
    return "".join(random.choice(_ID_ALPHABET) for _ in range(length))


def now_iso() -> str:
    return datetime.now(timezone.utc).strftime(_TS_FORMAT)[:-3] + "Z"


def _next_ts(previous: Any) -> str:
    """返回严格晚于 previous 的时间戳（同一毫秒内连续更新时顺延 1ms）。"""
    ts = now_iso()
    if not isinstance(previous, str) or ts > previous:
        return ts
    try:
        prev = datetime.strptime(previous.rstrip("Z"), _TS_FORMAT)
    except ValueError:
        return ts
    return (prev + timedelta(milliseconds=1)).strftime(_TS_FORMAT)[:-3] + "Z"


def empty_db() -> Dict[str, List[dict]]:
    return {name: [] for name in COLLECTIONS}


class JsonStore:
    def __init__(self, path: str, seed: Optional[Callable[[], Dict[str, List[dict]]]] = None) -> None:
        self.path = Path(path)
        self.data: Dict[str, List[dict]] = empty_db()
        self._seed = seed
        self._lock = threading.RLock()

    # ---------- 持久化 ----------
    def load(self) -> None:
        with self._lock:
            try:
                if self.path.exists():
                    raw = json.loads(self.path.read_text(encoding="utf-8"))
                    if not isinstance(raw, dict):
                        raise ValueError("database root must be an object of collections")
                    for name in COLLECTIONS:
                        if not isinstance(raw.get(name), list):
                            raw[name] = []
                    self.data = raw
                    logger.info("database loaded from %s", self.path)
                    return
                self._reseed()
                logger.info("new database created and seeded at %s", self.path)
            except (OSError, ValueError) as e:
                logger.error("error loading database %s: %s", self.path, e)
                self._reseed()

    def _reseed(self) -> None:
        if self._seed is None:
            from .seed import seed_data
            self._seed = seed_data
        self.data = empty_db()
        self.data.update(self._seed())
        self.save()

    def save(self) -> bool:
        with self._lock:
            try:
                if self.path.parent and not self.path.parent.exists():
                    self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text(json.dumps(self.data, ensure_ascii=False, indent=2), encoding="utf-8")
                return True
            except (OSError, TypeError, ValueError) as e:
                logger.error("error saving database %s: %s", self.path, e)
                return False

    # ---------- 读 ----------
    def collection(self, name: str) -> List[dict]:
        if name not in self.data:
            self.data[name] = []
        return self.data[name]

    def find(self, name: str, record_id: str) -> Optional[dict]:
        for r in self.collection(name):
            if r.get("id") == record_id:
                return r
        return None

    def filter(self, name: str, **fields: Any) -> List[dict]:
        return [r for r in self.collection(name) if all(r.get(k) == v for k, v in fields.items())]

    # ---------- 写（均回写文件） ----------
    def insert(self, name: str, body: Optional[dict] = None, timestamps: bool = True, **overrides: Any) -> dict:
        """新建记录：生成 id，body 浅拷贝，overrides 覆盖 body；可选打 createdAt/updatedAt。"""
        record: Dict[str, Any] = {"id": new_id()}
        record.update({k: v for k, v in (body or {}).items() if k != "id"})
        record.update(overrides)
        if timestamps:
            now = now_iso()
            record["createdAt"] = now
            record["updatedAt"] = now
        with self._lock:
            self.collection(name).append(record)
            self.save()
        return record

    def extend(self, name: str, records: Iterable[dict]) -> List[dict]:
        records = list(records)
        with self._lock:
            self.collection(name).extend(records)
            self.save()
        return records

    def update(self, name: str, record_id: str, changes: Optional[dict] = None, timestamps: bool = True) -> Optional[dict]:
        """浅合并 changes 到已有记录（原地修改），可选推进 updatedAt；不存在返回 None。"""
        with self._lock:
            record = self.find(name, record_id)
            if record is None:
                return None
            record.update({k: v for k, v in (changes or {}).items() if k != "id"})
            if timestamps:
                record["updatedAt"] = _next_ts(record.get("updatedAt"))
            self.save()
            return record

    def delete(self, name: str, record_id: str) -> bool:
        with self._lock:
            items = self.collection(name)
            for i, r in enumerate(items):
                if r.get("id") == record_id:
                    del items[i]
                    self.save()
                    return True
            return False


_store: Optional[JsonStore] = None
_store_lock = threading.Lock()


def get_store() -> JsonStore:
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                from .config import settings
                s = JsonStore(settings.DB_PATH)
                s.load()
                _store = s
    return _store


def reset_store() -> None:
    global _store
    _store = None
