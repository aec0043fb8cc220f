"""
通用资源 handler：为一个集合在 Blueprint 上注册 list/get/create/update/delete。
- list：整集合，可按查询参数等值过滤（?status=PENDING），不分页
- get：按 id 线性查找，不存在 404
- create：生成 id 与时间戳，追加并回写，201
- update：浅合并并推进 updatedAt，回写，200；不存在 404
- delete：删除并回写，204；不存在 404
领域动作（approve/check-in 等）由各 routes 模块手写。
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

from flask import Blueprint, jsonify, request

from .dependencies import current_settings, current_store, current_user_id, human_audit, json_body
from .errors import not_found, rule_violation
from .store import now_iso
from .validators import validate_transition

Record = Dict[str, Any]
Overrides = Callable[[Record], Record]
Serializer = Callable[[Record], Record]

ALL_OPS = ("list", "get", "create", "update", "delete")


def query_filters() -> Dict[str, str]:
    return {k: v for k, v in request.args.items() if v != ""}


def apply_filters(records: Iterable[Record], filters: Dict[str, str]) -> List[Record]:
    if not filters:
        return list(records)
    return [r for r in records if all(str(r.get(k)) == v for k, v in filters.items())]


def check_status_change(collection: str, record: Record, target: Optional[str]) -> None:
    """严格模式下校验状态流转，非法时抛 BUSINESS_RULE_VIOLATION。"""
    if target is None or not current_settings().STRICT_TRANSITIONS:
        return
    err = validate_transition(collection, record.get("status"), target)
    if err:
        raise rule_violation(err)


def get_or_404(collection: str, record_id: str, label: str) -> Record:
    record = current_store().find(collection, record_id)
    if record is None:
        raise not_found(label)
    return record


def register_crud(
    bp: Blueprint,
    url: str,
    collection: str,
    label: str,
    ops: Iterable[str] = ALL_OPS,
    overrides: Optional[Overrides] = None,
    serialize: Optional[Serializer] = None,
    timestamps: bool = True,
    endpoint: Optional[str] = None,
) -> None:
    """在 bp 上注册 url 与 url/<id> 的 CRUD 路由。overrides(body) 返回的字段在创建时覆盖请求体。"""
    ops = set(ops)
    name = endpoint or collection
    out = serialize or (lambda r: r)

    if "list" in ops:
        def list_view():
            data = apply_filters(current_store().collection(collection), query_filters())
            return jsonify([out(r) for r in data]), 200
        bp.add_url_rule(url, f"{name}_list", list_view, methods=["GET"])

    if "get" in ops:
        def get_view(record_id: str):
            return jsonify(out(get_or_404(collection, record_id, label))), 200
        bp.add_url_rule(f"{url}/<record_id>", f"{name}_get", get_view, methods=["GET"])

    if "create" in ops:
        def create_view():
            body = json_body()
            extra = overrides(body) if overrides else {}
            record = current_store().insert(collection, body, timestamps=timestamps, **extra)
            human_audit(f"created {label} (id={record['id']})")
            return jsonify(out(record)), 201
        bp.add_url_rule(url, f"{name}_create", create_view, methods=["POST"])

    if "update" in ops:
        def update_view(record_id: str):
            body = json_body()
            record = get_or_404(collection, record_id, label)
            check_status_change(collection, record, body.get("status"))
            record = current_store().update(collection, record_id, body, timestamps=timestamps)
            human_audit(f"updated {label} {record_id}")
            return jsonify(out(record)), 200
        bp.add_url_rule(f"{url}/<record_id>", f"{name}_update", update_view, methods=["PATCH"])

    if "delete" in ops:
        def delete_view(record_id: str):
            if not current_store().delete(collection, record_id):
                raise not_found(label)
            human_audit(f"deleted {label} {record_id}")
            return "", 204
        bp.add_url_rule(f"{url}/<record_id>", f"{name}_delete", delete_view, methods=["DELETE"])


def set_status(collection: str, record_id: str, label: str, status: str, **fields: Any) -> Record:
    """领域动作通用写法：校验存在与流转后写入 status 及附带字段。"""
    record = get_or_404(collection, record_id, label)
    check_status_change(collection, record, status)
    record = current_store().update(collection, record_id, {"status": status, **fields})
    human_audit(f"set {label} {record_id} status to {status}")
    return record


def approve(collection: str, record_id: str, label: str) -> Record:
    return set_status(collection, record_id, label, "APPROVED", approvedBy=current_user_id(), approvedAt=now_iso())
