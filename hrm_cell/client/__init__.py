"""HRM 客户端数据访问层：HTTP 封装、按资源的服务、数据获取状态与看板数据构建。"""
from .http import ApiClientError, HRMClient
from .hooks import CollectionHook, ResourceHook

__all__ = ["ApiClientError", "HRMClient", "CollectionHook", "ResourceHook"]
