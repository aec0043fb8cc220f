"""
HRM 客户端 HTTP 层：urllib3 PoolManager 复用连接，JSON 进出。
- 非 2xx 一律抛 ApiClientError(status, message)，message 取响应体的 message/error 字段
- 204 或空响应体返回 None
- login() 成功后自动携带 Authorization: Bearer <token>
不做缓存、重试与请求去重。
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import urllib3

from ..config import settings

logger = logging.getLogger("hrm.client")


class ApiClientError(Exception):
    def __init__(self, status: int, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.body = body

    def __str__(self) -> str:
        return self.message


def _decode(data: bytes) -> Any:
    if not data:
        return None
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return data.decode("utf-8", errors="replace")


def _error_message(status: int, payload: Any) -> str:
    if isinstance(payload, dict):
        msg = payload.get("message") or payload.get("error")
        if msg:
            return str(msg)
    return f"Request failed with status {status}"


class HRMClient:
    """pool 可注入（测试中替换为转发到 Flask test_client 的假连接池）。"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        pool: Any = None,
    ) -> None:
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.token = token if token is not None else settings.API_TOKEN
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.pool = pool if pool is not None else urllib3.PoolManager(num_pools=4, maxsize=8, block=False)

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(self, method: str, path: str, body: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        if params:
            query = {k: v for k, v in params.items() if v is not None}
            if query:
                url += "?" + urlencode(query)
        payload = json.dumps(body).encode("utf-8") if body is not None else None
        try:
            resp = self.pool.request(
                method.upper(),
                url,
                body=payload,
                headers=self._headers(),
                timeout=urllib3.util.Timeout(connect=5, read=self.timeout),
                retries=False,
            )
        except urllib3.exceptions.HTTPError as e:
            logger.warning("request %s %s failed: %s", method, url, e)
            raise ApiClientError(0, f"Network error: {e}") from e
        data = _decode(resp.data)
        if not 200 <= resp.status < 300:
            logger.debug("request %s %s -> %s", method, url, resp.status)
            raise ApiClientError(resp.status, _error_message(resp.status, data), data)
        return None if resp.status == 204 else data

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        return self.request("POST", path, body if body is not None else {})

    def patch(self, path: str, body: Any = None) -> Any:
        return self.request("PATCH", path, body if body is not None else {})

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """调用登录桩并保存 token，后续请求自动带上。"""
        result = self.post("/auth/login", {"email": email, "password": password})
        self.token = result.get("accessToken") or result.get("token")
        return result
