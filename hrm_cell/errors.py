# 统一错误：handler 抛出 ApiError，由 app 的 errorhandler 渲染为 code/message/details/requestId
from __future__ import annotations


class ApiError(Exception):
    def __init__(self, status: int, code: str, message: str, details: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.message = message
        self.details = details


def not_found(label: str) -> ApiError:
    return ApiError(404, "NOT_FOUND", f"{label} not found")


def bad_request(message: str, details: str = "") -> ApiError:
    return ApiError(400, "BAD_REQUEST", message, details)


def unauthorized(message: str) -> ApiError:
    return ApiError(401, "UNAUTHORIZED", message)


def rule_violation(message: str, details: str = "") -> ApiError:
    return ApiError(400, "BUSINESS_RULE_VIOLATION", message, details)
