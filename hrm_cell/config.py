# 细胞配置：仅环境变量，启动时读取一次；测试可用 Settings.from_env() 重建
from __future__ import annotations

import os
from typing import Optional


def _flag(name: str, default: str = "0") -> bool:
    return (os.environ.get(name, default) or "").strip().lower() in ("1", "true", "yes")


class Settings:
    """统一配置入口。"""

    def __init__(self) -> None:
        # 服务监听
        self.HOST: str = os.environ.get("HRM_HOST", "0.0.0.0").strip()
        self.PORT: int = int(os.environ.get("PORT", "3001"))

        # JSON 文件数据库路径
        self.DB_PATH: str = os.environ.get("HRM_DB_PATH", "./mock-db.json").strip()

        # Serverless 部署（如 Vercel）不绑定端口，仅暴露 WSGI app
        self.SERVERLESS: bool = _flag("HRM_SERVERLESS") or any(
            (os.environ.get(k) or "").strip() for k in ("VERCEL", "VERCEL_ENV", "VERCEL_URL")
        )

        # 鉴权桩：严格模式下除 /health、/auth/login 外必须携带 Bearer mock token
        self.AUTH_STRICT: bool = _flag("HRM_AUTH_STRICT")
        self.MOCK_TOKEN: str = os.environ.get("HRM_MOCK_TOKEN", "mock-token-123")

        # 当前用户：请求头 X-User-Id 优先
        self.CURRENT_USER_ID: str = os.environ.get("HRM_CURRENT_USER_ID", "1")

        # 状态流转校验，默认关闭（保持 Mock 行为）
        self.STRICT_TRANSITIONS: bool = _flag("HRM_STRICT_TRANSITIONS")

        # 薪资处理桩：固定扣除比例与缺省工资
        self.PAYROLL_DEDUCTION_RATE: float = float(os.environ.get("HRM_PAYROLL_DEDUCTION_RATE", "0"))
        self.DEFAULT_SALARY: float = float(os.environ.get("HRM_DEFAULT_SALARY", "5000"))

        self.LOG_LEVEL: str = os.environ.get("HRM_LOG_LEVEL", "INFO").upper()

        # 客户端
        self.API_URL: str = os.environ.get("HRM_API_URL", "http://localhost:3001").rstrip("/")
        self.API_TIMEOUT: float = float(os.environ.get("HRM_API_TIMEOUT", "30"))
        self.API_TOKEN: Optional[str] = os.environ.get("HRM_API_TOKEN", "").strip() or None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()


settings = Settings()
