#!/usr/bin/env python3
"""HRM 细胞启动入口：Flask 内置服务器；Serverless 环境下只暴露 WSGI app。"""
import logging

from .app import app
from .config import settings
from .store import get_store

logger = logging.getLogger("hrm.run")


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s %(message)s")
    store = get_store()
    if settings.SERVERLESS:
        logger.info("serverless environment detected, not binding a port")
        return
    logger.info("mock server running on http://localhost:%s (database: %s)", settings.PORT, store.path)
    app.run(host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
